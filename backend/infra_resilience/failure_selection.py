# backend/infra_resilience/failure_selection.py

from __future__ import annotations
import math
from typing import Iterable, List, Optional

from .config import (
    EVENT_PRIMARY_TYPES,
    HIGH_SEVERITY,
    MEDIUM_FAILURE_FRACTION,
    MEDIUM_SEVERITY,
)
from .errors import InvalidRequest
from .models import Node


def select_candidates(nodes: Iterable[Node], event_type: str) -> List[Node]:
    """
    Nodes whose type is a primary target of the event, in canonical order.
    """
    if event_type not in EVENT_PRIMARY_TYPES:
        raise InvalidRequest(f"Unknown event type: {event_type}")
    primary_types = EVENT_PRIMARY_TYPES[event_type]
    return [n for n in nodes if n.type in primary_types]


def select_primary_failures(
    nodes: Iterable[Node],
    event_type: str,
    severity: int,
    explicit_ids: Optional[List[str]] = None,
) -> List[str]:
    """
    Central dispatcher: event type + severity -> ids of nodes that fail directly.

    An explicit id list overrides the event entirely and is returned as given.
    """
    if explicit_ids:
        return list(explicit_ids)

    candidates = select_candidates(nodes, event_type)

    if severity >= HIGH_SEVERITY:
        chosen = candidates
    elif severity >= MEDIUM_SEVERITY:
        count = min(math.ceil(len(candidates) * MEDIUM_FAILURE_FRACTION), len(candidates))
        chosen = candidates[:count]
    else:
        chosen = candidates[:1]

    return [n.id for n in chosen]
