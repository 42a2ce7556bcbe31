# backend/infra_resilience/experiments.py

from __future__ import annotations
import logging
from typing import Iterable, List, Optional

import pandas as pd

from .config import EVENT_TYPES, SEVERITY_MAX, SEVERITY_MIN
from .errors import InvalidRequest
from .graph_loader import load_seed_graph
from .models import GraphSnapshot, SimulationResult
from .simulation import simulate_event

logger = logging.getLogger(__name__)


def validate_request(event_type: Optional[str], severity: Optional[int]) -> None:
    if not event_type or severity is None:
        raise InvalidRequest("event_type and severity are required")
    if event_type not in EVENT_TYPES:
        raise InvalidRequest(f"Unknown event type: {event_type}")
    if isinstance(severity, bool) or not isinstance(severity, int):
        raise InvalidRequest("severity must be an integer")
    if severity < SEVERITY_MIN or severity > SEVERITY_MAX:
        raise InvalidRequest(
            f"severity must be between {SEVERITY_MIN} and {SEVERITY_MAX}"
        )


def run_simulation(
    event_type: str,
    severity: int,
    affected_node_ids: Optional[List[str]] = None,
    snapshot: Optional[GraphSnapshot] = None,
) -> SimulationResult:
    """
    Validate a request, then simulate it against the canonical graph (or the
    snapshot given).
    """
    validate_request(event_type, severity)
    if snapshot is None:
        snapshot = load_seed_graph()

    result = simulate_event(snapshot, event_type, severity, affected_node_ids or [])
    logger.info(
        "Simulated %s severity=%d: %d failed, %d cascaded, %d rerouted, %d unresolvable",
        event_type,
        severity,
        len(result.failed_nodes),
        len(result.cascaded_nodes),
        len(result.rerouted_edges),
        len(result.unresolvable_nodes),
    )
    return result


def run_severity_sweep(
    event_type: str,
    severities: Iterable[int],
    snapshot: Optional[GraphSnapshot] = None,
) -> pd.DataFrame:
    """
    Run the same event at each severity level and tabulate the outcome sizes.
    Every row is an independent simulation.
    """
    if snapshot is None:
        snapshot = load_seed_graph()

    rows = []
    for sev in severities:
        result = run_simulation(event_type, sev, snapshot=snapshot)
        rows.append(
            {
                "event_type": event_type,
                "severity": sev,
                "n_failed": len(result.failed_nodes),
                "n_cascaded": len(result.cascaded_nodes),
                "n_rerouted": len(result.rerouted_edges),
                "n_vulnerable": len(result.vulnerable_nodes),
                "n_unresolvable": len(result.unresolvable_nodes),
            }
        )

    return pd.DataFrame(
        rows,
        columns=[
            "event_type",
            "severity",
            "n_failed",
            "n_cascaded",
            "n_rerouted",
            "n_vulnerable",
            "n_unresolvable",
        ],
    )
