# backend/infra_resilience/__init__.py

from .config import DEFAULT_SEVERITIES, EVENT_PRIMARY_TYPES, EVENT_TYPES, NODE_TYPES
from .errors import GraphDataError, InvalidRequest
from .models import Edge, GraphSnapshot, Node, ReroutedEdge, SimulationResult
from .graph_loader import build_snapshot, load_seed_graph, snapshot_to_networkx
from .failure_selection import select_primary_failures
from .simulation import (
    build_summary_context,
    cascade_failures,
    find_unresolvable_nodes,
    find_vulnerable_nodes,
    reroute_edges,
    simulate_event,
)
from .analysis import baseline_vulnerable_nodes, describe_graph
from .experiments import run_severity_sweep, run_simulation, validate_request
