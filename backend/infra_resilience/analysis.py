# backend/infra_resilience/analysis.py

from __future__ import annotations
from collections import Counter
from typing import Any, Dict, List

import networkx as nx

from .graph_loader import snapshot_to_networkx
from .models import GraphSnapshot


def baseline_vulnerable_nodes(snapshot: GraphSnapshot) -> List[str]:
    """
    Nodes with exactly one dependency on the undisturbed graph, i.e. single
    points of failure before any event.
    """
    G = snapshot_to_networkx(snapshot)
    return [n.id for n in snapshot.nodes if G.out_degree(n.id) == 1]


def describe_graph(snapshot: GraphSnapshot) -> Dict[str, Any]:
    """
    Structural summary of the dependency graph.

    ``dependents`` counts, per provider, how many dependency edges point at it.
    """
    G = snapshot_to_networkx(snapshot)
    type_counts = Counter(n.type for n in snapshot.nodes)

    return {
        "n_nodes": len(snapshot.nodes),
        "n_edges": len(snapshot.edges),
        "n_critical_edges": sum(1 for e in snapshot.edges if e.critical),
        "nodes_by_type": dict(type_counts),
        "n_components": nx.number_weakly_connected_components(G) if len(G) else 0,
        "dependents": {n.id: G.in_degree(n.id) for n in snapshot.nodes},
        "baseline_vulnerable_nodes": baseline_vulnerable_nodes(snapshot),
    }
