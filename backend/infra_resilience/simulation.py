# backend/infra_resilience/simulation.py

from __future__ import annotations
from collections import defaultdict
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .config import RESIDENTIAL
from .failure_selection import select_primary_failures
from .models import Edge, GraphSnapshot, Node, ReroutedEdge, SimulationResult


def _dependencies_by_source(edges: Iterable[Edge]) -> Dict[str, List[str]]:
    deps: Dict[str, List[str]] = defaultdict(list)
    for e in edges:
        deps[e.source].append(e.target)
    return deps


def cascade_failures(
    nodes: Dict[str, Node],
    edges: List[Edge],
    failed: Set[str],
) -> List[str]:
    """
    Expand ``failed`` (in place) until no further node loses all of its inputs.

    Each pass walks the nodes in canonical order; a node failing mid-pass is
    already visible to the nodes after it. Residential nodes and nodes without
    dependencies never cascade. Returns the newly failed ids in discovery order.
    """
    deps = _dependencies_by_source(edges)
    cascaded: List[str] = []
    changed = True

    while changed:
        changed = False
        for node_id, node in nodes.items():
            if node_id in failed or node.type == RESIDENTIAL:
                continue
            targets = deps.get(node_id)
            if not targets:
                continue
            if all(t in failed for t in targets):
                failed.add(node_id)
                cascaded.append(node_id)
                changed = True

    return cascaded


def _load_ratio(edges: List[Edge], node_id: str) -> float:
    incoming = [e for e in edges if e.target == node_id]
    total_load = sum(e.current_load for e in incoming)
    total_capacity = sum(e.capacity for e in incoming) or 1
    return total_load / total_capacity


def reroute_edges(
    nodes: Dict[str, Node],
    edges: List[Edge],
    failed: Set[str],
) -> Tuple[List[ReroutedEdge], List[Edge]]:
    """
    Point every edge whose provider failed at the least-loaded operational node
    of the same type.

    Edges are handled in canonical order and load ratios are read from the
    edge list as rewritten so far, so earlier edges get first pick. Ties keep
    canonical node order. Edges with no alternative stay on the failed node.
    """
    updated = list(edges)
    rerouted: List[ReroutedEdge] = []

    for i, edge in enumerate(updated):
        if edge.target not in failed:
            continue
        failed_node = nodes.get(edge.target)
        if failed_node is None:
            continue

        alternatives = [
            n
            for n in nodes.values()
            if n.type == failed_node.type and n.id not in failed and n.id != edge.target
        ]
        if not alternatives:
            continue

        ratios = {n.id: _load_ratio(updated, n.id) for n in alternatives}
        best = sorted(alternatives, key=lambda n: ratios[n.id])[0]

        rerouted.append(
            ReroutedEdge(edge_id=edge.id, old_target=edge.target, new_target=best.id)
        )
        updated[i] = replace(edge, target=best.id)

    return rerouted, updated


def find_vulnerable_nodes(
    nodes: Dict[str, Node],
    edges: List[Edge],
    failed: Set[str],
) -> List[str]:
    """
    Surviving nodes left with exactly one operational input.
    """
    vulnerable = []
    for node_id in nodes:
        if node_id in failed:
            continue
        operational = sum(1 for e in edges if e.source == node_id and e.target not in failed)
        if operational == 1:
            vulnerable.append(node_id)
    return vulnerable


def find_unresolvable_nodes(
    nodes: Dict[str, Node],
    edges: List[Edge],
    failed: Set[str],
    rerouted_ids: Set[str],
) -> List[str]:
    # Checks failed targets together with the rerouted-id set rather than
    # recomputing operational inputs; see DESIGN.md.
    unresolvable = []
    for node_id in nodes:
        if node_id in failed:
            continue
        deps = [e for e in edges if e.source == node_id]
        if not deps:
            continue
        if all(e.target in failed and e.id not in rerouted_ids for e in deps):
            unresolvable.append(node_id)
    return unresolvable


def build_summary_context(
    nodes: Dict[str, Node],
    result: SimulationResult,
    event_type: str,
    severity: int,
) -> str:
    """
    Plain-text digest of a run for the downstream narrative generator.
    """

    def name(node_id: str) -> str:
        node = nodes.get(node_id)
        return node.name if node is not None and node.name else node_id

    def names(ids: List[str]) -> str:
        return ", ".join(name(i) for i in ids) or "none"

    reroutes = "; ".join(
        f"{name(r.old_target)} → {name(r.new_target)}" for r in result.rerouted_edges
    ) or "none"

    lines = [
        f"Event: {event_type} at severity {severity}/10",
        f"Directly failed nodes: {names(result.failed_nodes)}",
        f"Cascade-failed nodes: {names(result.cascaded_nodes)}",
        f"Rerouted dependencies: {reroutes}",
        f"Vulnerable nodes (< 2 inputs): {names(result.vulnerable_nodes)}",
        f"Unresolvable nodes: {names(result.unresolvable_nodes)}",
    ]
    return "\n".join(lines)


def simulate_event(
    snapshot: GraphSnapshot,
    event_type: str,
    severity: int,
    affected_node_ids: Optional[List[str]] = None,
) -> SimulationResult:
    """
    Run one event against a private copy of the snapshot.
    """
    nodes, edges = snapshot.working_copy()

    primary = select_primary_failures(
        list(nodes.values()), event_type, severity, affected_node_ids
    )
    failed = set(primary)

    cascaded = cascade_failures(nodes, edges, failed)
    rerouted, updated_edges = reroute_edges(nodes, edges, failed)
    rerouted_ids = {r.edge_id for r in rerouted}

    result = SimulationResult(
        failed_nodes=primary,
        cascaded_nodes=cascaded,
        rerouted_edges=rerouted,
        vulnerable_nodes=find_vulnerable_nodes(nodes, updated_edges, failed),
        unresolvable_nodes=find_unresolvable_nodes(
            nodes, updated_edges, failed, rerouted_ids
        ),
    )
    result.summary_prompt_context = build_summary_context(
        nodes, result, event_type, severity
    )
    return result
