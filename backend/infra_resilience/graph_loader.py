# backend/infra_resilience/graph_loader.py

from __future__ import annotations
import json
import logging
import threading
from typing import Any, Dict, Optional

import networkx as nx

from .config import DEFAULT_SEED_PATH, NODE_TYPES
from .errors import GraphDataError
from .models import Edge, GraphSnapshot, Node

logger = logging.getLogger(__name__)

# In-process snapshot cache  { seed_path: GraphSnapshot }
_snapshot_cache: Dict[str, GraphSnapshot] = {}
_cache_lock = threading.Lock()


def build_snapshot(data: Dict[str, Any]) -> GraphSnapshot:
    """
    Build a GraphSnapshot from ``{"nodes": [...], "edges": [...]}``.

    Unknown node types and duplicate ids are data errors. Edges pointing at
    missing nodes are kept; they are logged and the engine skips them.
    """
    nodes = []
    seen = set()
    for raw in data.get("nodes", []):
        if "id" not in raw or "type" not in raw:
            raise GraphDataError(f"Node is missing 'id' or 'type': {raw!r}")
        if raw["type"] not in NODE_TYPES:
            raise GraphDataError(f"Unknown node type {raw['type']!r} for node {raw['id']!r}")
        if raw["id"] in seen:
            raise GraphDataError(f"Duplicate node id: {raw['id']!r}")
        seen.add(raw["id"])
        nodes.append(Node.from_dict(raw))

    edges = []
    edge_ids = set()
    for raw in data.get("edges", []):
        if not raw.keys() >= {"id", "source", "target"}:
            raise GraphDataError(f"Edge is missing 'id', 'source' or 'target': {raw!r}")
        if raw["id"] in edge_ids:
            raise GraphDataError(f"Duplicate edge id: {raw['id']!r}")
        edge_ids.add(raw["id"])
        edge = Edge.from_dict(raw)
        for end in (edge.source, edge.target):
            if end not in seen:
                logger.warning("Edge %s references unknown node %s", edge.id, end)
        edges.append(edge)

    return GraphSnapshot(nodes=tuple(nodes), edges=tuple(edges))


def load_seed_graph(path: Optional[str] = None) -> GraphSnapshot:
    """
    Load the canonical graph from seed JSON, cached per path for the life of
    the process.
    """
    path = path or DEFAULT_SEED_PATH
    with _cache_lock:
        snapshot = _snapshot_cache.get(path)
        if snapshot is None:
            with open(path, "r", encoding="utf-8") as f:
                snapshot = build_snapshot(json.load(f))
            logger.info(
                "Loaded %d nodes and %d edges from %s",
                len(snapshot.nodes),
                len(snapshot.edges),
                path,
            )
            _snapshot_cache[path] = snapshot
    return snapshot


def snapshot_to_networkx(snapshot: GraphSnapshot) -> nx.MultiDiGraph:
    """
    Dependency graph with one keyed edge per dependency (key = edge id).
    """
    G = nx.MultiDiGraph()
    for node in snapshot.nodes:
        G.add_node(node.id, type=node.type, name=node.name)
    for edge in snapshot.edges:
        G.add_edge(
            edge.source,
            edge.target,
            key=edge.id,
            type=edge.type,
            capacity=edge.capacity,
            current_load=edge.current_load,
            critical=edge.critical,
        )
    return G
