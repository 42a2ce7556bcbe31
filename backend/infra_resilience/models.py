# backend/infra_resilience/models.py

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Node:
    id: str
    type: str
    name: str
    attributes: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        attrs = {k: v for k, v in data.items() if k not in ("id", "type", "name")}
        return cls(
            id=data["id"],
            type=data["type"],
            name=data.get("name", data["id"]),
            attributes=attrs,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type, "name": self.name, **self.attributes}


@dataclass(frozen=True)
class Edge:
    """
    Directed dependency: ``source`` depends on ``target``.
    """

    id: str
    source: str
    target: str
    type: str = ""
    capacity: float = 0.0
    current_load: float = 0.0
    critical: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(
            id=data["id"],
            source=data["source"],
            target=data["target"],
            type=data.get("type", ""),
            capacity=data.get("capacity", 0),
            current_load=data.get("current_load", 0),
            critical=bool(data.get("critical", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GraphSnapshot:
    """
    Read-only canonical graph. Node and edge order is the canonical order
    every algorithm iterates in.

    Simulations never touch the snapshot directly: they call
    :meth:`working_copy` and mutate only what it returns.
    """

    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]

    def node_map(self) -> Dict[str, Node]:
        return {n.id: n for n in self.nodes}

    def working_copy(self) -> Tuple[Dict[str, Node], List[Edge]]:
        """
        Fresh ``(node_map, edge_list)`` owned by a single invocation.
        """
        return self.node_map(), list(self.edges)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


@dataclass
class ReroutedEdge:
    edge_id: str
    old_target: str
    new_target: str


@dataclass
class SimulationResult:
    failed_nodes: List[str]
    cascaded_nodes: List[str]
    rerouted_edges: List[ReroutedEdge]
    vulnerable_nodes: List[str]
    unresolvable_nodes: List[str]
    summary_prompt_context: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
