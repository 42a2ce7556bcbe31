import pytest

from infra_resilience import build_snapshot, load_seed_graph


@pytest.fixture
def seed_graph():
    """Canonical Austin seed graph (15 nodes, 31 edges)."""
    return load_seed_graph()


@pytest.fixture
def make_graph():
    """
    Build a small snapshot from ``(id, type)`` node pairs and
    ``(id, source, target, capacity, current_load)`` edge tuples.
    """

    def _make(nodes, edges=()):
        return build_snapshot(
            {
                "nodes": [{"id": nid, "type": ntype, "name": nid.upper()} for nid, ntype in nodes],
                "edges": [
                    {
                        "id": eid,
                        "source": src,
                        "target": tgt,
                        "capacity": cap,
                        "current_load": load,
                        "critical": False,
                    }
                    for eid, src, tgt, cap, load in edges
                ],
            }
        )

    return _make
