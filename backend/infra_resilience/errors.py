# backend/infra_resilience/errors.py


class InvalidRequest(ValueError):
    """Simulation request rejected before the engine runs."""


class GraphDataError(ValueError):
    """Seed graph data is structurally malformed."""
