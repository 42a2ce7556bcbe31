# backend/app.py

from __future__ import annotations
import logging
import os
from typing import Dict, List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from infra_resilience import (
    EVENT_PRIMARY_TYPES,
    InvalidRequest,
    describe_graph,
    load_seed_graph,
    run_severity_sweep,
    run_simulation,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("infra_resilience.api")


app = FastAPI(
    title="Infrastructure Cascade Simulator API",
    description="Simulates cascading failures across a city's critical-infrastructure dependency graph.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SimRequest(BaseModel):
    event_type: str
    severity: int
    affected_node_ids: List[str] = Field(default_factory=list)


class ReroutedEdgeOut(BaseModel):
    edge_id: str
    old_target: str
    new_target: str


class SimResponse(BaseModel):
    failed_nodes: List[str]
    cascaded_nodes: List[str]
    rerouted_edges: List[ReroutedEdgeOut]
    vulnerable_nodes: List[str]
    unresolvable_nodes: List[str]
    summary_prompt_context: str


class SweepRequest(BaseModel):
    event_type: str
    severities: List[int]


@app.exception_handler(InvalidRequest)
async def invalid_request_handler(request: Request, exc: InvalidRequest):
    log.warning("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/event-types")
def list_event_types() -> Dict[str, Dict[str, List[str]]]:
    return {"event_types": EVENT_PRIMARY_TYPES}


@app.get("/api/graph")
def get_graph():
    return load_seed_graph().to_dict()


@app.get("/api/graph/summary")
def get_graph_summary():
    return describe_graph(load_seed_graph())


@app.post("/api/simulate", response_model=SimResponse)
def simulate(req: SimRequest):
    result = run_simulation(
        event_type=req.event_type,
        severity=req.severity,
        affected_node_ids=req.affected_node_ids,
    )
    return result.to_dict()


@app.post("/api/sweep")
def sweep(req: SweepRequest):
    """
    Same event at several severities; one row of outcome counts per severity.
    """
    df = run_severity_sweep(req.event_type, req.severities)
    return {"results": df.to_dict(orient="records")}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "3001")))
