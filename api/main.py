# --- Greedy Algorithm Visualizer: Trace API (FastAPI) -------------------------
# Purpose: Thin HTTP boundary over the trace engines. Each POST runs one
# algorithm to completion and returns {algorithm, steps, finalResult}.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gav.errors import TraceError, UnknownAlgorithm
from gav.router import algorithm_info, run_algorithm
from gav.types import Graph

# Load .env for external configuration (log level, CORS, limits, sample path)
load_dotenv()
PROJECT_ROOT = Path(__file__).resolve().parents[1]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
MAX_BODY_BYTES = int(os.getenv("MAX_BODY_BYTES", str(10 * 1024 * 1024)))
SAMPLE_GRAPH_PATH = os.getenv("SAMPLE_GRAPH_PATH", str(PROJECT_ROOT / "examples" / "sample_graph.yaml"))

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Greedy Algorithm Visualizer API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Accept"],
)

# Display name per route segment, for error payloads
_ALGORITHM_NAMES = {"kruskal": "Kruskal", "prim": "Prim", "dijkstra": "Dijkstra"}


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    # Only the declared Content-Length is checked; a chunked body without one
    # is not counted here and relies on the server or proxy in front.
    length = request.headers.get("content-length", "")
    if length.isdigit() and int(length) > MAX_BODY_BYTES:
        return JSONResponse(status_code=413, content={
            "error": "Payload too large",
            "message": f"Request body exceeds {MAX_BODY_BYTES} bytes",
        })
    return await call_next(request)


@app.exception_handler(TraceError)
async def trace_error_handler(request: Request, exc: TraceError):
    segment = request.url.path.rstrip("/").split("/")[-1]
    name = _ALGORITHM_NAMES.get(segment, "Algorithm")
    logger.warning("%s failed (%s): %s", name, exc.kind, exc.message)
    return JSONResponse(status_code=400, content={
        "error": f"{name} algorithm failed",
        "kind": exc.kind,
        "message": exc.message,
    })


def _missing(error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error, "message": message})


# ----------------------------- Schemas ----------------------------------------
class KruskalRequest(BaseModel):
    # Raw graph payload; shape is checked by the validator, not by pydantic,
    # so malformed graphs surface as InvalidGraph rather than a 422.
    graph: Optional[Any] = None

class PrimRequest(KruskalRequest):
    startNode: Optional[str] = None

class DijkstraRequest(KruskalRequest):
    sourceNode: Optional[str] = None
    targetNode: Optional[str] = None


# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health():
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

@app.get("/api/sample-graph")
def sample_graph():
    """Sample graph from YAML, re-read per request so edits show up without a restart."""
    return Graph.from_file(SAMPLE_GRAPH_PATH).to_dict()

@app.post("/api/kruskal")
def kruskal(req: KruskalRequest):
    if req.graph is None:
        return _missing("Missing graph data", "Please provide graph data in request body")
    return run_algorithm("kruskal", req.graph).to_dict()

@app.post("/api/prim")
def prim(req: PrimRequest):
    if req.graph is None:
        return _missing("Missing graph data", "Please provide graph data in request body")
    return run_algorithm("prim", req.graph, start_node_id=req.startNode).to_dict()

@app.post("/api/dijkstra")
def dijkstra(req: DijkstraRequest):
    if req.graph is None:
        return _missing("Missing graph data", "Please provide graph data in request body")
    if not req.sourceNode:
        return _missing("Source node is required",
                        "Please specify a source node for Dijkstra's algorithm")
    return run_algorithm("dijkstra", req.graph, source_node_id=req.sourceNode,
                         target_node_id=req.targetNode).to_dict()

@app.get("/api/{algorithm}/info")
def info(algorithm: str):
    try:
        return algorithm_info(algorithm)
    except UnknownAlgorithm as e:
        raise HTTPException(status_code=404, detail=e.message)
