import logging
import re
from typing import List, Tuple

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import config, observability
from .errors import InvariantViolation, RegistryFullError
from .range_list import RangeList
from .registry import RangeListRegistry

settings = config.load_settings()
observability.configure_logging(settings)

logger = logging.getLogger(__name__)

app = FastAPI(title="Range List Service")

registry = RangeListRegistry(max_lists=settings.max_lists)

SAFE_NAME_RE = re.compile(r'^[A-Za-z0-9_.-]+$')


class RangeBody(BaseModel):
    low: int
    high: int


class RangeListView(BaseModel):
    name: str
    ranges: List[Tuple[int, int]]
    display: str


def sanitize_name(name: str) -> str:
    """Validate and return a safe range list name."""
    if not SAFE_NAME_RE.fullmatch(name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid name")
    return name


def _view(name: str, range_list: RangeList) -> RangeListView:
    return RangeListView(
        name=name,
        ranges=range_list.ranges(),
        display=range_list.to_display_string(),
    )


@app.exception_handler(InvariantViolation)
def invariant_violation_handler(request: Request, exc: InvariantViolation):
    logger.error(
        "Request failed on internal range list error",
        extra={"path": request.url.path, "error": str(exc)},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal range list error"},
    )


@app.get("/api/status")
def read_status():
    return {"status": "alive"}


@app.get("/metrics")
def metrics():
    return Response(
        content=observability.generate_metrics(),
        media_type=observability.CONTENT_TYPE_LATEST,
    )


@app.get("/api/rangelists")
def list_names():
    return {"names": registry.names()}


@app.get("/api/rangelists/{name}", response_model=RangeListView)
def read_range_list(name: str):
    sanitize_name(name)
    try:
        with registry.locked(name) as range_list:
            return _view(name, range_list)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Range list not found")


def _mutate(name: str, body: RangeBody, operation: str) -> RangeListView:
    sanitize_name(name)
    try:
        with registry.locked(name, create=True) as range_list:
            getattr(range_list, operation)(body.low, body.high)
            return _view(name, range_list)
    except RegistryFullError as exc:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(exc))


@app.post("/api/rangelists/{name}/add", response_model=RangeListView)
def add_range(name: str, body: RangeBody):
    return _mutate(name, body, "add")


@app.post("/api/rangelists/{name}/remove", response_model=RangeListView)
def remove_range(name: str, body: RangeBody):
    return _mutate(name, body, "remove")


@app.delete("/api/rangelists/{name}")
def delete_range_list(name: str):
    sanitize_name(name)
    try:
        registry.delete(name)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Range list not found")
    logger.info("Deleted range list", extra={"list_name": name})
    return {"detail": "Deleted"}
