from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from .analytics.aggregator import QUERY_EVENT, compute_analytics
from .analytics.store import get_events, record_event
from .directory.data_store import Directory, get_directory
from .directory.formatter import format_cafes
from .directory.models import MetadataResponse
from .directory.query import parse_query
from .directory.resolver import resolve

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load the directory before the first request is served.
    get_directory()
    yield


app = FastAPI(title="Café Directory API", version="1.0.0", lifespan=lifespan)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata", response_model=MetadataResponse)
def metadata(directory: Directory = Depends(get_directory)) -> MetadataResponse:
    return MetadataResponse(
        cities=sorted(directory),
        total_cafes=directory.total_cafes,
    )


# ── Café query ───────────────────────────────────────────────────────────


@app.get("/cafe", response_class=PlainTextResponse)
def cafe(
    city: str | None = None,
    count: str | None = None,
    search: str | None = None,
    directory: Directory = Depends(get_directory),
) -> PlainTextResponse:
    start_time = time.perf_counter()

    result = parse_query(city, count, search, directory)
    if not result.ok:
        logger.info("Rejected cafe query city=%r count=%r: %s", city, count, result.error.value)
        _record_query(start_time, city, count, search, error=result.error.value)
        return PlainTextResponse(result.error.value, status_code=400)

    names = resolve(result.query, directory)
    _record_query(start_time, city, count, search, results_returned=len(names))
    return PlainTextResponse(format_cafes(names))


def _record_query(
    start_time: float,
    city: str | None,
    count: str | None,
    search: str | None,
    error: str | None = None,
    results_returned: int = 0,
) -> None:
    elapsed_ms = round((time.perf_counter() - start_time) * 1000, 3)
    record_event(QUERY_EVENT, {
        "city": city,
        "count": count,
        "search": search,
        "status_code": 400 if error else 200,
        "error": error,
        "results_returned": results_returned,
        "response_time_ms": elapsed_ms,
    })


# ── Analytics ────────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
