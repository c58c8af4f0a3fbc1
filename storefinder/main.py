from __future__ import annotations

from typing import Any, Dict, List, Optional
import time
import uuid

from fastapi import FastAPI, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from storefinder import __version__
from storefinder.core.config import settings
from storefinder.core.logger import service_logger
from storefinder.schemas.stores import ErrorResponse, QuerySpec, TagFacets
from storefinder.services.filtering_engine import filter_stores
from storefinder.services.health_check import ReadinessResponse, run_readiness_check
from storefinder.services.meta_service import get_tag_facets
from storefinder.services.store_loader import StoreDataError, load_stores


app = FastAPI(title="Store Directory Service", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.perf_counter()
    request_id = str(uuid.uuid4())
    # Attach request ID to state for logging
    request.state.request_id = request_id

    response: Response = await call_next(request)

    process_time = time.perf_counter() - start_time
    service_logger.log_request(
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=process_time * 1000,
        request_id=request_id,
    )
    response.headers["X-Process-Time"] = str(process_time)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(StoreDataError)
async def store_data_error_handler(request: Request, exc: StoreDataError) -> JSONResponse:
    service_logger.log_error(
        exc.public_message,
        error=exc,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=500, content=ErrorResponse(error=exc.public_message).model_dump())


@app.get("/health", tags=["meta"])
def health() -> dict:
    return {"status": "ok"}


@app.get("/health/live", tags=["meta"])
def health_live() -> dict:
    return {"status": "ok"}


@app.get("/health/ready", response_model=ReadinessResponse, tags=["meta"])
def health_ready() -> ReadinessResponse:
    return run_readiness_check()


@app.get(
    "/api/meta/tags",
    response_model=TagFacets,
    responses={500: {"model": ErrorResponse}},
    tags=["meta"],
)
def meta_tags() -> TagFacets:
    """Returns every distinct tag in the directory (for filter controls)."""
    return get_tag_facets(load_stores())


@app.get("/api/stores", responses={500: {"model": ErrorResponse}}, tags=["stores"])
def list_stores(
    request: Request,
    culture: Optional[str] = Query(default=None, description="Comma-separated culture tags, all required."),
    dietary: Optional[str] = Query(default=None, description="Comma-separated dietary tags, all required."),
    product: Optional[str] = Query(default=None, description="Comma-separated product tags, all required."),
    search: Optional[str] = Query(default=None, description="Substring of name, address, description or a tag."),
) -> List[Dict[str, Any]]:
    stores = load_stores()
    query = QuerySpec.from_params(culture=culture, dietary=dietary, product=product, search=search)

    matches = filter_stores(stores, query)

    service_logger.log_filter(
        criteria=query.model_dump(),
        total_stores=len(stores),
        matched=len(matches),
        request_id=getattr(request.state, "request_id", None),
    )
    return [store.to_public_dict() for store in matches]


# Static front-end (index.html and assets). Mounted last so the API routes win.
if settings.STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
