"""
Border Routing HTTP API.

Exposes the routing engine over HTTP:
- GET /routing/{origin}/{destination}: shortest land route
- GET /countries: known country codes
- GET /health: country data health
- GET /metrics: routing metrics and cache counters

Run with:
    uvicorn src.api.routing_api:app
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.border_router.application import FindCountryRoute, normalize_country_code
from src.border_router.config import RouterSettings, configure_logging
from src.border_router.exceptions import NoRouteFoundError, UnknownCountryError
from src.border_router.ports.graph_repository import GraphNotInitializedError

settings = RouterSettings.from_env()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

router = FindCountryRoute(settings=settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Dataset must be loaded before the first request; failure aborts startup
    graph = router.load()
    logger.info("Serving routes over %d countries", graph.country_count)
    yield


app = FastAPI(
    title="Country Border Routing API",
    description="Shortest land routes between countries by border crossings",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---


class RouteResponse(BaseModel):
    route: List[str]


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    error: str
    message: str


class CountriesResponse(BaseModel):
    count: int
    countries: List[str]


class MetricsResponse(BaseModel):
    routing: Dict[str, float]
    cache: Optional[Dict[str, float]] = None


def _error_response(status: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(),
        status=status,
        error=error,
        message=message,
    )
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


# --- Error translation ---


@app.exception_handler(UnknownCountryError)
async def handle_unknown_country(request: Request, exc: UnknownCountryError):
    logger.warning("Unknown country: %s", exc)
    return _error_response(400, "Bad Request", str(exc))


@app.exception_handler(NoRouteFoundError)
async def handle_no_route(request: Request, exc: NoRouteFoundError):
    logger.warning("No route found: %s", exc)
    return _error_response(400, "Bad Request", str(exc))


@app.exception_handler(GraphNotInitializedError)
async def handle_graph_not_initialized(request: Request, exc: GraphNotInitializedError):
    logger.error("Country data unavailable: %s", exc)
    return _error_response(503, "Service Unavailable", "Country data is not available")


# --- API Endpoints ---


@app.get(
    "/routing/{origin}/{destination}",
    response_model=RouteResponse,
    tags=["Routing"],
    summary="Calculate shortest land route between countries",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown country or no land route"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def calculate_route(origin: str, destination: str):
    """Returns the shortest land route from origin to destination (BFS)."""
    origin = normalize_country_code(origin)
    destination = normalize_country_code(destination)
    logger.info("Received routing request: %s -> %s", origin, destination)

    try:
        route = router.route(origin, destination)
    except (UnknownCountryError, NoRouteFoundError, GraphNotInitializedError):
        raise
    except Exception:
        logger.exception("Unexpected error routing %s -> %s", origin, destination)
        return _error_response(
            500, "Internal Server Error", "An unexpected error occurred"
        )

    return RouteResponse(route=route.as_list())


@app.get("/countries", response_model=CountriesResponse, tags=["Routing"])
def list_countries():
    """All country codes known to the router."""
    countries = router.get_available_countries()
    return CountriesResponse(count=len(countries), countries=countries)


@app.get("/health", tags=["Monitoring"])
def health() -> JSONResponse:
    """Country data health: 200 when loaded, 503 otherwise."""
    report = router.health()
    status_code = 200 if report.is_up else 503
    return JSONResponse(status_code=status_code, content=report.to_dict())


@app.get("/metrics", response_model=MetricsResponse, tags=["Monitoring"])
def metrics():
    """Routing counters, durations and route cache counters."""
    cache: Optional[Dict[str, Any]] = None
    stats = router.cache_stats
    if stats is not None:
        cache = {
            "hits": stats.hits,
            "misses": stats.misses,
            "size": stats.size,
            "hit_rate": round(stats.hit_rate, 4),
        }
    return MetricsResponse(routing=router.metrics_snapshot().to_dict(), cache=cache)
