from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from fastapi import APIRouter

from api.schemas import DefaultRequest, DefaultResponse
from services import example_service


class Route(NamedTuple):
    method: str
    path: str
    handler: Callable[..., Any]


async def root() -> dict[str, str]:
    """Simple root endpoint with welcome msg."""
    return {"message": "Welcome to the Starter API"}


async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


async def handle_example(request: DefaultRequest | None = None) -> DefaultResponse:
    """Returns a new identifier with a SUCCESS status.

    The request body is accepted but never inspected, so this endpoint
    has no failure path of its own. Malformed JSON is rejected by FastAPI
    before the handler is called.
    """
    return example_service.build_default_response()


ROUTES: list[Route] = [
    Route("GET", "/", root),
    Route("GET", "/health", health_check),
    Route("POST", "/v1/api/example", handle_example),
]


def build_router(routes: Iterable[Route] = ROUTES) -> APIRouter:
    """Registers each (method, path) -> handler entry on a fresh router."""
    router = APIRouter()
    for route in routes:
        router.add_api_route(route.path, route.handler, methods=[route.method])
    return router


router = build_router()
