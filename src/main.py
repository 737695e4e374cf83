from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from api.endpoints import router
from core.config import API_HOST, API_PORT, APP_TITLE, APP_VERSION, LOG_LEVEL
from core.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Manages startup and shutdown events for the FastAPI app."""
    logger.info(f"Application startup... ({APP_TITLE} {APP_VERSION})")
    yield
    logger.info("Application shutdown...")


app = FastAPI(title=APP_TITLE, version=APP_VERSION, lifespan=lifespan)

app.include_router(router)


def run() -> None:
    """Serves the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
