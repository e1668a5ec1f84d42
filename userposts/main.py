# userposts/main.py

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from userposts.api.api import api_router
from userposts.api.errors import register_exception_handlers
from userposts.core.config import settings
from userposts.core.logger import get_logger
from userposts.db.init_db import check_connection, init_db

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        check_connection()
        init_db()
    except SQLAlchemyError:
        logger.exception("Error connecting to the database")
        raise
    yield


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin).rstrip("/") for origin in settings.backend_cors_origins],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- REQUEST LOG ----------
    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info("Request made to: %s %s", request.method, request.url.path)
        return await call_next(request)

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    return app


app = create_application()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    logger.info("Starting server on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
