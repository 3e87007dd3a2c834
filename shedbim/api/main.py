"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shedbim.api.log import setup_logging
from shedbim.api.routes import router
from shedbim.api.settings import Settings


def create_app() -> FastAPI:
    logger = setup_logging(Settings.LOG_LEVEL)

    app = FastAPI(
        title="Shed BIM Generator",
        description="Portal-frame shed column and rafter geometry",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    logger.info("API ready, log level %s", Settings.LOG_LEVEL)
    return app


app = create_app()
