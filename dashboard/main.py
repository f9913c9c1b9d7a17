"""Application entrypoint; serve with ``uvicorn dashboard.main:app``."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from dashboard.api.router import get_api_router
from dashboard.core.config import get_config
from dashboard.core.startup import bootstrap


@asynccontextmanager
async def lifespan(_app: FastAPI):
    bootstrap()
    yield


def create_app(run_bootstrap: bool = True) -> FastAPI:
    cfg = get_config()
    app = FastAPI(
        title=cfg.APP_NAME,
        version=cfg.APP_VERSION,
        lifespan=lifespan if run_bootstrap else None,
    )
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "invoices": cfg.INVOICES_PATH}

    return app


app = create_app()
