"""FastAPI application factory for the adascan web UI."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from adascan import __version__
from adascan.config import AdaScanConfig
from adascan.engines.base import AuditEngine
from adascan.engines.pa11y import Pa11yEngine
from adascan.service import ScanService

logger = logging.getLogger(__name__)


def create_app(
    config: AdaScanConfig | None = None,
    engine: AuditEngine | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or AdaScanConfig.load()
    if engine is None:
        engine = Pa11yEngine(config.scan_profile(), executable=config.pa11y_bin)

    app = FastAPI(
        title="adascan",
        version=__version__,
        docs_url="/api/docs",
    )

    app.state.config = config
    app.state.service = ScanService(engine)

    from adascan.web.api.health import router as health_router
    from adascan.web.api.scans import router as scans_router

    app.include_router(health_router, prefix="/api")
    app.include_router(scans_router, prefix="/api")

    # Serve frontend static files
    if config.static_dir.is_dir():
        app.mount(
            "/",
            StaticFiles(directory=str(config.static_dir), html=True),
            name="frontend",
        )
    else:
        logger.debug("No frontend at %s, serving API only", config.static_dir)

    return app
