"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from caseflow import __version__
from caseflow.service_layer.messagebus import MessageBus

from .errors import register_error_handlers
from .routes import router

logger = logging.getLogger(__name__)


def create_app(bus: MessageBus) -> FastAPI:
    """Build the HTTP API around an already-wired message bus.

    Args:
        bus: The bus every route dispatches to (see `caseflow.bootstrap`).

    Returns:
        FastAPI: The application, ready to be served by uvicorn.
    """
    app = FastAPI(title="CASEFLOW", version=__version__)
    app.state.bus = bus
    app.include_router(router)
    register_error_handlers(app)
    logger.debug(
        "HTTP app created with routes %s",
        [getattr(route, "path", route) for route in app.routes],
    )
    return app
