"""``caseflow serve``: run the HTTP API with uvicorn."""

from __future__ import annotations

import logging

import click
import uvicorn

from caseflow import config
from caseflow.bootstrap import AppContainer, bootstrap
from caseflow.entrypoints.http import create_app

from .db import MISSING_DB_URL_MSG
from .helpers import sanitize_url

logger = logging.getLogger(__name__)


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=8000,
    show_default=True,
    envvar="CASEFLOW_PORT",
    show_envvar=True,
    help="Bind port.",
)
@click.pass_context
def serve(ctx: click.Context, host: str, port: int) -> None:
    """Serve the cases HTTP API."""
    if isinstance(ctx.obj, AppContainer):
        container = ctx.obj
    else:
        try:
            container = bootstrap()
        except config.DatabaseUrlNotSetError as e:
            raise click.ClickException(MISSING_DB_URL_MSG) from e
        logger.info("Using database %s", sanitize_url(config.get_db_url()))

    app = create_app(container.message_bus)
    # log_config=None keeps the handlers installed by the caseflow group
    uvicorn.run(app, host=host, port=port, log_config=None)
