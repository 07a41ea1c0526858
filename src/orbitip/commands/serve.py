"""Run the HTTP server with the stock handlers."""

from typing import Annotated

import typer

from orbitip.app_context import load_config, use_context
from orbitip.handlers import default_handlers
from orbitip.server import run_server


def serve(
    ctx: typer.Context,
    *,
    host: Annotated[str | None, typer.Option(help="Listen address.")] = None,
    port: Annotated[int | None, typer.Option(help="Listen port.")] = None,
    root: Annotated[str | None, typer.Option(help="Root path the reader calls.")] = None,
    ext: Annotated[str | None, typer.Option(help="Path extension, e.g. .php.")] = None,
) -> None:
    """Serve reader requests, logging every event."""
    app = use_context(ctx)
    cfg = load_config(app.out, app.config_path, host=host, port=port, root=root, ext=ext)
    app.out.print_serving(cfg.host, cfg.port, cfg.listen_path)
    run_server(cfg, default_handlers(cfg))
