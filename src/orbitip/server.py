"""HTTP server: serves the reader's polling path with FastAPI under uvicorn.

The reader only ever calls one path, ``root + ext`` (``/orbit.php`` by default).
"""

import logging

import uvicorn
from fastapi import FastAPI, Request, Response

from orbitip.config import Config
from orbitip.mux import Handlers, ServeMux
from orbitip.protocol import DEFAULT_EXT, DEFAULT_ROOT, Ext

logger = logging.getLogger(__name__)


def create_app(mux: ServeMux, root: str = DEFAULT_ROOT, ext: Ext = DEFAULT_EXT) -> FastAPI:
    """Build an ASGI app that routes GET ``root + ext`` to the dispatcher."""
    app = FastAPI(title="Orbit IP reader server", docs_url=None, redoc_url=None, openapi_url=None)
    path = f"{root}{ext}"

    # Sync endpoint: handlers run in the worker thread pool, one per request
    @app.get(path)
    def orbit(request: Request) -> Response:
        query: dict[str, str] = {}
        for key, value in request.query_params.multi_items():
            query.setdefault(key, value)  # first value wins for repeated keys
        reply = mux.serve(query)
        return Response(content=reply.body, status_code=reply.status)

    logger.debug("Serving reader requests on %s", path)
    return app


def new_server(host: str, port: int, root: str, ext: Ext, handlers: Handlers) -> uvicorn.Server:
    """Construct (but do not start) an HTTP server for the given handlers."""
    app = create_app(ServeMux(handlers), root, ext)
    # log_config=None keeps uvicorn on our logging setup
    return uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_config=None, access_log=False))


def run_server(cfg: Config, handlers: Handlers) -> None:
    """Entry point: build the server from configuration and run until interrupted."""
    server = new_server(cfg.host, cfg.port, cfg.root, cfg.extension, handlers)
    logger.info("Listening on %s:%d%s", cfg.host, cfg.port, cfg.listen_path)
    server.run()
