"""Command dispatch: route reader requests to registered handlers.

Transport-agnostic. The HTTP layer hands over query parameters and gets back a status and body.
"""

import logging
from collections.abc import Callable, Mapping
from typing import TypeAlias
from dataclasses import dataclass

from orbitip.protocol import Request, decode_request, encode_document
from orbitip.response import ResponseValues

logger = logging.getLogger(__name__)

# A handler fills in the response; raising any exception fails the request.
HandlerFunc: TypeAlias = Callable[[ResponseValues, Request], None]


class Handlers(dict[str, HandlerFunc]):
    """Command token -> handler map. Populate before serving; treated as read-only afterwards."""

    def set(self, command: str, fn: HandlerFunc) -> None:
        """Register a handler for a command, replacing any previous one."""
        self[command] = fn

    def remove(self, command: str) -> None:
        """Unregister the handler for a command. No-op if none is registered."""
        self.pop(command, None)


@dataclass(frozen=True)
class Reply:
    """HTTP status and body for the reader."""

    status: int
    body: bytes = b""


class ServeMux:
    """Dispatches decoded reader requests to the handler registered for their command."""

    def __init__(self, handlers: Handlers | None = None) -> None:
        """Initialize the dispatcher.

        Args:
            handlers: Command handlers. Must not be mutated while serving.

        """
        self._handlers = handlers if handlers is not None else Handlers()

    @property
    def handlers(self) -> Handlers:
        """Registered command handlers."""
        return self._handlers

    def serve(self, query: Mapping[str, str]) -> Reply:
        """Handle one reader request.

        404 for an unknown command, 500 if the handler raises (fields it set are dropped),
        200 with the <ORBIT> document otherwise (empty body when the handler set nothing).
        """
        req = decode_request(query)
        fn = self._handlers.get(req.command)
        if fn is None:
            logger.info("No handler for command %r from reader %r", req.command, req.id)
            return Reply(404)

        logger.debug("Request: %s from reader %r", req.command, req.id)
        values = ResponseValues()
        try:
            fn(values, req)
        except Exception:
            logger.exception("Handler for command %r failed", req.command)
            return Reply(500)
        return Reply(200, encode_document(values))
