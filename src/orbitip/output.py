"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from typing import NoReturn

import typer

from orbitip.protocol import Ext


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    # --- Server ---

    def print_serving(self, host: str, port: int, path: str) -> None:
        """Print server start banner."""
        self._success({"host": host, "port": port, "path": path}, f"Serving reader requests on http://{host}:{port}{path}")

    # --- Encoders ---

    def print_ui(self, field: str, value: str) -> None:
        """Print an encoded UI pattern."""
        self._success({"field": field, "value": value}, f"{field}={value}")

    def print_reboot(self, value: str) -> None:
        """Print an RBT digest."""
        self._success({"field": "RBT", "value": value}, f"RBT={value}")

    def print_secret(self, secret: str) -> None:
        """Print a freshly generated MD5 secret."""
        self._success({"field": "MD5", "value": secret}, f"MD5={secret}")

    def print_extensions(self, extensions: tuple[Ext, ...]) -> None:
        """Print the extension catalog."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"extensions": [{"id": e.id, "suffix": e.suffix} for e in extensions]}}))
        else:
            for ext in extensions:
                print(f"{ext.id}  {ext.suffix}")
