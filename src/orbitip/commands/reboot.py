"""Compute a reboot authorization digest."""

import typer

from orbitip.app_context import use_context
from orbitip.response import ResponseError, ResponseValues


def reboot(
    ctx: typer.Context,
    nonce: str = typer.Argument(help="Random number (rn) sent by the reader, in hex"),
    *,
    key: str | None = typer.Option(default=None, help="Reader MD5 secret in hex (default: reboot_key from config)"),
) -> None:
    """Print the RBT value authorizing a reader reboot."""
    app = use_context(ctx)
    resolved_key = key if key is not None else app.cfg.reboot_key
    if resolved_key is None:
        app.out.print_error_and_exit("missing_key", "No key given and no reboot_key in config.")
    rv = ResponseValues()
    try:
        rv.reboot(nonce, resolved_key)
    except ResponseError as e:
        app.out.print_error_and_exit("invalid_value", str(e))
    app.out.print_reboot(rv["RBT"])
