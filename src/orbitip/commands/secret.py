"""Generate a reader MD5 secret."""

import typer

from orbitip.app_context import use_context
from orbitip.crypto import generate_secret


def secret(ctx: typer.Context) -> None:
    """Print a random 16 hex character secret for the reader's MD5 field."""
    use_context(ctx).out.print_secret(generate_secret())
