"""List supported path extensions."""

import typer

from orbitip.app_context import use_context
from orbitip.protocol import EXTENSIONS


def extensions(ctx: typer.Context) -> None:
    """List the path extensions readers support, with their EXT IDs."""
    use_context(ctx).out.print_extensions(EXTENSIONS)
