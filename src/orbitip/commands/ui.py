"""Encode an LED/buzzer pattern."""

import typer

from orbitip.app_context import use_context
from orbitip.response import UI, ResponseError, ResponseValues


def ui(
    ctx: typer.Context,
    *,
    cycles: int = typer.Option(..., help="Number of cycles (0-255)"),
    interval: int = typer.Option(..., help="Interval between cycles in ms (0-255)"),
    green_on: bool = typer.Option(default=False, help="Green LED on"),
    green_flash: bool = typer.Option(default=False, help="Green LED flashing"),
    amber_on: bool = typer.Option(default=False, help="Amber LED on"),
    amber_flash: bool = typer.Option(default=False, help="Amber LED flashing"),
    red_on: bool = typer.Option(default=False, help="Red LED on"),
    red_flash: bool = typer.Option(default=False, help="Red LED flashing"),
    buzzer_on: bool = typer.Option(default=False, help="Buzzer on"),
    buzzer_intermittent: bool = typer.Option(default=False, help="Buzzer intermittent"),
    offline: bool = typer.Option(default=False, help="Encode as OFUI (offline mode pattern)"),
) -> None:
    """Print the UI (or OFUI) value for an LED/buzzer pattern."""
    app = use_context(ctx)
    pattern = UI(
        green_on=green_on,
        green_flash=green_flash,
        amber_on=amber_on,
        amber_flash=amber_flash,
        red_on=red_on,
        red_flash=red_flash,
        buzzer_on=buzzer_on,
        buzzer_intermittent=buzzer_intermittent,
    )
    rv = ResponseValues()
    try:
        if offline:
            rv.offline_ui(pattern, cycles, interval)
        else:
            rv.ui(pattern, cycles, interval)
    except ResponseError as e:
        app.out.print_error_and_exit("invalid_value", str(e))
    field = "OFUI" if offline else "UI"
    app.out.print_ui(field, rv[field])
