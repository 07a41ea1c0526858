"""CLI entry point for orbitip."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from orbitip.app_context import AppContext, load_config
from orbitip.commands.extensions import extensions
from orbitip.commands.reboot import reboot
from orbitip.commands.secret import secret
from orbitip.commands.serve import serve
from orbitip.commands.ui import ui
from orbitip.log import setup_logging
from orbitip.output import Output

app = TyperPlus(package_name="orbitip")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    config_path: Annotated[Path | None, typer.Option("--config", help="Config file path.")] = None,
) -> None:
    """HTTP server for Orbit IP NFC/RFID readers."""
    out = Output(json_mode=json_output)
    cfg = load_config(out, config_path)
    setup_logging(cfg.log_path)
    ctx.obj = AppContext(out=out, cfg=cfg, config_path=config_path)


# Server
app.command(aliases=["s"])(serve)

# Encoders
app.command()(ui)
app.command()(reboot)
app.command()(secret)
app.command()(extensions)
