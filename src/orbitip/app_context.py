"""Application context shared across CLI commands."""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from orbitip.config import Config
from orbitip.output import Output


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config
    config_path: Path | None


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result


def load_config(out: Output, config_path: Path | None, **overrides: Any) -> Config:
    """Build a Config, reporting an invalid config file or option as a CLI error."""
    try:
        return Config.build(config_path, **overrides)
    except tomllib.TOMLDecodeError as e:
        out.print_error_and_exit("invalid_config", f"Cannot parse config file: {e}")
    except ValidationError as e:
        out.print_error_and_exit("invalid_config", str(e))
