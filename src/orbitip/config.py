"""Centralized application configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from orbitip.protocol import DEFAULT_EXT, DEFAULT_ROOT, Ext, ext_from_suffix

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "orbitip" / "config.toml"

# TOML key -> expected value type
_TOML_KEYS: dict[str, type] = {
    "host": str,
    "port": int,
    "root": str,
    "ext": str,
    "heartbeat_interval": int,
    "reboot_key": str,
    "reboot_readers": list,
    "log_path": str,
}


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="0.0.0.0", description="Listen address")  # noqa: S104  # nosec B104
    port: int = Field(default=80, ge=1, le=65535, description="Listen port")
    root: str = Field(default=DEFAULT_ROOT, pattern=r"^/", description="Root path the reader calls")
    ext: str = Field(default=DEFAULT_EXT.suffix, description="Path extension the reader appends to root")
    heartbeat_interval: int | None = Field(
        default=None, ge=1, le=9999, description="Heartbeat interval sent to readers on power up, in seconds"
    )
    reboot_key: str | None = Field(
        default=None, pattern=r"^[0-9a-fA-F]{16}$", description="Shared MD5 secret used to authorize reboots"
    )
    reboot_readers: tuple[str, ...] = Field(default=(), description="Reader IDs to reboot on their next ping")
    log_path: Path | None = Field(default=None, description="Log file (stderr when unset)")

    @field_validator("ext")
    @classmethod
    def _check_ext(cls, value: str) -> str:
        return ext_from_suffix(value).suffix

    @computed_field(description="Extension catalog entry")
    @property
    def extension(self) -> Ext:
        """Extension catalog entry."""
        return ext_from_suffix(self.ext)

    @computed_field(description="Full path the reader requests")
    @property
    def listen_path(self) -> str:
        """Full path the reader requests."""
        return f"{self.root}{self.ext}"

    @staticmethod
    def build(config_path: Path | None = None, **overrides: Any) -> "Config":
        """Build a Config from defaults, optional config.toml, then explicit overrides.

        Overrides that are None are ignored so CLI options can be passed through unconditionally.
        """
        resolved_path = config_path if config_path is not None else DEFAULT_CONFIG_PATH

        kwargs: dict[str, Any] = {}
        if resolved_path.is_file():
            with resolved_path.open("rb") as f:
                toml_data = tomllib.load(f)
            for key, type_ in _TOML_KEYS.items():
                if isinstance(toml_data.get(key), type_):
                    kwargs[key] = toml_data[key]

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return Config(**kwargs)
