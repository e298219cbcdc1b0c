"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROSTERCTL_*`` prefix
  3. TOML file    — ``rosterctl.toml`` found by :func:`find_config`
  4. Code defaults — baked into :class:`ShellConfig`

The TOML file is read exactly once, through :func:`read_config`, by the
custom :class:`TomlSettingsSource`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from rosterctl.config.discovery import find_config, read_config
from rosterctl.config.models import ShellConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``rosterctl.toml`` file (or none)."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RosterSettings(BaseSettings):
    """Unified settings for the rosterctl CLI.

    Stored on the :class:`AppContext` at the CLI root level and frozen
    after construction.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROSTERCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    shell: ShellConfig = Field(default_factory=ShellConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RosterSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names an existing file,
        otherwise discovers ``rosterctl.toml`` walking up from *start*.
        CLI flags are merged as highest-priority overrides.

        Raises:
            click.ClickException: the config file is unreadable, is not
                TOML, or holds values of the wrong type.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(f"Invalid configuration in {source}: {exc}") from exc
        finally:
            _tls.toml_path = None
