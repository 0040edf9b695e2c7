"""Environment-driven settings for the editor and its telemetry.

Every knob is read from an ``AKARI_EDITOR_<NAME>`` variable so that the
embedding application (or a shell running the Textual host) can tune the
editor without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from akari_editor.errors import ConfigError

ENV_PREFIX = "AKARI_EDITOR_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def env(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env(name, environ=environ)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name}", raw)


def env_int(
    name: str,
    default: int,
    *,
    minimum: Optional[int] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    raw = env(name, environ=environ)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_PREFIX}{name}", raw) from exc
    if minimum is not None and value < minimum:
        raise ConfigError(f"{ENV_PREFIX}{name}", raw)
    return value


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Tunables for the editing core."""

    history_limit: int = 50
    preview_delay_ms: int = 150
    indent_unit: str = "  "
    locale: str = "ja"
    recent_color_limit: int = 10
    split_min: int = 20
    split_max: int = 80
    split_default: int = 50
    view_mode: str = "split"
    dark: bool = True


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Telelog output configuration."""

    logger_name: str = "akari_editor"
    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048


def load_settings(environ: Optional[Mapping[str, str]] = None) -> EditorSettings:
    defaults = EditorSettings()
    locale = (env("LOCALE", defaults.locale, environ=environ) or "ja").lower()
    view_mode = (env("VIEW_MODE", defaults.view_mode, environ=environ) or "").lower()
    if view_mode not in {"editor", "preview", "split"}:
        raise ConfigError(f"{ENV_PREFIX}VIEW_MODE", view_mode)
    indent_width = env_int("INDENT_WIDTH", len(defaults.indent_unit), minimum=1, environ=environ)
    return EditorSettings(
        history_limit=env_int("HISTORY_LIMIT", defaults.history_limit, minimum=1, environ=environ),
        preview_delay_ms=env_int(
            "PREVIEW_DELAY_MS", defaults.preview_delay_ms, minimum=0, environ=environ
        ),
        indent_unit=" " * indent_width,
        locale=locale,
        recent_color_limit=env_int(
            "RECENT_COLORS", defaults.recent_color_limit, minimum=1, environ=environ
        ),
        view_mode=view_mode,
        dark=env_flag("DARK", defaults.dark, environ=environ),
    )


def load_telemetry_settings(
    environ: Optional[Mapping[str, str]] = None,
) -> TelemetrySettings:
    console = not env_flag("DISABLE_CONSOLE", False, environ=environ)
    return TelemetrySettings(
        logger_name=env("LOGGER", "akari_editor", environ=environ) or "akari_editor",
        level=(env("LOG_LEVEL", environ=environ) or "INFO").upper(),
        console=console,
        colored=console and not env_flag("NO_COLOR", False, environ=environ),
        json=env_flag("LOG_JSON", False, environ=environ),
        log_file=env("LOG_FILE", "", environ=environ) or "",
        buffered=env_flag("LOG_BUFFERED", False, environ=environ),
        buffer_size=env_int("LOG_BUFFER_SIZE", 2048, minimum=1, environ=environ),
    )


__all__ = [
    "ENV_PREFIX",
    "EditorSettings",
    "TelemetrySettings",
    "env",
    "env_flag",
    "env_int",
    "load_settings",
    "load_telemetry_settings",
]
