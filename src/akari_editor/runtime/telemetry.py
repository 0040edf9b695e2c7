"""Telemetry services for the editing core, built directly on telelog.

``configure(...)`` picks the active telelog configuration (environment,
explicit config or named preset), ``get_logger(name)`` hands out cached
loggers, ``record_event(name, ...)`` writes one structured event and
``span(name, ...)`` profiles a block while optionally tracking it as a
component.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from akari_editor.config import TelemetrySettings, load_telemetry_settings

tl = cast(Any, telelog)

_LOGGERS: MutableMapping[str, Any] = {}
_STATE: Dict[str, Any] = {"config": None, "settings": None}


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _from_settings(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    if settings.json:
        config.with_json_format(True)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    return config


def _development(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(True)
    config.with_json_format(False)
    return config


def _production(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level("INFO")
    config.with_console_output(False)
    config.with_file_output(settings.log_file or "akari_editor.log")
    config.with_buffering(True)
    return config


def _performance(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_buffering(True)
    config.with_file_output(settings.log_file or "akari_editor-performance.log")
    return config


PRESETS: Dict[str, Callable[[TelemetrySettings], Any]] = {
    "development": _development,
    "production": _production,
    "performance": _performance,
}


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Select the telelog configuration used by every engine logger.

    ``config`` and ``preset`` are mutually exclusive. Without either, the
    configuration is derived from ``settings`` (or the environment).
    Profiling is always switched on so ``span`` timings are recorded.
    """

    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    resolved = settings or load_telemetry_settings()
    if preset:
        try:
            builder = PRESETS[preset.lower()]
        except KeyError as exc:
            raise ValueError(f"Unknown preset '{preset}'.") from exc
        config = builder(resolved)
    elif config is None:
        config = _from_settings(resolved)

    config.with_profiling(True)
    _STATE["config"] = config
    _STATE["settings"] = resolved
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active configuration."""

    if _STATE["config"] is None:
        configure()
    settings = cast(TelemetrySettings, _STATE["settings"])
    logger_name = name or settings.logger_name
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _STATE["config"])
    return _LOGGERS[logger_name]


def _level_method(logger: Any, level: str) -> tuple[Any, bool]:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Write a single ``event::<name>`` entry with structured fields."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach metadata or flag failures."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        for key, value in (extra or {}).items():
            payload[key] = _text(value)
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def cancel(self, reason: Optional[str] = None) -> None:
        extra = {"reason": reason} if reason else None
        _emit(self.logger, "warning", "span::cancel", self._payload(extra))


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block; ``component=True`` also tracks it under ``name``.

    Metadata is pushed onto the logger context for the duration of the block
    and removed afterwards, even when the block raises.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    elif isinstance(component, str):
        component_name = component
    else:
        component_name = None

    serialized = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in serialized.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(serialized),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in serialized:
                log.remove_context(key)


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
