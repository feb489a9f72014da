"""Structured logging and profiling for the engine, backed by telelog.

Engine code calls ``record_event`` for one-off events and wraps work in
``span`` to have it profiled. Hosts may call ``configure`` with their own
``telelog.Config``; otherwise settings come from ``EXPAND_ENGINE_*``
environment variables the first time a logger is needed.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "EXPAND_ENGINE_"
DEFAULT_BUFFER_SIZE = 2048

_TRUTHY = frozenset({"1", "true", "yes", "on"})

Pairs = List[Tuple[str, str]]


@dataclass(frozen=True)
class TelemetrySettings:
    """Environment-derived options used to build a ``telelog.Config``."""

    logger_name: str = "expand_engine"
    level: str = "INFO"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def value(name: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}", "").strip()

        def flag(name: str) -> bool:
            return value(name).lower() in _TRUTHY

        buffer_size = None
        if flag("LOG_BUFFERED"):
            buffer_size = int(value("LOG_BUFFER_SIZE") or DEFAULT_BUFFER_SIZE)
        return cls(
            logger_name=value("LOGGER") or cls.logger_name,
            level=(value("LOG_LEVEL") or cls.level).upper(),
            console=not flag("DISABLE_CONSOLE"),
            color=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=value("LOG_FILE"),
            buffer_size=buffer_size,
        )

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size is not None:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


_settings = TelemetrySettings()
_config: Optional[Any] = None
_loggers: Dict[str, Any] = {}


def configure(
    config: Optional[Any] = None, *, settings: Optional[TelemetrySettings] = None
) -> Any:
    """Install ``config``, or one built from ``settings`` (default: the environment).

    Loggers handed out earlier keep their old config; the cache is emptied
    so later ``get_logger`` calls see the new one.
    """

    global _settings, _config
    _settings = settings or TelemetrySettings.from_env()
    _config = config if config is not None else _settings.build()
    _loggers.clear()
    return _config


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    logger_name = name or _settings.logger_name
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _config)
        _loggers[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(payload: Mapping[str, Any]) -> Pairs:
    return [(str(key), _text(value)) for key, value in payload.items()]


def _log(logger: Any, level: str, message: str, payload: Mapping[str, Any]) -> None:
    # telelog loggers take structured pairs through ``<level>_with``
    level = level.lower()
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(payload)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _log(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; collects metadata reported on failure."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            payload["component"] = self.component
        _log(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``, tracked under ``component`` if given.

    ``metadata`` is attached as logger context for the duration of the block.
    An exception escaping the block is reported through ``SpanHandle.fail``
    and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(logger=log, name=name, component=component)
    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            log.add_context(key, handle.metadata[key])
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "ENV_PREFIX",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
