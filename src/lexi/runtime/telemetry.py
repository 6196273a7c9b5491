"""Editor logging on top of telelog.

Two configurations exist. The default one is driven by ``LEXI_*``
environment variables and may log to the console; it is what library
users and the test suite get. The ``terminal`` preset is selected by the
process entry point once the editor owns the screen: console output is
off and records go to ``LEXI_LOG_FILE`` when it is set.

``record_event`` emits one ``event::<name>`` record. ``span`` profiles a
block, tags it with a component, and pushes its metadata into the
logger's context for the duration of the block.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LEXI_"
DEFAULT_LOGGER_NAME = "lexi"
TERMINAL_PRESET = "terminal"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
# logger name -> context key -> values pushed by the spans currently open
_CONTEXT_STACKS: Dict[str, Dict[str, List[str]]] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_ACTIVE_PRESET: Optional[str] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    raw = _env(name)
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _log_file_output(config: Any) -> Any:
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
        config.with_json_format(_env_flag("LOG_JSON"))
    return config


def _default_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    config.with_profiling(True)
    return _log_file_output(config)


def _terminal_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    # The console is the editor screen while raw mode is on.
    config.with_console_output(False)
    config.with_profiling(True)
    return _log_file_output(config)


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog configuration.

    ``config`` adopts an explicit ``tl.Config``; ``preset="terminal"``
    builds the raw-mode configuration; neither restores the default.
    """

    global _ACTIVE_CONFIG, _ACTIVE_PRESET
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset and preset.lower() != TERMINAL_PRESET:
        raise ValueError(f"Unknown preset '{preset}'.")

    if preset:
        config = _terminal_config()
    elif config is None:
        config = _default_config()

    _ACTIVE_CONFIG = config
    _ACTIVE_PRESET = TERMINAL_PRESET if preset else None
    _LOGGER_CACHE.clear()
    _CONTEXT_STACKS.clear()


def active_preset() -> Optional[str]:
    return _ACTIVE_PRESET


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``.

    Callers look loggers up at use time, so a later ``configure`` call
    reaches every component.
    """

    global _ACTIVE_CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = _default_config()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = level.lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    method = getattr(logger, name, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return method, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _level_method(logger, level)
    if accepts_data:
        method(message, [(str(key), _stringify(val)) for key, val in payload.items()])
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach metadata reported on failure."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


def _push_context(logger: Any, logger_name: str, key: str, value: str) -> None:
    _CONTEXT_STACKS.setdefault(logger_name, {}).setdefault(key, []).append(value)
    logger.add_context(key, value)


def _pop_context(logger: Any, logger_name: str, key: str) -> None:
    stack = _CONTEXT_STACKS.get(logger_name, {}).get(key)
    if stack:
        stack.pop()
    if stack:
        # An enclosing span still owns this key.
        logger.add_context(key, stack[-1])
    else:
        logger.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name`` under ``component``.

    Exceptions are logged as ``span::fail`` and re-raised. Context keys
    shared with an enclosing span get the enclosing value back on exit.
    """

    resolved_name = logger_name or DEFAULT_LOGGER_NAME
    log = get_logger(resolved_name)
    payload = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log, span_name=name, component_name=component, metadata=dict(payload)
    )

    with ExitStack() as stack:
        for key, value in payload.items():
            _push_context(log, resolved_name, key, value)
            stack.callback(_pop_context, log, resolved_name, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "TERMINAL_PRESET",
    "active_preset",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
