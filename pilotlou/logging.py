"""
Pilot Lou logging.

Every module asks for its own logger and prints ``[module] LEVEL: message``
lines to stdout (and the JS console when built for the browser with
pygbag). What gets through is decided per module, so the frame scheduler
can be traced without drowning in game chatter:

    PILOTLOU_LOG_LEVEL=WARNING        # everything else
    PILOTLOU_LOG_FRAME_LOOP=TRACE     # every dispatch
    PILOTLOU_LOG_DODGE=DEBUG          # phase changes and speed steps

The launcher's --log-level calls configure_logging() with the same names.
"""

import os
import sys
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Severity, on the same scale as the stdlib logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


ENV_PREFIX = 'PILOTLOU_LOG_'

_LEVEL_NAMES: Dict[str, LogLevel] = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _is_browser() -> bool:
    return sys.platform == 'emscripten'


def _emit(line: str) -> None:
    print(line)
    if _is_browser():
        try:
            import platform
            platform.window.console.log(line)
        except AttributeError:
            pass


def _level_from_string(name: str) -> LogLevel:
    """Unknown names fall back to INFO."""
    return _LEVEL_NAMES.get(name.upper(), LogLevel.INFO)


def _module_key(module: str) -> str:
    """'dodge.main' and 'DODGE_MAIN' name the same module."""
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Set the default level and, optionally, per-module levels.

    Args:
        level: Level for modules without their own setting
        modules: module name -> level, e.g. {'frame_loop': 'TRACE'}
    """
    _config['default_level'] = _level_from_string(level)
    for mod, mod_level in (modules or {}).items():
        _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Read PILOTLOU_LOG_LEVEL and every PILOTLOU_LOG_<MODULE> variable."""
    level_key = ENV_PREFIX + 'LEVEL'
    if level_key in os.environ:
        _config['default_level'] = _level_from_string(os.environ[level_key])

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key != level_key:
            _config['module_levels'][_module_key(key[len(ENV_PREFIX):])] = _level_from_string(value)


_load_env_config()


class GameLogger:
    """
    Logger bound to one module name.

    Arguments are %-formatted only when the level is enabled, so a trace
    call in the frame loop costs a comparison when tracing is off.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, label: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        _emit(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the traceback being handled (if any)."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        tb = traceback.format_exc().strip()
        if tb and tb != 'NoneType: None':
            for line in tb.split('\n'):
                self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """
    Logger for module (e.g. 'dodge', 'dodge.main', 'frame_loop', 'launcher').

    The same name always returns the same logger.
    """
    return GameLogger(module)


def disable_logging() -> None:
    """Silence every module, including ones with their own level."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
