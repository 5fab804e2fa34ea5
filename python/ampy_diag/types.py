# Logger contract, levels and option records shared by the diag facade.

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Protocol, runtime_checkable

@runtime_checkable
class DiagLogger(Protocol):
    def verbose(self, *args: Any) -> None: ...
    def debug(self, *args: Any) -> None: ...
    def info(self, *args: Any) -> None: ...
    def warn(self, *args: Any) -> None: ...
    def error(self, *args: Any) -> None: ...

class DiagLogLevel(IntEnum):
    """Threshold used when installing a logger. Higher values let more through."""
    NONE = 0
    ERROR = 30
    WARN = 50
    INFO = 60
    DEBUG = 70
    VERBOSE = 80
    ALL = 9999

# op name -> level at which it starts being forwarded
LOG_FUNC_LEVELS = {
    "error": DiagLogLevel.ERROR,
    "warn": DiagLogLevel.WARN,
    "info": DiagLogLevel.INFO,
    "debug": DiagLogLevel.DEBUG,
    "verbose": DiagLogLevel.VERBOSE,
}

@dataclass
class DiagLoggerOptions:
    log_level: DiagLogLevel = DiagLogLevel.INFO
    # skip the "logger will be overwritten" warnings on replacement
    suppress_override_message: bool = False

@dataclass(frozen=True)
class ComponentLoggerOptions:
    namespace: Optional[str] = None

def log_level_from_string(value: Optional[str], default: DiagLogLevel = DiagLogLevel.INFO) -> DiagLogLevel:
    """Parse a level name like ``"debug"`` or ``"WARN"``; unknown names give ``default``."""
    if not value:
        return default
    name = value.strip().upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return DiagLogLevel[name]
    except KeyError:
        return default
