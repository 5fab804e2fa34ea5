# Wraps a logger so that only calls at or above a severity threshold reach it.

from __future__ import annotations
from typing import Any, Callable, Optional

from .logging import NoopDiagLogger
from .types import LOG_FUNC_LEVELS, DiagLogger, DiagLogLevel

def _noop(*args: Any) -> None:
    pass

class _LevelFilteredLogger:
    """Binds each level op once at construction; filtered ops become no-ops."""

    def __init__(self, max_level: int, logger: DiagLogger) -> None:
        self.max_level = max_level
        self.logger = logger
        self.verbose = self._filter("verbose")
        self.debug = self._filter("debug")
        self.info = self._filter("info")
        self.warn = self._filter("warn")
        self.error = self._filter("error")

    def _filter(self, func_name: str) -> Callable[..., Any]:
        fn = getattr(self.logger, func_name, None)
        if self.max_level >= LOG_FUNC_LEVELS[func_name] and callable(fn):
            return fn
        return _noop

def create_log_level_diag_logger(max_level: int, logger: Optional[DiagLogger] = None) -> DiagLogger:
    max_level = min(max(int(max_level), DiagLogLevel.NONE), DiagLogLevel.ALL)
    if logger is None:
        logger = NoopDiagLogger()
    return _LevelFilteredLogger(max_level, logger)
