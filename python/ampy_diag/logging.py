# Concrete diag loggers: no-op, JSON lines with trace correlation, stdlib logging bridge.

from __future__ import annotations
import json, sys, time
import logging as _stdlib_logging
from typing import Any, Dict, Optional, TextIO

from opentelemetry import trace

VERBOSE = _stdlib_logging.DEBUG - 5
_stdlib_logging.addLevelName(VERBOSE, "VERBOSE")

class NoopDiagLogger:
    def verbose(self, *args: Any) -> None: pass
    def debug(self, *args: Any) -> None: pass
    def info(self, *args: Any) -> None: pass
    def warn(self, *args: Any) -> None: pass
    def error(self, *args: Any) -> None: pass

def _message(args: tuple) -> str:
    return " ".join(str(a) for a in args)

def _trace_fields() -> Dict[str, str]:
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return {}
    return {
        "trace_id": trace.format_trace_id(ctx.trace_id),
        "span_id": trace.format_span_id(ctx.span_id),
    }

class JsonDiagLogger:
    """One compact JSON object per call, stamped with the active span if any."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def _emit(self, level: str, args: tuple) -> None:
        rec: Dict[str, Any] = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "level": level,
            "message": _message(args),
        }
        rec.update(_trace_fields())
        out = self._stream if self._stream is not None else sys.stdout
        out.write(json.dumps(rec, separators=(",", ":"), ensure_ascii=False) + "\n")
        out.flush()

    def verbose(self, *args: Any) -> None: self._emit("verbose", args)
    def debug(self, *args: Any) -> None: self._emit("debug", args)
    def info(self, *args: Any) -> None: self._emit("info", args)
    def warn(self, *args: Any) -> None: self._emit("warn", args)
    def error(self, *args: Any) -> None: self._emit("error", args)

class StdlibDiagLogger:
    """Forwards to a ``logging.Logger``. Handlers and levels are left to the application."""

    def __init__(self, name: str = "ampy_diag", logger: Optional[_stdlib_logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else _stdlib_logging.getLogger(name)

    def verbose(self, *args: Any) -> None: self.logger.log(VERBOSE, _message(args))
    def debug(self, *args: Any) -> None: self.logger.debug(_message(args))
    def info(self, *args: Any) -> None: self.logger.info(_message(args))
    def warn(self, *args: Any) -> None: self.logger.warning(_message(args))
    def error(self, *args: Any) -> None: self.logger.error(_message(args))
