# Application-side setup: install a concrete logger through the process-wide facade.

import os
from typing import Optional

from .api import DiagAPI
from .logging import JsonDiagLogger
from .types import DiagLogger, DiagLoggerOptions, DiagLogLevel, log_level_from_string

LOG_LEVEL_ENV = "OTEL_LOG_LEVEL"

def init(
    log_level: Optional[DiagLogLevel] = None,
    logger: Optional[DiagLogger] = None,
    suppress_override_message: bool = False,
) -> bool:
    """Install ``logger`` (JSON to stdout by default) as the process diag logger.

    When ``log_level`` is omitted it is read from ``OTEL_LOG_LEVEL``, falling back to INFO.
    """
    if log_level is None:
        log_level = log_level_from_string(os.environ.get(LOG_LEVEL_ENV))
    return DiagAPI.instance().set_logger(
        logger if logger is not None else JsonDiagLogger(),
        DiagLoggerOptions(log_level=log_level, suppress_override_message=suppress_override_message),
    )

def shutdown() -> None:
    """Remove the installed diag logger; later diag calls are no-ops."""
    DiagAPI.instance().disable()
