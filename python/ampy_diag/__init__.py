__all__ = [
    "diag", "DiagAPI", "DiagComponentLogger", "DiagLogger", "DiagLogLevel",
    "DiagLoggerOptions", "ComponentLoggerOptions", "GlobalRegistry",
    "create_log_level_diag_logger", "init", "shutdown",
]
__version__ = "0.1.0"

from .types import ComponentLoggerOptions, DiagLogger, DiagLoggerOptions, DiagLogLevel
from .global_utils import GlobalRegistry
from .level_logger import create_log_level_diag_logger
from .component_logger import DiagComponentLogger
from .api import DiagAPI
from .bootstrap import init, shutdown

diag = DiagAPI.instance()
