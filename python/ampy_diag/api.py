# The diag facade: one process-wide entry point that internal components log through.

from __future__ import annotations
import traceback
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .component_logger import DiagComponentLogger
from .global_utils import GlobalRegistry, default_registry
from .level_logger import create_log_level_diag_logger
from .types import ComponentLoggerOptions, DiagLogger, DiagLoggerOptions, DiagLogLevel

API_NAME = "diag"
STACK_PLACEHOLDER = "<failed to generate stacktrace>"

OptionsOrLevel = Union[DiagLoggerOptions, Mapping[str, Any], int, None]

class InstallCheck(Enum):
    INSTALLED = "installed"
    REJECTED_SELF_REFERENCE = "rejected-self-reference"

def capture_call_site() -> str:
    """Best-effort stack of the caller; never raises."""
    try:
        stack = "".join(traceback.format_stack()[:-2])
    except Exception:
        return STACK_PLACEHOLDER
    return stack or STACK_PLACEHOLDER

def _level_or_default(level: Any) -> int:
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    return DiagLogLevel.INFO

def _normalize_options(options_or_level: OptionsOrLevel) -> DiagLoggerOptions:
    if isinstance(options_or_level, DiagLoggerOptions):
        return DiagLoggerOptions(
            log_level=_level_or_default(options_or_level.log_level),
            suppress_override_message=bool(options_or_level.suppress_override_message),
        )
    if isinstance(options_or_level, Mapping):
        return DiagLoggerOptions(
            log_level=_level_or_default(options_or_level.get("log_level")),
            suppress_override_message=bool(options_or_level.get("suppress_override_message", False)),
        )
    return DiagLoggerOptions(log_level=_level_or_default(options_or_level))

class DiagAPI:
    """Proxies the five log levels to whatever logger is installed under ``"diag"``.

    Use ``DiagAPI.instance()`` (or ``ampy_diag.diag``) for the process-wide
    facade. Constructing one directly with its own ``GlobalRegistry`` gives an
    isolated facade, which is what the tests do.

    Example::

        from ampy_diag import diag, DiagLogLevel
        from ampy_diag.logging import JsonDiagLogger

        diag.set_logger(JsonDiagLogger(), DiagLogLevel.DEBUG)
        diag.debug("exporter started", 4317)
    """

    _instance: Optional["DiagAPI"] = None

    @classmethod
    def instance(cls) -> "DiagAPI":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, registry: Optional[GlobalRegistry] = None) -> None:
        self._own_registry = registry

    @property
    def _registry(self) -> GlobalRegistry:
        return self._own_registry if self._own_registry is not None else default_registry()

    def _check_install(self, logger: Any) -> InstallCheck:
        # any facade, not only self, proxies back through the slot
        if isinstance(logger, DiagAPI):
            return InstallCheck.REJECTED_SELF_REFERENCE
        return InstallCheck.INSTALLED

    def set_logger(self, logger: DiagLogger, options_or_level: OptionsOrLevel = None) -> bool:
        """Install ``logger`` as the process diag logger, filtered by level.

        ``options_or_level`` is a ``DiagLoggerOptions``, a bare level, or a mapping
        with the snake_case keys ``log_level`` and ``suppress_override_message``;
        other keys are ignored. A missing or non-integer level means INFO.
        Returns False only when ``logger`` is a diag facade.
        """
        if self._check_install(logger) is InstallCheck.REJECTED_SELF_REFERENCE:
            # Reported through the current logger, if any; printing could break the host app.
            self.error(
                "Cannot use diag as the logger for itself. Please use a DiagLogger "
                "implementation like JsonDiagLogger or a custom implementation\n"
                + capture_call_site()
            )
            return False

        options = _normalize_options(options_or_level)
        old_logger = self._registry.get_global(API_NAME)
        new_logger = create_log_level_diag_logger(options.log_level, logger)
        if old_logger is not None and not options.suppress_override_message:
            stack = capture_call_site()
            old_logger.warn(f"Current logger will be overwritten from {stack}")
            new_logger.warn(f"Current logger will overwrite one already registered from {stack}")

        return self._registry.register_global(API_NAME, new_logger, self, True)

    def disable(self) -> None:
        """Unregister the installed logger; a no-op unless this facade installed it."""
        self._registry.unregister_global(API_NAME, self)

    def create_component_logger(self, options: Optional[ComponentLoggerOptions] = None) -> DiagComponentLogger:
        return DiagComponentLogger(options, registry=self._registry)

    def _forward(self, func_name: str, args: tuple) -> Any:
        logger = self._registry.get_global(API_NAME)
        if logger is None:
            return None
        return getattr(logger, func_name)(*args)

    def verbose(self, *args: Any) -> None:
        return self._forward("verbose", args)

    def debug(self, *args: Any) -> None:
        return self._forward("debug", args)

    def info(self, *args: Any) -> None:
        return self._forward("info", args)

    def warn(self, *args: Any) -> None:
        return self._forward("warn", args)

    def error(self, *args: Any) -> None:
        return self._forward("error", args)
