# Logger that prefixes every call with a component namespace and forwards to the installed diag logger.

from __future__ import annotations
from typing import Any, Optional

from .global_utils import GlobalRegistry, default_registry
from .types import ComponentLoggerOptions

DEFAULT_NAMESPACE = "DiagComponentLogger"

class DiagComponentLogger:
    """Looks the installed logger up on every call, so it follows installs and ``disable()``.

    Example::

        log = diag.create_component_logger(ComponentLoggerOptions(namespace="ampy.bus"))
        log.debug("connected")   # installed logger gets ("ampy.bus", "connected")
    """

    def __init__(self, options: Optional[ComponentLoggerOptions] = None, registry: Optional[GlobalRegistry] = None) -> None:
        namespace = options.namespace if options is not None else None
        self.namespace = namespace or DEFAULT_NAMESPACE
        self._own_registry = registry

    @property
    def _registry(self) -> GlobalRegistry:
        return self._own_registry if self._own_registry is not None else default_registry()

    def _forward(self, func_name: str, args: tuple) -> None:
        logger = self._registry.get_global("diag")
        if logger is None:
            return
        getattr(logger, func_name)(self.namespace, *args)

    def verbose(self, *args: Any) -> None: self._forward("verbose", args)
    def debug(self, *args: Any) -> None: self._forward("debug", args)
    def info(self, *args: Any) -> None: self._forward("info", args)
    def warn(self, *args: Any) -> None: self._forward("warn", args)
    def error(self, *args: Any) -> None: self._forward("error", args)
