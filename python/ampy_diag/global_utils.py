# Process-wide slots keyed by name, each tagged with the owner that wrote it.

from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

class GlobalRegistry:
    """Holds at most one value per key plus the owner token allowed to replace or clear it.

    The owner is usually the diag facade itself; when it can log, registry
    bookkeeping is reported through it.
    """

    def __init__(self) -> None:
        self._slots: Dict[str, Tuple[Any, Any]] = {}

    def get_global(self, key: str) -> Optional[Any]:
        entry = self._slots.get(key)
        return entry[0] if entry is not None else None

    def register_global(self, key: str, value: Any, owner: Any, allow_override: bool = False) -> bool:
        current = self._slots.get(key)
        if current is not None and not allow_override and current[1] is not owner:
            _log(owner, "error", f"Attempted duplicate registration of a global for {key}.")
            return False
        self._slots[key] = (value, owner)
        _log(owner, "debug", f"Registered a global for {key}.")
        return True

    def unregister_global(self, key: str, owner: Any) -> None:
        current = self._slots.get(key)
        if current is None or current[1] is not owner:
            return
        _log(owner, "debug", f"Unregistered a global for {key}.")
        del self._slots[key]

def _log(owner: Any, level: str, msg: str) -> None:
    fn = getattr(owner, level, None)
    if callable(fn):
        fn(msg)

_default_registry = GlobalRegistry()

def default_registry() -> GlobalRegistry:
    return _default_registry

def get_global(key: str) -> Optional[Any]:
    return _default_registry.get_global(key)

def register_global(key: str, value: Any, owner: Any, allow_override: bool = False) -> bool:
    return _default_registry.register_global(key, value, owner, allow_override)

def unregister_global(key: str, owner: Any) -> None:
    _default_registry.unregister_global(key, owner)
