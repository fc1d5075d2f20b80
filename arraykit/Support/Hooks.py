from __future__ import annotations

import logging
from typing import Any, Dict, List
from typing_extensions import Self

from arraykit.Types import HookCallback

logger = logging.getLogger(__name__)


class HasHooks:
    """Mixin adding per-key transformer callbacks for reads and writes.

    Callbacks are registered under ``"<key>-get"`` or ``"<key>-set"`` and run
    in registration order, each receiving the previous callback's result.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._hooks: Dict[str, List[HookCallback]] = {}
        super().__init__(*args, **kwargs)

    def on_get(self, offset: Any, callback: HookCallback) -> Self:
        """Register a callback that transforms the value read at ``offset``."""
        return self._add_hook(offset, 'get', callback)

    def on_set(self, offset: Any, callback: HookCallback) -> Self:
        """Register a callback that transforms the value written at ``offset``."""
        return self._add_hook(offset, 'set', callback)

    def _add_hook(self, offset: Any, direction: str, callback: HookCallback) -> Self:
        name = self._hook_name(offset, direction)
        registered = self._hooks.setdefault(name, [])

        if not any(existing is callback for existing in registered):
            registered.append(callback)
            logger.debug("Registered %s hook", name)

        return self

    def _process_value(self, offset: Any, value: Any, direction: str) -> Any:
        for hook in self._hooks.get(self._hook_name(offset, direction), []):
            value = hook(value)
        return value

    @staticmethod
    def _hook_name(offset: Any, direction: str) -> str:
        return f"{'' if offset is None else offset}-{direction}"
