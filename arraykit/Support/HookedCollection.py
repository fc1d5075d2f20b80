from __future__ import annotations

from typing import Any

from arraykit.Support.Collection import Collection
from arraykit.Support.Hooks import HasHooks
from arraykit.Types import ArrayKey


class HookedCollection(HasHooks, Collection):
    """Collection whose item reads and writes run through registered hooks.

    ``append`` runs the hooks registered with a ``None`` offset.
    """

    def __getitem__(self, key: ArrayKey) -> Any:
        return self._process_value(key, super().__getitem__(key), 'get')

    def __setitem__(self, key: ArrayKey, value: Any) -> None:
        super().__setitem__(key, self._process_value(key, value, 'set'))

    def append(self, value: Any) -> HookedCollection:
        super().append(self._process_value(None, value, 'set'))
        return self
