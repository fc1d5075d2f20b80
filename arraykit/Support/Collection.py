from __future__ import annotations

from typing import Any, Iterator, Optional, TYPE_CHECKING
from collections.abc import Iterable, Mapping, MutableMapping
import copy
import json

from arraykit.Support import Containers
from arraykit.Support.Arr import Arr
from arraykit.Types import ArrayData, ArrayKey, KeyInput

if TYPE_CHECKING:
    from arraykit.Support.Pipeline import Pipeline


class Collection(MutableMapping):  # type: ignore[type-arg]
    """Laravel-style collection over a dict or a list.

    Keys behave like ordered-array keys: a list-backed collection is indexed
    by position and turns into a dict as soon as a non-sequential key is
    written. Methods this class does not define are looked up on a fresh
    ``Pipeline``, so ``collection.where('age', '>', 18).get()`` chains.
    """

    def __init__(self, data: Optional[ArrayData] = None) -> None:
        self._data: ArrayData = self.get_arrayable_items(data)

    @classmethod
    def make(cls, data: Any = None) -> Collection:
        """Create a new collection instance."""
        instance = cls()
        instance._data = instance.get_arrayable_items(data)
        return instance

    def get_arrayable_items(self, items: Any) -> ArrayData:
        """Results array of items from Collection or Arrayable."""
        if items is None:
            return {}
        if isinstance(items, Collection):
            return copy.copy(items.all())
        if isinstance(items, dict):
            return dict(items)
        if isinstance(items, list):
            return list(items)
        if isinstance(items, Mapping):
            return dict(items)

        for method in ('json_serialize', 'to_array', 'to_dict'):
            converter = getattr(items, method, None)
            if callable(converter):
                return self.get_arrayable_items(converter())

        if isinstance(items, Iterable) and not isinstance(items, (str, bytes)):
            return list(items)
        return [items]

    # Core methods
    def all(self) -> ArrayData:
        """Get the underlying data."""
        return self._data

    def set_data(self, data: ArrayData) -> Collection:
        """Replace the underlying data."""
        self._data = self.get_arrayable_items(data)
        return self

    def process(self) -> Pipeline:
        """Start a fluent pipeline over a copy of the data."""
        from arraykit.Support.Pipeline import Pipeline
        return Pipeline(self._data, self)

    def get(self, key: Any = None, default: Any = None) -> Any:  # type: ignore[override]
        """Get an item using dot notation."""
        return Arr.get(self._data, key, default)

    def has(self, keys: KeyInput) -> bool:
        """Check if the given items exist using dot notation."""
        return Arr.has(self._data, keys)

    def append(self, value: Any) -> Collection:
        """Push an item onto the end of the collection."""
        if isinstance(self._data, list):
            self._data.append(value)
        else:
            indices = [key for key in self._data if isinstance(key, int) and not isinstance(key, bool)]
            self._data[max(indices, default=-1) + 1] = value
        return self

    def push(self, *values: Any) -> Collection:
        """Add items to the end of the collection."""
        for value in values:
            self.append(value)
        return self

    def clear(self) -> None:
        """Remove every item."""
        self._data = [] if isinstance(self._data, list) else {}

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._data) == 0

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    # Conversion
    def to_array(self) -> ArrayData:
        """Get the items as plain lists and dicts."""
        return self.json_serialize()

    def json_serialize(self) -> ArrayData:
        """Get the items prepared for JSON encoding."""
        def _serialize(value: Any) -> Any:
            if isinstance(value, Collection):
                return value.json_serialize()
            converter = getattr(value, 'json_serialize', None)
            if callable(converter):
                return converter()
            return value

        if isinstance(self._data, list):
            return [_serialize(value) for value in self._data]
        return {key: _serialize(value) for key, value in self._data.items()}

    def to_json(self, **options: Any) -> str:
        """Convert collection to JSON."""
        options.setdefault('default', str)
        return json.dumps(self.json_serialize(), **options)

    # Magic methods
    def __call__(self) -> ArrayData:
        return self._data

    def __getitem__(self, key: ArrayKey) -> Any:
        """Get item by key."""
        resolved = Containers.resolve_key(self._data, key)
        if resolved is Containers.MISSING:
            raise KeyError(key)
        return self._data[resolved]

    def __setitem__(self, key: ArrayKey, value: Any) -> None:
        """Set item by key."""
        self._store(key, value)

    def __delitem__(self, key: ArrayKey) -> None:
        resolved = Containers.resolve_key(self._data, key)
        if resolved is Containers.MISSING:
            raise KeyError(key)
        if isinstance(self._data, list) and resolved != len(self._data) - 1:
            self._data = dict(enumerate(self._data))
        del self._data[resolved]

    def __iter__(self) -> Iterator[Any]:
        """Iterate over keys."""
        return iter(Containers.keys_of(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return Containers.exists(self._data, key)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __str__(self) -> str:
        return self.to_json()

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)

        from arraykit.Support.Pipeline import Pipeline
        if callable(getattr(Pipeline, name, None)):
            return getattr(self.process(), name)
        raise AttributeError(f"Method {name} does not exist in {type(self).__name__}")

    # Helper methods
    def _store(self, key: ArrayKey, value: Any) -> None:
        resolved = Containers.resolve_key(self._data, key)
        if resolved is not Containers.MISSING:
            self._data[resolved] = value
            return

        if isinstance(self._data, list):
            if Containers.as_index(key) == len(self._data):
                self._data.append(value)
                return
            self._data = dict(enumerate(self._data))

        self._data[key] = value
