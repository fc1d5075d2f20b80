from __future__ import annotations

import dataclasses
import inspect
from typing import Any, Dict, List, Mapping
from typing_extensions import Self


class DataTransferObject:
    """Mixin for plain data holders built from and dumped to arrays.

    Dataclass subclasses are described by their fields. Other subclasses use
    their annotations plus whatever ``__init__`` assigned.
    """

    @classmethod
    def create(cls, values: Mapping[str, Any]) -> Self:
        """Create an instance, assigning only the attributes the class declares."""
        if dataclasses.is_dataclass(cls):
            # Filter out keys that don't exist in the dataclass
            fields = dataclasses.fields(cls)
            init_values = {f.name: values[f.name] for f in fields if f.init and f.name in values}
            instance = cls(**init_values)
            for f in fields:
                if not f.init and f.name in values:
                    setattr(instance, f.name, values[f.name])
            return instance

        instance = cls()
        known = instance._declared_attributes()

        for key, value in values.items():
            if key in known:
                setattr(instance, key, value)

        return instance

    def to_array(self) -> Dict[str, Any]:
        """Get the public attributes as a dict."""
        return {name: getattr(self, name) for name in self._declared_attributes() if hasattr(self, name)}

    def _declared_attributes(self) -> List[str]:
        if dataclasses.is_dataclass(self):
            return [f.name for f in dataclasses.fields(self) if not f.name.startswith('_')]

        names: List[str] = []
        for klass in reversed(type(self).__mro__):
            for name in inspect.get_annotations(klass):
                if name not in names:
                    names.append(name)
        for name in vars(self):
            if name not in names:
                names.append(name)
        return [name for name in names if not name.startswith('_')]
