"""Common type definitions for containers and key paths.

These aliases describe the shapes the dot-notation engine walks through so
signatures across the package stay readable.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Sequence, Union
from typing_extensions import TypeAlias

# A single key inside a container
ArrayKey: TypeAlias = Union[str, int]

# Containers the engine can traverse
ArrayData: TypeAlias = Union[Dict[Any, Any], List[Any]]
Container: TypeAlias = Union[Mapping[Any, Any], List[Any], Any]

# Accepted key inputs for get/has/forget
KeyInput: TypeAlias = Union[ArrayKey, Sequence[ArrayKey], None]

# Accepted key inputs for set/fill
SetKeyInput: TypeAlias = Union[ArrayKey, Mapping[ArrayKey, Any], None]

# Hook callbacks receive a value and return the transformed value
HookCallback: TypeAlias = Callable[[Any], Any]

# Row filter callbacks receive (value, key)
KeyedCallback: TypeAlias = Callable[[Any, Any], Any]
