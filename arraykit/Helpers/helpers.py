from __future__ import annotations

from typing import Any, Callable, Dict, Optional
import json
import operator as op
import os

# Global Helpers
_OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    '!=': op.ne,
    '<>': op.ne,
    'ne': op.ne,
    '<': op.lt,
    'lt': op.lt,
    '>': op.gt,
    'gt': op.gt,
    '<=': op.le,
    'lte': op.le,
    '>=': op.ge,
    'gte': op.ge,
}


def compare(retrieved: Any, value: Any, operator: Optional[str] = None) -> bool:
    """Compare two values using an operator.

    ``===`` and ``!==`` also require both values to share the same type.
    Anything else, including ``None``, compares with ``==``.
    """
    if operator == '===':
        return type(retrieved) is type(value) and retrieved == value
    if operator == '!==':
        return not (type(retrieved) is type(value) and retrieved == value)

    op_func = _OPERATORS.get(operator or '')
    try:
        if op_func:
            return bool(op_func(retrieved, value))
        return bool(retrieved == value)
    except TypeError:
        # Unorderable pair, e.g. None < 3
        return False


def is_callable(value: Any) -> bool:
    """Determine if the given value is callable (but not a string)."""
    return not isinstance(value, str) and callable(value)


def env(key: str, default: Any = None) -> Any:
    """Get environment variable."""
    value = os.getenv(key)
    if value is None:
        return default

    # Cast boolean values
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'

    # Cast null/none values
    if value.lower() in ('null', 'none', ''):
        return None

    # Try to cast to number
    try:
        if '.' not in value:
            return int(value)
        return float(value)
    except ValueError:
        pass

    # JSON values
    if value.startswith(('{', '[')):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value


def config(keys: Any = None, default: Any = None) -> Any:
    """Get the shared configuration store, read a value, or set many values."""
    from arraykit.Config.ConfigRepository import ConfigRepository

    repository = ConfigRepository.instance()
    if keys is None:
        return repository
    if isinstance(keys, dict):
        return repository.set(keys)
    return repository.get(keys, default)


def collect(data: Any = None) -> Any:
    """Create a collection from the given value."""
    from arraykit.Support.Collection import Collection
    return Collection.make([] if data is None else data)
