"""Multi-dimension (row) array helpers.

Rows are mappings, lists or objects. Row fields are read with ``Arr.get`` so
a field name may itself be a dotted path such as ``address.city``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from collections import defaultdict
from collections.abc import Mapping
from functools import cmp_to_key

from arraykit.Helpers.helpers import compare
from arraykit.Support import Containers
from arraykit.Support.Accessor import collapse as _collapse
from arraykit.Support.Arr import Arr
from arraykit.Support.ArrSingle import ArrSingle, _build, _pairs
from arraykit.Types import ArrayData

_MISSING = Containers.MISSING


def _field(row: Any, key: str) -> Any:
    return Arr.get(row, key, _MISSING)


class ArrMulti:
    """Helpers for arrays of rows."""

    @staticmethod
    def only(array: Any, keys: Union[Any, List[Any]]) -> List[Any]:
        """Keep only the given columns of every row."""
        return [ArrSingle.only(row, keys) for row in Containers.values_of(array) if Containers.accessible(row)]

    @staticmethod
    def collapse(array: Any) -> List[Any]:
        """Collapse an array of arrays into a single array."""
        return _collapse(Containers.values_of(array))

    @staticmethod
    def depth(array: Any) -> int:
        """Get the nesting depth of the array."""
        if not Containers.accessible(array) or not len(array):
            return 0

        deepest = 0
        for value in Containers.values_of(array):
            if Containers.accessible(value):
                deepest = max(deepest, ArrMulti.depth(value))
        return deepest + 1

    @staticmethod
    def flatten(array: Any, depth: Union[int, float] = float('inf')) -> List[Any]:
        """Flatten a multi-dimensional array into a single level."""
        result: List[Any] = []
        for item in Containers.values_of(array):
            if not Containers.accessible(item):
                result.append(item)
            elif depth == 1:
                result.extend(Containers.values_of(item))
            else:
                result.extend(ArrMulti.flatten(item, depth - 1))
        return result

    @staticmethod
    def flatten_by_key(array: Any) -> List[Any]:
        """Get every leaf value, depth-first."""
        return ArrMulti.flatten(array)

    @staticmethod
    def sort_recursive(array: Any, descending: bool = False) -> ArrayData:
        """Recursively sort an array by keys (mappings) or values (lists)."""
        def _sort_key(item: Any) -> Tuple[int, Any]:
            return (0, item) if isinstance(item, (int, float)) and not isinstance(item, bool) else (1, str(item))

        if isinstance(array, Mapping):
            sorted_items = sorted(array.items(), key=lambda pair: _sort_key(pair[0]), reverse=descending)
            return {
                key: ArrMulti.sort_recursive(value, descending) if Containers.accessible(value) else value
                for key, value in sorted_items
            }

        values = [
            ArrMulti.sort_recursive(value, descending) if Containers.accessible(value) else value
            for value in array
        ]
        return sorted(values, key=_sort_key, reverse=descending)

    @staticmethod
    def first(array: Any, callback: Optional[Callable[[Any, Any], bool]] = None, default: Any = None) -> Any:
        """Return the first element in an array passing a given truth test."""
        pairs = _pairs(array)
        if callback is None:
            return pairs[0][1] if pairs else Arr.value(default)

        for key, value in pairs:
            if callback(value, key):
                return value
        return Arr.value(default)

    @staticmethod
    def last(array: Any, callback: Optional[Callable[[Any, Any], bool]] = None, default: Any = None) -> Any:
        """Return the last element in an array passing a given truth test."""
        pairs = _pairs(array)
        if callback is None:
            return pairs[-1][1] if pairs else Arr.value(default)

        for key, value in reversed(pairs):
            if callback(value, key):
                return value
        return Arr.value(default)

    @staticmethod
    def between(array: Any, key: str, start: Union[int, float], end: Union[int, float]) -> ArrayData:
        """Keep rows whose field lies within [start, end]."""
        def _within(row: Any) -> bool:
            found = _field(row, key)
            return found is not _MISSING and compare(found, start, '>=') and compare(found, end, '<=')

        return _build(array, [(index, row) for index, row in _pairs(array) if _within(row)])

    @staticmethod
    def where_callback(array: Any, callback: Optional[Callable[[Any, Any], bool]] = None, default: Any = None) -> Any:
        """Filter rows with a callback receiving (row, key)."""
        if callback is None:
            return array if len(array) else Arr.value(default)
        return _build(array, [(index, row) for index, row in _pairs(array) if callback(row, index)])

    @staticmethod
    def where(array: Any, key: str, operator: Any = None, value: Any = None) -> ArrayData:
        """Filter rows by a single field comparison.

        ``where(rows, 'age', 18)`` compares with ``==``;
        ``where(rows, 'age', '>', 18)`` uses the given operator.
        """
        if value is None and operator is not None:
            value, operator = operator, None

        def _matches(row: Any) -> bool:
            found = _field(row, key)
            return found is not _MISSING and compare(found, value, operator)

        return _build(array, [(index, row) for index, row in _pairs(array) if _matches(row)])

    @staticmethod
    def where_in(array: Any, key: str, values: List[Any], strict: bool = False) -> ArrayData:
        def _matches(row: Any) -> bool:
            found = _field(row, key)
            if found is _MISSING:
                return False
            return ArrSingle.contains(values, found, strict)

        return _build(array, [(index, row) for index, row in _pairs(array) if _matches(row)])

    @staticmethod
    def where_not_in(array: Any, key: str, values: List[Any], strict: bool = False) -> ArrayData:
        def _matches(row: Any) -> bool:
            found = _field(row, key)
            return found is _MISSING or not ArrSingle.contains(values, found, strict)

        return _build(array, [(index, row) for index, row in _pairs(array) if _matches(row)])

    @staticmethod
    def where_null(array: Any, key: str) -> ArrayData:
        """Keep rows where the field is missing or None."""
        return _build(array, [(index, row) for index, row in _pairs(array) if _field(row, key) in (None, _MISSING)])

    @staticmethod
    def where_not_null(array: Any, key: str) -> ArrayData:
        return _build(array, [(index, row) for index, row in _pairs(array) if _field(row, key) not in (None, _MISSING)])

    @staticmethod
    def group_by(array: Any, group_by: Union[str, Callable[[Any], Any]], preserve_keys: bool = False) -> Dict[Any, Any]:
        """Group rows by a field or callback."""
        groups: Dict[Any, Any] = defaultdict(dict if preserve_keys else list)

        for index, row in _pairs(array):
            group_key = group_by(row) if callable(group_by) else Arr.get(row, group_by)
            if preserve_keys:
                groups[group_key][index] = row
            else:
                groups[group_key].append(row)

        return dict(groups)

    @staticmethod
    def sort_by(array: Any, by: Union[str, Callable[[Any], Any]], descending: bool = False) -> List[Any]:
        """Sort rows by a field or callback; rows missing the field sort first."""
        def _key(row: Any) -> Any:
            return by(row) if callable(by) else Arr.get(row, by)

        def _compare(left: Any, right: Any) -> int:
            a, b = _key(left), _key(right)
            if a is None or b is None:
                return (a is not None) - (b is not None)
            if compare(a, b, '<'):
                return -1
            if compare(a, b, '>'):
                return 1
            return 0

        return sorted(Containers.values_of(array), key=cmp_to_key(_compare), reverse=descending)

    @staticmethod
    def accept(array: Any, column: Any = None, callback: Any = None) -> ArrayData:
        """Keep rows whose column passes the callback or equals the value."""
        if callback is None and column is not None:
            column, callback = None, column

        if callable(callback):
            test = callback
        else:
            def test(value: Any) -> bool:
                return bool(value == callback)

        return ArrMulti._keep(array, column, test)

    @staticmethod
    def except_(array: Any, column: Any = None, callback: Any = None) -> ArrayData:
        """Drop rows whose column passes the callback or equals the value."""
        if callback is None and column is not None:
            column, callback = None, column

        if callable(callback):
            def test(value: Any) -> bool:
                return not callback(value)
        else:
            def test(value: Any) -> bool:
                return bool(value != callback)

        return ArrMulti._keep(array, column, test)

    @staticmethod
    def filter(array: Any, column: Optional[str], callback: Optional[Callable[[Any], Any]] = None) -> ArrayData:
        """Keep rows whose column value passes the callback (truthy by default)."""
        if not column:
            return array

        test = callback or bool
        kept = []
        for index, row in _pairs(array):
            if test(Arr.get(row, column)):
                kept.append((index, row))
        return _build(array, kept)

    @staticmethod
    def _keep(array: Any, column: Optional[str], test: Callable[[Any], Any]) -> ArrayData:
        if column is None:
            return _build(array, [(index, row) for index, row in _pairs(array) if test(row)])
        return ArrMulti.filter(array, column, test)
