from __future__ import annotations

from typing import Any, List, Callable, Optional, TypeVar, Union, TYPE_CHECKING
from functools import reduce
import copy

from arraykit.Support.Arr import Arr
from arraykit.Support.ArrMulti import ArrMulti
from arraykit.Support.ArrSingle import ArrSingle
from arraykit.Types import ArrayData, KeyedCallback

if TYPE_CHECKING:
    from arraykit.Support.Collection import Collection

T = TypeVar('T')


class Pipeline:
    """Laravel-style fluent chain of array transformations over a collection.

    Each chainable method transforms a working copy of the data and returns
    the pipeline; ``get()`` writes the result back into the collection.
    """

    def __init__(self, working: ArrayData, collection: Collection) -> None:
        self.working: Any = copy.copy(working)
        self.collection = collection
        self.pipes: List[Union[Callable[[Any, Callable[[Any], Any]], Any], Any]] = []
        self.method = "handle"

    def get(self) -> Collection:
        """Finish the chain and store the result in the collection."""
        return self.collection.set_data(self.working)

    # Single-dimension stages
    def only(self, keys: Union[Any, List[Any]]) -> Pipeline:
        self.working = ArrSingle.only(self.working, keys)
        return self

    def nth(self, step: int, offset: int = 0) -> Pipeline:
        self.working = ArrSingle.nth(self.working, step, offset)
        return self

    def duplicates(self) -> Pipeline:
        self.working = ArrSingle.duplicates(self.working)
        return self

    def slice(self, offset: int, length: Optional[int] = None) -> Pipeline:
        self.working = ArrSingle.slice(self.working, offset, length)
        return self

    def paginate(self, page: int, per_page: int) -> Pipeline:
        self.working = ArrSingle.paginate(self.working, page, per_page)
        return self

    def combine(self, values: List[Any]) -> Pipeline:
        """Use the current values as keys for ``values``."""
        self.working = ArrSingle.combine(ArrSingle.separate(self.working)['values'], values)
        return self

    def map(self, callback: KeyedCallback) -> Pipeline:
        self.working = ArrSingle.map(self.working, callback)
        return self

    def filter(self, callback: Optional[KeyedCallback] = None) -> Pipeline:
        self.working = ArrSingle.where(self.working, callback)
        return self

    def chunk(self, size: int, preserve_keys: bool = False) -> Pipeline:
        self.working = ArrSingle.chunk(self.working, size, preserve_keys)
        return self

    def unique(self, strict: bool = False) -> Pipeline:
        self.working = ArrSingle.unique(self.working, strict)
        return self

    def reject(self, callback: Any = True) -> Pipeline:
        self.working = ArrSingle.reject(self.working, callback)
        return self

    def skip(self, count: int) -> Pipeline:
        self.working = ArrSingle.skip(self.working, count)
        return self

    def skip_while(self, callback: KeyedCallback) -> Pipeline:
        self.working = ArrSingle.skip_while(self.working, callback)
        return self

    def skip_until(self, callback: KeyedCallback) -> Pipeline:
        self.working = ArrSingle.skip_until(self.working, callback)
        return self

    def partition(self, callback: KeyedCallback) -> Pipeline:
        """Replace the data with ``[passed, failed]``."""
        self.working = list(ArrSingle.partition(self.working, callback))
        return self

    def shuffle(self, seed: Optional[int] = None) -> Pipeline:
        self.working = ArrSingle.shuffle(self.working, seed)
        return self

    # Multi-dimension stages
    def flatten(self, depth: Union[int, float] = float('inf')) -> Pipeline:
        self.working = ArrMulti.flatten(self.working, depth)
        return self

    def flatten_by_key(self) -> Pipeline:
        self.working = ArrMulti.flatten_by_key(self.working)
        return self

    def sort_recursive(self, descending: bool = False) -> Pipeline:
        self.working = ArrMulti.sort_recursive(self.working, descending)
        return self

    def collapse(self) -> Pipeline:
        self.working = ArrMulti.collapse(self.working)
        return self

    def group_by(self, group_by: Union[str, Callable[[Any], Any]], preserve_keys: bool = False) -> Pipeline:
        self.working = ArrMulti.group_by(self.working, group_by, preserve_keys)
        return self

    def between(self, key: str, start: Union[int, float], end: Union[int, float]) -> Pipeline:
        self.working = ArrMulti.between(self.working, key, start, end)
        return self

    def where_callback(self, callback: Optional[Callable[[Any, Any], bool]] = None, default: Any = None) -> Pipeline:
        self.working = ArrMulti.where_callback(self.working, callback, default)
        return self

    def where(self, key: str, operator: Any = None, value: Any = None) -> Pipeline:
        self.working = ArrMulti.where(self.working, key, operator, value)
        return self

    def where_in(self, key: str, values: List[Any], strict: bool = False) -> Pipeline:
        self.working = ArrMulti.where_in(self.working, key, values, strict)
        return self

    def where_not_in(self, key: str, values: List[Any], strict: bool = False) -> Pipeline:
        self.working = ArrMulti.where_not_in(self.working, key, values, strict)
        return self

    def where_null(self, key: str) -> Pipeline:
        self.working = ArrMulti.where_null(self.working, key)
        return self

    def where_not_null(self, key: str) -> Pipeline:
        self.working = ArrMulti.where_not_null(self.working, key)
        return self

    def sort_by(self, by: Union[str, Callable[[Any], Any]], descending: bool = False) -> Pipeline:
        self.working = ArrMulti.sort_by(self.working, by, descending)
        return self

    def wrap(self) -> Pipeline:
        self.working = Arr.wrap(self.working)
        return self

    def unwrap(self) -> Pipeline:
        unwrapped = Arr.unwrap(self.working)
        self.working = unwrapped if Arr.accessible(unwrapped) else [unwrapped]
        return self

    # Terminal methods
    def is_multi_dimensional(self) -> bool:
        return Arr.is_multi_dimensional(self.working)

    def sum(self, callback: Optional[Callable[[Any], Any]] = None) -> Union[int, float]:
        return ArrSingle.sum(self.working, callback)

    def first(self, callback: Optional[Callable[[Any, Any], bool]] = None, default: Any = None) -> Any:
        return ArrMulti.first(self.working, callback, default)

    def last(self, callback: Optional[Callable[[Any, Any], bool]] = None, default: Any = None) -> Any:
        return ArrMulti.last(self.working, callback, default)

    def reduce(self, callback: Callable[[Any, Any, Any], Any], initial: Any = None) -> Any:
        return ArrSingle.reduce(self.working, callback, initial)

    def any(self, callback: KeyedCallback) -> bool:
        return ArrSingle.some(self.working, callback)

    # Custom stages
    def through(self, pipes: List[Union[Callable[..., Any], Any]]) -> Pipeline:
        """Set the stages; each receives ``(data, next)`` and returns ``next(data)``'s result or its own."""
        self.pipes = list(pipes)
        return self

    def via(self, method: str) -> Pipeline:
        """Set the method to call on object stages."""
        self.method = method
        return self

    def then(self, destination: Callable[[Any], T]) -> T:
        """Run the stages with a final destination."""
        pipeline = reduce(
            lambda stack, pipe: self._carry(pipe, stack),
            reversed(self.pipes),
            destination
        )

        return pipeline(self.working)

    def then_return(self) -> Pipeline:
        """Run the stages and keep the result as the working data."""
        self.working = self.then(lambda passable: passable)
        return self

    def _carry(self, pipe: Union[Callable[..., Any], Any], stack: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Get a closure that represents a slice of the application onion."""
        def closure(passable: Any) -> Any:
            if callable(pipe):
                return pipe(passable, stack)

            method = getattr(pipe, self.method, None)
            if callable(method):
                return method(passable, stack)

            return stack(passable)

        return closure


def pipeline(collection: Collection) -> Pipeline:
    """Helper function to create a pipeline."""
    return collection.process()
