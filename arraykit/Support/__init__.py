from .Exceptions import ArrayKitException, InvalidArgumentException, ConfigLoadException
from .KeyPath import KeyPath, Segment, SegmentKind
from .Containers import MISSING
from .Accessor import Accessor
from .Mutator import Mutator
from .Arr import Arr
from .ArrSingle import ArrSingle
from .ArrMulti import ArrMulti
from .Hooks import HasHooks
from .Collection import Collection
from .Pipeline import Pipeline, pipeline
from .HookedCollection import HookedCollection
from .DataTransferObject import DataTransferObject

__all__ = [
    "ArrayKitException",
    "InvalidArgumentException",
    "ConfigLoadException",
    "KeyPath",
    "Segment",
    "SegmentKind",
    "MISSING",
    "Accessor",
    "Mutator",
    "Arr",
    "ArrSingle",
    "ArrMulti",
    "HasHooks",
    "Collection",
    "Pipeline",
    "pipeline",
    "HookedCollection",
    "DataTransferObject",
]
