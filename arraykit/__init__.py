"""Dot-notation access and array helpers for nested dicts, lists and objects."""

from .Support import (
    Arr,
    ArrSingle,
    ArrMulti,
    Collection,
    HookedCollection,
    Pipeline,
    DataTransferObject,
    ArrayKitException,
    InvalidArgumentException,
    ConfigLoadException,
)
from .Config import ConfigRepository, DynamicConfigRepository
from .Helpers import compare, env, config, collect

__version__ = "0.1.0"

__all__ = [
    "Arr",
    "ArrSingle",
    "ArrMulti",
    "Collection",
    "HookedCollection",
    "Pipeline",
    "DataTransferObject",
    "ArrayKitException",
    "InvalidArgumentException",
    "ConfigLoadException",
    "ConfigRepository",
    "DynamicConfigRepository",
    "compare",
    "env",
    "config",
    "collect",
]
