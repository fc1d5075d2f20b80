from .ArrayTypes import (
    ArrayKey,
    ArrayData,
    Container,
    KeyInput,
    SetKeyInput,
    HookCallback,
    KeyedCallback,
)

__all__ = [
    "ArrayKey",
    "ArrayData",
    "Container",
    "KeyInput",
    "SetKeyInput",
    "HookCallback",
    "KeyedCallback",
]
