from .ConfigRepository import ConfigRepository, DynamicConfigRepository

__all__ = [
    "ConfigRepository",
    "DynamicConfigRepository",
]
