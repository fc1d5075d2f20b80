from .helpers import compare, is_callable, env, config, collect

__all__ = [
    "compare",
    "is_callable",
    "env",
    "config",
    "collect",
]
