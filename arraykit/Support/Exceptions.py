from __future__ import annotations

from typing import Any, Optional


class ArrayKitException(Exception):
    """Base exception for arraykit"""
    pass


class InvalidArgumentException(ArrayKitException, TypeError):
    """Exception raised when a typed getter resolves a value of the wrong type"""
    
    def __init__(self, expected: str, value: Any, key: Optional[str] = None) -> None:
        self.expected = expected
        self.actual = type(value).__name__
        self.key = key
        
        message = f"Expected {expected}, got {self.actual}"
        if key is not None:
            message = f"{message} for key `{key}`"
        
        super().__init__(message)


class ConfigLoadException(ArrayKitException):
    """Exception raised when a configuration file cannot be loaded"""
    
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        
        super().__init__(f"Unable to load configuration from `{path}`: {reason}")
