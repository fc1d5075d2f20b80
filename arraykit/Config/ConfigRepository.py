from __future__ import annotations

import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterator, Mapping, Optional, Union
from collections.abc import MutableMapping

import yaml
from typing_extensions import Self

from arraykit.Support.Arr import Arr
from arraykit.Support.Exceptions import ConfigLoadException
from arraykit.Support.Hooks import HasHooks
from arraykit.Types import ArrayKey, KeyInput


class ConfigRepository(MutableMapping[str, Any]):
    """Dot-notation configuration store.

    The store is populated once, from a mapping or a file; afterwards it is
    changed only through ``set``, ``fill``, ``forget`` and friends.
    """

    _instances: ClassVar[Dict[type, ConfigRepository]] = {}

    def __init__(self, items: Optional[Dict[str, Any]] = None) -> None:
        self._items: Dict[str, Any] = dict(items or {})
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def instance(cls) -> Self:
        """Get the shared store for this class, creating it on first use."""
        if cls not in ConfigRepository._instances:
            ConfigRepository._instances[cls] = cls()
        return ConfigRepository._instances[cls]  # type: ignore[return-value]

    @classmethod
    def forget_instance(cls) -> None:
        """Drop the shared store for this class."""
        ConfigRepository._instances.pop(cls, None)

    # Loading
    def load_array(self, resource: Mapping[str, Any]) -> bool:
        """Load configuration from a mapping, unless already populated."""
        if self._items:
            self.logger.debug("Configuration already loaded, ignoring array resource")
            return False

        self._items = dict(resource)
        return True

    def load_file(self, path: Union[str, Path]) -> bool:
        """Load configuration from a .py, .json, .yaml or .yml file.

        Returns False when the store is already populated or the file does
        not exist.
        """
        file_path = Path(path)

        if self._items:
            self.logger.debug(f"Configuration already loaded, ignoring {file_path}")
            return False
        if not file_path.is_file():
            self.logger.debug(f"Configuration file not found: {file_path}")
            return False

        try:
            data = self._read_file(file_path)
        except ConfigLoadException:
            raise
        except Exception as e:
            self.logger.error(f"Failed to load configuration {file_path}: {e}")
            raise ConfigLoadException(str(file_path), str(e)) from e

        if not isinstance(data, Mapping):
            self.logger.error(f"Configuration {file_path} does not contain a mapping")
            raise ConfigLoadException(str(file_path), f"expected a mapping, got {type(data).__name__}")

        self._items = dict(data)
        self.logger.debug(f"Loaded configuration from {file_path}")
        return True

    def _read_file(self, file_path: Path) -> Any:
        suffix = file_path.suffix.lower()

        if suffix == '.json':
            with open(file_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        if suffix in ('.yaml', '.yml'):
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        if suffix == '.py':
            return self._load_python_config(file_path)

        self.logger.error(f"Unsupported configuration file type: {suffix}")
        raise ConfigLoadException(str(file_path), f"unsupported file type `{suffix}`")

    def _load_python_config(self, file_path: Path) -> Dict[str, Any]:
        """Load configuration from the public attributes of a Python module."""
        spec = importlib.util.spec_from_file_location(f"arraykit_config_{file_path.stem}", file_path)
        if spec is None or spec.loader is None:
            raise ConfigLoadException(str(file_path), "cannot create a module loader")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        # Public, non-callable attributes only
        return {
            name: value
            for name, value in vars(module).items()
            if not name.startswith('_') and not callable(value) and not isinstance(value, type(module))
        }

    # Access
    def all(self) -> Dict[str, Any]:
        """Get all configuration items."""
        return self._items

    def has(self, keys: KeyInput) -> bool:
        return Arr.has(self._items, keys)

    def has_any(self, keys: KeyInput) -> bool:
        return Arr.has_any(self._items, keys)

    def get(self, key: Any = None, default: Any = None) -> Any:  # type: ignore[override]
        """Get one or many configuration values using dot notation."""
        return Arr.get(self._items, key, default)

    def set(self, key: Any = None, value: Any = None, overwrite: bool = True) -> bool:
        """Set one or many configuration values using dot notation."""
        return Arr.set(self._items, key, value, overwrite)

    def fill(self, key: Any, value: Any = None) -> bool:
        """Set configuration values only where they are missing."""
        return self.set(key, value, overwrite=False)

    def forget(self, keys: KeyInput) -> None:
        """Remove one or many configuration values."""
        Arr.forget(self._items, keys)

    def prepend(self, key: ArrayKey, value: Any) -> bool:
        """Prepend a value onto a configuration array."""
        array = list(Arr.wrap(self.get(key, [])))
        array.insert(0, value)
        return self.set(key, array)

    def append(self, key: ArrayKey, value: Any) -> bool:
        """Push a value onto a configuration array."""
        array = list(Arr.wrap(self.get(key, [])))
        array.append(value)
        return self.set(key, array)

    # Mapping interface
    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __getitem__(self, key: str) -> Any:
        if not self.has(key):
            raise KeyError(key)
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.has(key):
            raise KeyError(key)
        self.forget(key)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


class DynamicConfigRepository(HasHooks, ConfigRepository):
    """Configuration store with per-key get and set hooks."""

    def get(self, key: Any = None, default: Any = None) -> Any:
        value = super().get(key, default)
        if isinstance(key, (str, int)):
            return self._process_value(key, value, 'get')
        return value

    def set(self, key: Any = None, value: Any = None, overwrite: bool = True) -> bool:
        if isinstance(key, Mapping):
            processed = {name: self._process_value(name, item, 'set') for name, item in key.items()}
            return super().set(processed, None, overwrite)

        if key is not None:
            value = self._process_value(key, value, 'set')
        return super().set(key, value, overwrite)
