"""
Configuration Provider - Key-value access to the plugin's backing store
Reads the Bukkit-style config.yml with dotted key paths
"""

import logging
import math
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

import yaml
from pydantic import ValidationError

from safecrystals.models.location import Location

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors"""
    pass


class ProviderUnavailableError(ConfigError):
    """The backing store could not be reloaded"""
    pass


class ConfigurationProvider(Protocol):
    """
    What ConfigurationView needs from a backing store

    Missing keys are never errors: get_double falls back to its default and
    get_location returns None.
    """

    def reload_backing_store(self) -> None: ...

    def get_double(self, key: str, default: float = 0.0) -> float: ...

    def get_location(self, key: str) -> Optional[Location]: ...


_MISSING = object()


class YamlConfigurationProvider:
    """
    ConfigurationProvider backed by a YAML file

    Features:
    - Dotted key paths into nested mappings ("end-portal.radius")
    - Atomic reload: a failed reload keeps the previously loaded data
    - Bukkit getDouble semantics: only real numbers count, everything else is the default
    - Writes the packaged default config.yml on first start
    """

    DEFAULT_RESOURCE = "resources/config.yml"
    PATH_SEPARATOR = "."

    def __init__(self, path: Union[str, Path]):
        """
        Initialize provider

        Args:
            path: Location of the YAML file. Nothing is read until
                reload_backing_store() is called.
        """
        self.path = Path(path)
        self._data: Dict[str, Any] = {}

    def reload_backing_store(self) -> None:
        """
        Re-read the YAML file

        Raises:
            ProviderUnavailableError: If the file cannot be read or parsed
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except UnicodeDecodeError as e:
            logger.error(f"Configuration file {self.path} is not valid UTF-8: {e}")
            raise ProviderUnavailableError(f"{self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            logger.error(f"Cannot read configuration file {self.path}: {e}")
            raise ProviderUnavailableError(f"Cannot read {self.path}: {e}") from e
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in configuration file {self.path}: {e}")
            raise ProviderUnavailableError(f"Invalid YAML in {self.path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.error(f"Configuration file {self.path} does not hold a mapping")
            raise ProviderUnavailableError(
                f"Top level of {self.path} must be a mapping, got {type(data).__name__}"
            )

        self._data = data
        logger.debug(f"Loaded {len(data)} top-level key(s) from {self.path}")

    def save_default_config(self, overwrite: bool = False) -> bool:
        """
        Copy the packaged default config.yml to the provider path

        Args:
            overwrite: Replace an existing file

        Returns:
            True if a file was written
        """
        if self.path.exists() and not overwrite:
            return False

        default_text = files("safecrystals").joinpath(self.DEFAULT_RESOURCE).read_text(encoding="utf-8")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(default_text, encoding="utf-8")

        logger.info(f"Wrote default configuration to {self.path}")
        return True

    def get(self, key: str, default: Any = None) -> Any:
        """Raw value at a dotted key path, or default if any segment is missing"""
        value = self._lookup(key)
        return default if value is _MISSING else value

    def contains(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def get_double(self, key: str, default: float = 0.0) -> float:
        """
        Get a floating point value

        Ints and floats are accepted. Booleans, strings and non-finite
        numbers resolve to the default.
        """
        value = self._lookup(key)
        if value is _MISSING:
            return default

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning(f"Config key '{key}' is not a number ({value!r}), using {default}")
            return default

        try:
            value = float(value)
        except OverflowError:
            logger.warning(f"Config key '{key}' is too large for a float, using {default}")
            return default

        if not math.isfinite(value):
            logger.warning(f"Config key '{key}' is not finite ({value}), using {default}")
            return default

        return value

    def get_location(self, key: str) -> Optional[Location]:
        """
        Get a Location value

        Returns:
            Location, or None if the key is missing or does not hold a valid location
        """
        value = self._lookup(key)
        if value is _MISSING or value is None:
            return None

        if not isinstance(value, dict):
            logger.warning(f"Config key '{key}' is not a location mapping ({value!r})")
            return None

        try:
            return Location.model_validate(value)
        except ValidationError as e:
            logger.warning(f"Config key '{key}' is not a valid location: {e.error_count()} error(s)")
            return None

    def _lookup(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split(self.PATH_SEPARATOR):
            if not isinstance(node, dict) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def __repr__(self) -> str:
        return f"YamlConfigurationProvider(path={str(self.path)!r})"
