"""
Services package - Configuration access and crystal drop rules
"""

from .provider import (
    ConfigError,
    ProviderUnavailableError,
    ConfigurationProvider,
    YamlConfigurationProvider
)
from .configuration import ConfigurationView, ConcurrentReloadError
from .crystals import CrystalDropPolicy

__all__ = [
    "ConfigError",
    "ProviderUnavailableError",
    "ConfigurationProvider",
    "YamlConfigurationProvider",
    "ConfigurationView",
    "ConcurrentReloadError",
    "CrystalDropPolicy"
]
