"""
SafeCrystals - End portal configuration for the ender crystal protection plugin
"""

from safecrystals.models.location import Location
from safecrystals.services.configuration import ConfigurationView
from safecrystals.services.provider import (
    ConfigError,
    ConfigurationProvider,
    ProviderUnavailableError,
    YamlConfigurationProvider
)

__all__ = [
    "Location",
    "ConfigurationView",
    "ConfigError",
    "ConfigurationProvider",
    "ProviderUnavailableError",
    "YamlConfigurationProvider"
]
