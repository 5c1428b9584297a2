"""
Configuration View - The two end-portal settings the plugin acts on
"""

import logging
import threading
from typing import Optional

from safecrystals.models.location import Location
from safecrystals.services.provider import ConfigError, ConfigurationProvider

logger = logging.getLogger(__name__)


class ConcurrentReloadError(ConfigError):
    """reload() was entered while another reload() was still running"""
    pass


class ConfigurationView:
    """
    Portal radius and portal location, re-read from a provider on demand

    Not thread-safe. Call reload() from the plugin's main thread only; an
    overlapping call raises ConcurrentReloadError.
    """

    RADIUS_KEY = "end-portal.radius"
    LOCATION_KEY = "end-portal.location"

    def __init__(self, provider: ConfigurationProvider):
        """
        Args:
            provider: Backing store to read from. Not touched until reload().
        """
        self._provider = provider
        self._portal_radius: float = 0.0
        self._portal_location: Optional[Location] = None
        self._loaded = False
        self._reload_guard = threading.Lock()

    @property
    def portal_radius(self) -> float:
        """Radius around the portal in which crystal drops are suppressed"""
        return self._portal_radius

    @property
    def portal_location(self) -> Optional[Location]:
        """Position of the end portal, None if not configured"""
        return self._portal_location

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def reload(self) -> None:
        """
        Reload the backing store and re-read both settings

        Both fields are replaced together, or not at all if the store fails.

        Raises:
            ProviderUnavailableError: If the backing store reload fails
            ConcurrentReloadError: If another reload is in progress
        """
        if not self._reload_guard.acquire(blocking=False):
            raise ConcurrentReloadError("Configuration reload already in progress")

        try:
            self._provider.reload_backing_store()

            radius = self._provider.get_double(self.RADIUS_KEY)
            location = self._provider.get_location(self.LOCATION_KEY)

            self._portal_radius = radius
            self._portal_location = location
            self._loaded = True
        finally:
            self._reload_guard.release()

        logger.debug(f"Reloaded configuration: radius={radius}, location={location}")

    def __repr__(self) -> str:
        return (
            f"ConfigurationView(portal_radius={self._portal_radius!r}, "
            f"portal_location={self._portal_location!r})"
        )
