"""
SafeCrystals - Plugin bootstrap
Wires settings, logging, the YAML backing store and the configuration view
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from safecrystals.core.config import Settings, get_settings
from safecrystals.services.configuration import ConfigurationView
from safecrystals.services.crystals import CrystalDropPolicy
from safecrystals.services.provider import ConfigError, YamlConfigurationProvider

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Apply the logging configuration described by settings"""
    logging.config.dictConfig(settings.get_log_config())


class SafeCrystalsPlugin:
    """
    Plugin lifecycle around one ConfigurationView

    The host server calls on_enable() at startup and reload_configuration()
    from its reload command, both on the main thread.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.provider = YamlConfigurationProvider(settings.config_path)
        self.configuration = ConfigurationView(self.provider)
        self.drop_policy = CrystalDropPolicy(self.configuration)

    def on_enable(self) -> bool:
        """
        Write the default config if needed and load it

        Returns:
            True if the configuration loaded
        """
        logger.info("=" * 60)
        logger.info(f"Enabling {self.settings.app_name} v{self.settings.app_version}")
        logger.info(f"Configuration file: {self.provider.path}")
        logger.info("=" * 60)

        self.provider.save_default_config()
        return self.reload_configuration()

    def reload_configuration(self) -> bool:
        """
        Reload the configuration, keeping the previous values on failure

        Returns:
            True if the reload succeeded
        """
        try:
            self.configuration.reload()
        except ConfigError as e:
            logger.error(f"Configuration reload failed, keeping previous values: {e}")
            return False

        location = self.configuration.portal_location
        logger.info(
            f"End portal radius: {self.configuration.portal_radius}, "
            f"location: {location if location is not None else 'not set'}"
        )
        return True

    def on_disable(self) -> None:
        logger.info(f"Disabling {self.settings.app_name}")


def create_plugin(env_file: Optional[Union[str, Path]] = None) -> SafeCrystalsPlugin:
    """
    Build a plugin from the environment

    Args:
        env_file: Optional .env file to load before reading settings

    Returns:
        Plugin instance, not yet enabled
    """
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))
    settings = get_settings()
    configure_logging(settings)
    return SafeCrystalsPlugin(settings)


if __name__ == "__main__":
    plugin = create_plugin()
    if plugin.on_enable():
        print(f"Radius: {plugin.configuration.portal_radius}")
        print(f"Location: {plugin.configuration.portal_location}")
    plugin.on_disable()
