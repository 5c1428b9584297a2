"""
Crystal Drop Policy - Decides whether a broken ender crystal drops as an item
Crystals near the end portal may be part of a dragon respawn, so they are
removed without a drop.
"""

import logging
from typing import Optional

from safecrystals.models.location import Location
from safecrystals.services.configuration import ConfigurationView

logger = logging.getLogger(__name__)


class CrystalDropPolicy:
    """
    Drop rules for player-broken ender crystals

    Core Logic:
    - No portal location configured: always drop
    - Crystal in another world than the portal: always drop
    - Distance to the portal strictly below the radius: suppress the drop

    Determined players move crystals around with pistons, so the check is a
    plain radius rather than the exact frame positions.
    """

    SUPPRESSED_SUFFIX = " - drop suppressed because dragon may spawn"

    def __init__(self, configuration: ConfigurationView):
        """
        Args:
            configuration: View read on every check, so reloads apply immediately
        """
        self.configuration = configuration

    def is_dragon_spawning_crystal(self, location: Location) -> bool:
        """
        Check if a crystal could be used to summon the dragon

        Args:
            location: Where the crystal was

        Returns:
            True if the crystal's drop should be suppressed
        """
        portal: Optional[Location] = self.configuration.portal_location
        if portal is None or portal.world != location.world:
            return False

        return location.distance(portal) < self.configuration.portal_radius

    def break_crystal(self, player_name: str, location: Location) -> bool:
        """
        Record a player breaking a crystal

        Returns:
            True if the crystal should drop as an item
        """
        suppressed = self.is_dragon_spawning_crystal(location)
        logger.info(self.format_break_message(player_name, location, suppressed))
        return not suppressed

    def format_break_message(self, player_name: str, location: Location, suppressed: bool) -> str:
        suffix = self.SUPPRESSED_SUFFIX if suppressed else ""
        return f"{player_name} broke an Ender Crystal at {location}{suffix}"
