"""
CrystalDropPolicy: drop suppression around the end portal
"""

import logging

import pytest

from safecrystals.models.location import Location
from safecrystals.services.configuration import ConfigurationView
from safecrystals.services.crystals import CrystalDropPolicy


@pytest.fixture
def policy(fake_provider, portal_location):
    fake_provider.values["end-portal.radius"] = 10.0
    fake_provider.values["end-portal.location"] = portal_location
    view = ConfigurationView(fake_provider)
    view.reload()
    return CrystalDropPolicy(view)


def test_crystal_inside_radius_is_suppressed(policy):
    assert policy.is_dragon_spawning_crystal(
        Location(world="world_the_end", x=3.5, y=64.0, z=0.5)
    )


def test_crystal_on_radius_boundary_drops(policy):
    assert not policy.is_dragon_spawning_crystal(
        Location(world="world_the_end", x=10.5, y=64.0, z=0.5)
    )


def test_crystal_in_other_world_drops(policy):
    assert not policy.is_dragon_spawning_crystal(
        Location(world="world", x=0.5, y=64.0, z=0.5)
    )


def test_no_portal_location_never_suppresses(fake_provider):
    fake_provider.values["end-portal.radius"] = 1000.0
    view = ConfigurationView(fake_provider)
    view.reload()
    policy = CrystalDropPolicy(view)

    assert not policy.is_dragon_spawning_crystal(
        Location(world="world_the_end", x=0.0, y=64.0, z=0.0)
    )


def test_unloaded_view_never_suppresses(fake_provider):
    policy = CrystalDropPolicy(ConfigurationView(fake_provider))

    assert not policy.is_dragon_spawning_crystal(
        Location(world="world_the_end", x=0.5, y=64.0, z=0.5)
    )


def test_reload_applies_to_policy(policy, fake_provider):
    crystal = Location(world="world_the_end", x=5.5, y=64.0, z=0.5)
    assert policy.is_dragon_spawning_crystal(crystal)

    fake_provider.values["end-portal.radius"] = 2.0
    policy.configuration.reload()

    assert not policy.is_dragon_spawning_crystal(crystal)


def test_break_crystal_logs_and_reports_drop(policy, caplog):
    caplog.set_level(logging.INFO, logger="safecrystals")

    near = Location(world="world_the_end", x=1.2, y=65.0, z=0.5)
    far = Location(world="world_the_end", x=100.0, y=65.0, z=-20.3)

    assert policy.break_crystal("Steve", near) is False
    assert policy.break_crystal("Alex", far) is True

    messages = [record.getMessage() for record in caplog.records]
    assert "Steve broke an Ender Crystal at world_the_end, 1, 65, 0 - drop suppressed because dragon may spawn" in messages
    assert "Alex broke an Ender Crystal at world_the_end, 100, 65, -21" in messages


def test_far_away_crystal_with_huge_coordinates_drops(policy):
    assert not policy.is_dragon_spawning_crystal(
        Location(world="world_the_end", x=1e200, y=64.0, z=-1e200)
    )
