"""Shared fixtures for Chore Levels tests."""

from typing import Any

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.chore_levels.const import (
    CHORE_LEVELS_TITLE,
    CONF_BASE_POINTS,
    CONF_MAX_LEVEL,
    CONF_MULTIPLIER,
    DEFAULT_BASE_POINTS,
    DEFAULT_MAX_LEVEL,
    DEFAULT_MULTIPLIER,
    DOMAIN,
)
from custom_components.chore_levels.engines.leveling_engine import LevelingEngine

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture
def engine() -> LevelingEngine:
    """Return an engine with the default curve (50 points, x1.5)."""
    return LevelingEngine()


@pytest.fixture
def curve_options() -> dict[str, Any]:
    """Return the default curve as stored in config entry options."""
    return {
        CONF_BASE_POINTS: DEFAULT_BASE_POINTS,
        CONF_MULTIPLIER: DEFAULT_MULTIPLIER,
        CONF_MAX_LEVEL: DEFAULT_MAX_LEVEL,
    }


@pytest.fixture
def mock_config_entry(
    curve_options: dict[str, Any],  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title=CHORE_LEVELS_TITLE,
        data={},
        options=curve_options,
        entry_id="test_entry_id",
        unique_id="test_unique_id",
    )


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the integration with the mock config entry."""
    mock_config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
    await hass.async_block_till_done()
    return mock_config_entry
