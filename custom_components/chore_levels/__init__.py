# File: __init__.py
"""Initialization file for the Chore Levels integration.

Handles setting up the integration from its config entry: the level curve in
config_entry.options becomes one LevelingEngine, shared by every service so
the award path and the display path always use the same curve.

Key Features:
- Config entry setup and unload support.
- Options update listener (reload with the retuned curve).
- Service registration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryError

from . import const
from .engines.leveling_engine import InvalidPointsError, LevelingEngine
from .services import async_setup_services, async_unload_services


def build_engine_from_options(options: Mapping[str, Any]) -> LevelingEngine:
    """Create a LevelingEngine from config entry options, filling in defaults."""
    return LevelingEngine(
        base_points=options.get(const.CONF_BASE_POINTS, const.DEFAULT_BASE_POINTS),
        multiplier=options.get(const.CONF_MULTIPLIER, const.DEFAULT_MULTIPLIER),
        max_level=options.get(const.CONF_MAX_LEVEL, const.DEFAULT_MAX_LEVEL),
    )


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("INFO: Starting setup for Chore Levels entry: %s", entry.entry_id)

    try:
        engine = build_engine_from_options(entry.options)
    except InvalidPointsError as err:
        const.LOGGER.error("ERROR: Invalid level curve in options: %s", err)
        raise ConfigEntryError(str(err)) from err

    const.LOGGER.debug("DEBUG: Level curve for entry %s: %r", entry.entry_id, engine)

    # Store the engine in hass.data.
    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.LEVELING_ENGINE: engine,
    }

    # Set up services required by the integration.
    async_setup_services(hass)

    # Rebuild the engine whenever the options flow saves a new curve.
    entry.async_on_unload(entry.add_update_listener(_async_update_listener))

    const.LOGGER.info("INFO: Chore Levels setup complete for entry: %s", entry.entry_id)
    return True


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload the entry after its options change."""
    const.LOGGER.debug("DEBUG: Options changed, reloading entry %s", entry.entry_id)
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    const.LOGGER.info("INFO: Unloading Chore Levels entry: %s", entry.entry_id)

    domain_data = hass.data.get(const.DOMAIN, {})
    domain_data.pop(entry.entry_id, None)

    if not domain_data:
        await async_unload_services(hass)

    return True
