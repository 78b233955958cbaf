# File: services.py
"""Defines custom services for the Chore Levels integration.

These services let scripts, automations and other integrations (chore
trackers, dashboards) query the level curve. All of them return a response;
check_level_up also fires a level-up event on the bus.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError
from homeassistant.helpers import config_validation as cv

from . import const
from .engines.leveling_engine import (
    InvalidPointsError,
    LevelCapExceededError,
    LevelingEngine,
)

_T = TypeVar("_T")


def _parse_points(value: Any) -> Any:
    """Parse numeric strings, leaving every other value for the engine to check.

    Integer text is parsed as int first so large totals keep full precision.
    Bools and fractions pass through untouched and are rejected by the engine.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


# --- Service Schemas ---
GET_LEVEL_PROGRESS_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_TOTAL_POINTS): _parse_points,
    }
)

CHECK_LEVEL_UP_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_POINTS_BEFORE): _parse_points,
        vol.Required(const.FIELD_POINTS_AFTER): _parse_points,
        vol.Optional(const.FIELD_KID_NAME): cv.string,
    }
)

GET_LEVEL_TABLE_SCHEMA = vol.Schema(
    {
        vol.Optional(
            const.FIELD_MAX_LEVEL, default=const.DEFAULT_LEVEL_TABLE_SIZE
        ): _parse_points,
    }
)

RECONCILE_LEVEL_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_CACHED_LEVEL): _parse_points,
        vol.Required(const.FIELD_TOTAL_POINTS): _parse_points,
    }
)

SERVICES = [
    const.SERVICE_GET_LEVEL_PROGRESS,
    const.SERVICE_CHECK_LEVEL_UP,
    const.SERVICE_GET_LEVEL_TABLE,
    const.SERVICE_RECONCILE_LEVEL,
]


def get_leveling_engine(hass: HomeAssistant) -> LevelingEngine:
    """Return the engine of the loaded Chore Levels entry.

    Raises:
        HomeAssistantError: If no entry is loaded
    """
    for entry_data in hass.data.get(const.DOMAIN, {}).values():
        return entry_data[const.LEVELING_ENGINE]

    const.LOGGER.warning("WARNING: No Chore Levels entry loaded")
    raise HomeAssistantError(
        translation_domain=const.DOMAIN,
        translation_key=const.TRANS_KEY_ERROR_NO_ENTRY_FOUND,
    )


def _run_engine(service: str, func: Callable[..., _T], *args: Any) -> _T:
    """Call an engine method, translating engine errors for the caller."""
    try:
        return func(*args)
    except InvalidPointsError as err:
        const.LOGGER.warning("WARNING: %s: %s", service, err)
        raise ServiceValidationError(
            translation_domain=const.DOMAIN,
            translation_key=const.TRANS_KEY_ERROR_INVALID_POINTS,
            translation_placeholders={"field": err.field, "value": str(err.value)},
        ) from err
    except LevelCapExceededError as err:
        const.LOGGER.error("ERROR: %s: %s", service, err)
        raise HomeAssistantError(
            translation_domain=const.DOMAIN,
            translation_key=const.TRANS_KEY_ERROR_LEVEL_CAP_EXCEEDED,
            translation_placeholders={"max_level": str(err.max_level)},
        ) from err


def async_setup_services(hass: HomeAssistant) -> None:
    """Register Chore Levels services."""
    if hass.services.has_service(const.DOMAIN, const.SERVICE_GET_LEVEL_PROGRESS):
        return

    async def handle_get_level_progress(call: ServiceCall) -> ServiceResponse:
        """Handle computing the progress report for a point total."""
        engine = get_leveling_engine(hass)
        progress = _run_engine(
            const.SERVICE_GET_LEVEL_PROGRESS,
            engine.get_level_progress,
            call.data[const.FIELD_TOTAL_POINTS],
        )
        return dict(progress)

    async def handle_check_level_up(call: ServiceCall) -> ServiceResponse:
        """Handle comparing levels before and after a point award."""
        engine = get_leveling_engine(hass)
        kid_name = call.data.get(const.FIELD_KID_NAME)
        result = _run_engine(
            const.SERVICE_CHECK_LEVEL_UP,
            engine.check_level_up,
            call.data[const.FIELD_POINTS_BEFORE],
            call.data[const.FIELD_POINTS_AFTER],
        )

        if result["leveled_up"]:
            const.LOGGER.info(
                "INFO: Level up for '%s': %s → %s (%s levels)",
                kid_name,
                result["old_level"],
                result["new_level"],
                result["levels_gained"],
            )
            hass.bus.async_fire(
                const.EVENT_LEVEL_UP,
                {**result, const.FIELD_KID_NAME: kid_name},
            )

        return dict(result)

    async def handle_get_level_table(call: ServiceCall) -> ServiceResponse:
        """Handle listing thresholds for the first levels of the curve."""
        engine = get_leveling_engine(hass)
        table = _run_engine(
            const.SERVICE_GET_LEVEL_TABLE,
            engine.build_level_table,
            call.data[const.FIELD_MAX_LEVEL],
        )
        return {const.DATA_LEVELS: [dict(row) for row in table]}

    async def handle_reconcile_level(call: ServiceCall) -> ServiceResponse:
        """Handle checking a stored level against the point total."""
        engine = get_leveling_engine(hass)
        status = _run_engine(
            const.SERVICE_RECONCILE_LEVEL,
            engine.reconcile_cached_level,
            call.data[const.FIELD_CACHED_LEVEL],
            call.data[const.FIELD_TOTAL_POINTS],
        )
        if status["is_stale"]:
            const.LOGGER.debug(
                "DEBUG: Stored level %s is stale, derived level is %s",
                status["cached_level"],
                status["computed_level"],
            )
        return dict(status)

    # --- Register Services ---
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_GET_LEVEL_PROGRESS,
        handle_get_level_progress,
        schema=GET_LEVEL_PROGRESS_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_CHECK_LEVEL_UP,
        handle_check_level_up,
        schema=CHECK_LEVEL_UP_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_GET_LEVEL_TABLE,
        handle_get_level_table,
        schema=GET_LEVEL_TABLE_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )
    hass.services.async_register(
        const.DOMAIN,
        const.SERVICE_RECONCILE_LEVEL,
        handle_reconcile_level,
        schema=RECONCILE_LEVEL_SCHEMA,
        supports_response=SupportsResponse.ONLY,
    )

    const.LOGGER.info("INFO: Chore Levels services have been registered successfully")


async def async_unload_services(hass: HomeAssistant) -> None:
    """Unregister Chore Levels services when unloading the integration."""
    for service in SERVICES:
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)

    const.LOGGER.info("INFO: Chore Levels services have been unregistered")
