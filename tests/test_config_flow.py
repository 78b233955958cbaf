"""Tests for Chore Levels config flow and options flow."""

from unittest.mock import patch

from homeassistant import config_entries
from homeassistant.config_entries import ConfigEntryState
from homeassistant.core import HomeAssistant
from homeassistant.data_entry_flow import FlowResultType
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.chore_levels.const import (
    CONF_BASE_POINTS,
    CONF_MAX_LEVEL,
    CONF_MULTIPLIER,
    DOMAIN,
    LEVELING_ENGINE,
)


async def test_form_user_flow_success(hass: HomeAssistant) -> None:
    """Test successful user config flow."""
    result = await hass.config_entries.flow.async_init(
        DOMAIN, context={"source": config_entries.SOURCE_USER}
    )
    assert result.get("type") == FlowResultType.FORM
    assert result.get("step_id") == "user"

    with patch(
        "custom_components.chore_levels.async_setup_entry",
        return_value=True,
    ) as mock_setup_entry:
        result = await hass.config_entries.flow.async_configure(
            result.get("flow_id"),
            user_input={
                CONF_BASE_POINTS: 40,
                CONF_MULTIPLIER: 1.25,
                CONF_MAX_LEVEL: 200,
            },
        )
        await hass.async_block_till_done()

    assert result.get("type") == FlowResultType.CREATE_ENTRY
    assert result.get("title") == "Chore Levels"

    entry = result.get("result")
    assert entry.options == {
        CONF_BASE_POINTS: 40,
        CONF_MULTIPLIER: 1.25,
        CONF_MAX_LEVEL: 200,
    }
    assert len(mock_setup_entry.mock_calls) == 1


async def test_form_user_flow_rejects_flat_curve(hass: HomeAssistant) -> None:
    """Test a curve that does not grow is refused with form errors."""
    result = await hass.config_entries.flow.async_init(
        DOMAIN, context={"source": config_entries.SOURCE_USER}
    )

    result = await hass.config_entries.flow.async_configure(
        result.get("flow_id"),
        user_input={
            CONF_BASE_POINTS: 50,
            CONF_MULTIPLIER: 1.0,
            CONF_MAX_LEVEL: 200,
        },
    )

    assert result.get("type") == FlowResultType.FORM
    assert result.get("errors") == {CONF_MULTIPLIER: "invalid_multiplier"}


async def test_form_user_flow_single_instance(
    hass: HomeAssistant, mock_config_entry: MockConfigEntry
) -> None:
    """Test a second curve cannot be configured."""
    mock_config_entry.add_to_hass(hass)

    result = await hass.config_entries.flow.async_init(
        DOMAIN, context={"source": config_entries.SOURCE_USER}
    )

    assert result.get("type") == FlowResultType.ABORT
    assert result.get("reason") == "single_instance_allowed"


async def test_setup_and_unload_entry(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Test the engine is stored on setup and dropped on unload."""
    assert init_integration.state is ConfigEntryState.LOADED
    engine = hass.data[DOMAIN][init_integration.entry_id][LEVELING_ENGINE]
    assert engine.curve["base_points"] == 50

    assert await hass.config_entries.async_unload(init_integration.entry_id)
    await hass.async_block_till_done()

    assert init_integration.state is ConfigEntryState.NOT_LOADED
    assert init_integration.entry_id not in hass.data[DOMAIN]


async def test_setup_rejects_invalid_curve(hass: HomeAssistant) -> None:
    """Test corrupt options fail setup instead of building a broken engine."""
    entry = MockConfigEntry(
        domain=DOMAIN,
        data={},
        options={CONF_BASE_POINTS: -10, CONF_MULTIPLIER: 1.5, CONF_MAX_LEVEL: 100},
    )
    entry.add_to_hass(hass)

    assert not await hass.config_entries.async_setup(entry.entry_id)
    await hass.async_block_till_done()

    assert entry.state is ConfigEntryState.SETUP_ERROR


async def test_options_flow_updates_curve(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Test retuning the curve reloads the entry with a new engine."""
    result = await hass.config_entries.options.async_init(init_integration.entry_id)
    assert result.get("type") == FlowResultType.FORM
    assert result.get("step_id") == "init"

    result = await hass.config_entries.options.async_configure(
        result.get("flow_id"),
        user_input={
            CONF_BASE_POINTS: 100,
            CONF_MULTIPLIER: 2.0,
            CONF_MAX_LEVEL: 500,
        },
    )
    await hass.async_block_till_done()

    assert result.get("type") == FlowResultType.CREATE_ENTRY
    assert init_integration.options[CONF_BASE_POINTS] == 100
    assert init_integration.options[CONF_MAX_LEVEL] == 500

    engine = hass.data[DOMAIN][init_integration.entry_id][LEVELING_ENGINE]
    assert engine.curve == {"base_points": 100, "multiplier": 2.0, "max_level": 500}
    assert engine.calculate_level_from_points(300) == 3


async def test_options_flow_shows_errors(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Test invalid values keep the form open with field errors."""
    result = await hass.config_entries.options.async_init(init_integration.entry_id)

    with patch(
        "custom_components.chore_levels.flow_helpers.validate_leveling_inputs",
        return_value={CONF_MULTIPLIER: "invalid_multiplier"},
    ):
        result = await hass.config_entries.options.async_configure(
            result.get("flow_id"),
            user_input={
                CONF_BASE_POINTS: 50,
                CONF_MULTIPLIER: 1.5,
                CONF_MAX_LEVEL: 1000,
            },
        )

    assert result.get("type") == FlowResultType.FORM
    assert result.get("errors") == {CONF_MULTIPLIER: "invalid_multiplier"}
    assert init_integration.options[CONF_MULTIPLIER] == 1.5
