# File: flow_helpers.py
"""Helpers for the Chore Levels config flow and options flow.

Shared by both flows so the curve form is built and validated in one place.
"""

import math
from typing import Any

import voluptuous as vol
from homeassistant.helpers import selector

from . import const
from .utils.math_utils import is_whole_number


# ----------------------------------------------------------------------------------
# LEVEL CURVE SCHEMA (Pattern 1: Simple - Separate validate/build)
# ----------------------------------------------------------------------------------


def build_leveling_schema(default: dict[str, Any] | None = None) -> vol.Schema:
    """Build a schema for the level curve settings."""
    default = default or {}

    return vol.Schema(
        {
            vol.Required(
                const.CONF_BASE_POINTS,
                default=default.get(const.CONF_BASE_POINTS, const.DEFAULT_BASE_POINTS),
            ): selector.NumberSelector(
                selector.NumberSelectorConfig(
                    mode=selector.NumberSelectorMode.BOX,
                    min=const.MIN_BASE_POINTS,
                    step=1,
                )
            ),
            vol.Required(
                const.CONF_MULTIPLIER,
                default=default.get(const.CONF_MULTIPLIER, const.DEFAULT_MULTIPLIER),
            ): selector.NumberSelector(
                selector.NumberSelectorConfig(
                    mode=selector.NumberSelectorMode.BOX,
                    min=const.MIN_MULTIPLIER,
                    max=const.MAX_MULTIPLIER,
                    step=0.05,
                )
            ),
            vol.Required(
                const.CONF_MAX_LEVEL,
                default=default.get(const.CONF_MAX_LEVEL, const.DEFAULT_MAX_LEVEL),
            ): selector.NumberSelector(
                selector.NumberSelectorConfig(
                    mode=selector.NumberSelectorMode.BOX,
                    min=const.MIN_MAX_LEVEL,
                    max=const.MAX_MAX_LEVEL,
                    step=1,
                )
            ),
        }
    )


def validate_leveling_inputs(user_input: dict[str, Any]) -> dict[str, str]:
    """Validate level curve inputs.

    Args:
        user_input: Dictionary containing user inputs from the form.

    Returns:
        Dictionary of errors keyed by field (empty if validation passes).
    """
    errors: dict[str, str] = {}

    base_points = user_input.get(const.CONF_BASE_POINTS)
    if not is_whole_number(base_points) or base_points < const.MIN_BASE_POINTS:
        errors[const.CONF_BASE_POINTS] = const.TRANS_KEY_ERROR_INVALID_BASE_POINTS

    multiplier = user_input.get(const.CONF_MULTIPLIER)
    if (
        not _is_number(multiplier)
        or not const.MIN_MULTIPLIER < float(multiplier) <= const.MAX_MULTIPLIER
    ):
        errors[const.CONF_MULTIPLIER] = const.TRANS_KEY_ERROR_INVALID_MULTIPLIER

    max_level = user_input.get(const.CONF_MAX_LEVEL)
    if (
        not is_whole_number(max_level)
        or not const.MIN_MAX_LEVEL <= int(max_level) <= const.MAX_MAX_LEVEL
    ):
        errors[const.CONF_MAX_LEVEL] = const.TRANS_KEY_ERROR_INVALID_MAX_LEVEL

    return errors


def build_leveling_data(user_input: dict[str, Any]) -> dict[str, Any]:
    """Build level curve options from validated user input.

    NumberSelector hands back floats; whole-number fields are stored as int.
    """
    return {
        const.CONF_BASE_POINTS: int(
            user_input.get(const.CONF_BASE_POINTS, const.DEFAULT_BASE_POINTS)
        ),
        const.CONF_MULTIPLIER: float(
            user_input.get(const.CONF_MULTIPLIER, const.DEFAULT_MULTIPLIER)
        ),
        const.CONF_MAX_LEVEL: int(
            user_input.get(const.CONF_MAX_LEVEL, const.DEFAULT_MAX_LEVEL)
        ),
    }


# ----------------------------------------------------------------------------------
# HELPERS
# ----------------------------------------------------------------------------------


def _is_number(value: Any) -> bool:
    """Return True for finite ints and floats (never bools)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
