# File: config_flow.py
"""Config flow for the Chore Levels integration.

A single step collects the level curve. The curve is stored in
config_entry.options so the options flow can retune it later.
"""

from typing import Any, Optional

from homeassistant import config_entries
from homeassistant.core import callback

from . import const
from . import flow_helpers as fh
from .options_flow import ChoreLevelsOptionsFlowHandler

# abstract-method: is_matching is not required for config flows in current HA versions
# pylint: disable=abstract-method


class ChoreLevelsConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config Flow for Chore Levels."""

    VERSION = 1

    async def async_step_user(self, user_input: Optional[dict[str, Any]] = None):
        """Collect the level curve settings."""

        # Only one curve per installation
        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        errors: dict[str, str] = {}
        if user_input is not None:
            errors = fh.validate_leveling_inputs(user_input)
            if not errors:
                options = fh.build_leveling_data(user_input)
                const.LOGGER.debug("DEBUG: Creating Chore Levels entry: %s", options)
                return self.async_create_entry(
                    title=const.CHORE_LEVELS_TITLE, data={}, options=options
                )

        return self.async_show_form(
            step_id=const.CONFIG_FLOW_STEP_USER,
            data_schema=fh.build_leveling_schema(user_input),
            errors=errors,
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        """Return the Options Flow."""
        # pylint: disable=unused-argument
        return ChoreLevelsOptionsFlowHandler()
