# File: options_flow.py
"""Options flow for the Chore Levels integration.

Retunes the level curve without code edits. Saving new options triggers the
update listener registered in __init__.py, which reloads the entry so every
caller picks up the same new engine.
"""

from typing import Any, Optional

from homeassistant import config_entries

from . import const
from . import flow_helpers as fh


class ChoreLevelsOptionsFlowHandler(config_entries.OptionsFlow):
    """Options Flow for editing the level curve."""

    async def async_step_init(self, user_input: Optional[dict[str, Any]] = None):
        """Show the level curve form prefilled with the current options."""
        errors: dict[str, str] = {}

        if user_input is not None:
            errors = fh.validate_leveling_inputs(user_input)
            if not errors:
                new_options = {
                    **self.config_entry.options,
                    **fh.build_leveling_data(user_input),
                }
                const.LOGGER.info(
                    "INFO: Level curve updated for entry %s: %s",
                    self.config_entry.entry_id,
                    new_options,
                )
                return self.async_create_entry(title="", data=new_options)

        return self.async_show_form(
            step_id=const.OPTIONS_FLOW_STEP_INIT,
            data_schema=fh.build_leveling_schema(
                user_input or dict(self.config_entry.options)
            ),
            errors=errors,
        )
