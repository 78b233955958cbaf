# File: const.py
"""Constants for the Chore Levels integration.

This file centralizes configuration keys, defaults, service names, field names,
event names and translation keys used across the integration.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
# Integration Name
CHORE_LEVELS_TITLE = "Chore Levels"

# Integration Domain
DOMAIN = "chore_levels"

# Logger
LOGGER = logging.getLogger(__package__)

# hass.data keys
LEVELING_ENGINE = "leveling_engine"

# ------------------------------------------------------------------------------------------------
# Configuration Keys
# ------------------------------------------------------------------------------------------------

# ConfigFlow / OptionsFlow Steps
CONFIG_FLOW_STEP_USER = "user"
OPTIONS_FLOW_STEP_INIT = "init"

# Curve settings (stored in config_entry.options)
CONF_BASE_POINTS = "base_points"
CONF_MULTIPLIER = "multiplier"
CONF_MAX_LEVEL = "max_level"

# ------------------------------------------------------------------------------------------------
# Defaults
# ------------------------------------------------------------------------------------------------

# Points required to go from level 1 to level 2
DEFAULT_BASE_POINTS = 50

# Growth factor applied per level
DEFAULT_MULTIPLIER = 1.5

# Ceiling for the level search (catches curves that never grow)
DEFAULT_MAX_LEVEL = 1000

# Default number of rows returned by the level table service
DEFAULT_LEVEL_TABLE_SIZE = 10

# Flow bounds (the multiplier must be strictly above MIN_MULTIPLIER)
MIN_BASE_POINTS = 1
MIN_MULTIPLIER = 1.0
MAX_MULTIPLIER = 10.0
MIN_MAX_LEVEL = 100
MAX_MAX_LEVEL = 10000

# ------------------------------------------------------------------------------------------------
# Data Keys
# ------------------------------------------------------------------------------------------------

DATA_LEVEL = "level"
DATA_LEVELS = "levels"
DATA_TOTAL_POINTS = "total_points"

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------

SERVICE_GET_LEVEL_PROGRESS = "get_level_progress"
SERVICE_CHECK_LEVEL_UP = "check_level_up"
SERVICE_GET_LEVEL_TABLE = "get_level_table"
SERVICE_RECONCILE_LEVEL = "reconcile_level"

# Service Fields
FIELD_TOTAL_POINTS = "total_points"
FIELD_POINTS_BEFORE = "points_before"
FIELD_POINTS_AFTER = "points_after"
FIELD_KID_NAME = "kid_name"
FIELD_MAX_LEVEL = "max_level"
FIELD_CACHED_LEVEL = "cached_level"

# ------------------------------------------------------------------------------------------------
# Events
# ------------------------------------------------------------------------------------------------

EVENT_LEVEL_UP = f"{DOMAIN}_level_up"

# ------------------------------------------------------------------------------------------------
# Translation Keys
# ------------------------------------------------------------------------------------------------

# Flow errors / aborts
TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"
TRANS_KEY_ERROR_INVALID_BASE_POINTS = "invalid_base_points"
TRANS_KEY_ERROR_INVALID_MULTIPLIER = "invalid_multiplier"
TRANS_KEY_ERROR_INVALID_MAX_LEVEL = "invalid_max_level"

# Service exceptions
TRANS_KEY_ERROR_NO_ENTRY_FOUND = "no_entry_found"
TRANS_KEY_ERROR_INVALID_POINTS = "invalid_points"
TRANS_KEY_ERROR_LEVEL_CAP_EXCEEDED = "level_cap_exceeded"
