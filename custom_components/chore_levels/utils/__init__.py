# File: utils/__init__.py
"""Pure Python utilities for Chore Levels.

This module contains pure Python functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

⚠️ UTILS PURITY: NO `homeassistant.*` imports allowed in this module.

Submodules:
    - math_utils: Whole-number validation, percentage and clamping helpers

Usage:
    from . import math_utils
    from .math_utils import floor_percentage
"""

from . import math_utils

__all__ = ["math_utils"]
