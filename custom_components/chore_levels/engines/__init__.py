"""Engine modules for Chore Levels integration.

Contains specialized computation engines:
- leveling_engine: Exponential level curve, progress and level-up detection
"""

# Use relative imports within package to avoid mypy module resolution issues
from .leveling_engine import (
    InvalidPointsError,
    LevelCapExceededError,
    LevelingEngine,
    LevelingError,
)

__all__ = [
    "InvalidPointsError",
    "LevelCapExceededError",
    "LevelingEngine",
    "LevelingError",
]
