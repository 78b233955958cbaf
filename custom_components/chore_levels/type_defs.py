"""Type definitions for Chore Levels data structures.

All leveling results are plain dicts so they can be returned from service
calls and fired on the event bus without conversion. TypedDict documents the
fixed keys for static analysis only; nothing here is enforced at runtime.

IMPORTANT: This file must NOT import from the engine or the integration shell
to avoid circular dependencies. Only typing machinery is imported.
"""

from typing import TypedDict

# =============================================================================
# Curve Configuration
# =============================================================================


class LevelCurveConfig(TypedDict):
    """Constants that parameterize a LevelingEngine.

    Created by: LevelingEngine.curve
    Source: config_entry.options (base_points, multiplier, max_level)
    """

    base_points: int  # Points to go from level 1 to level 2
    multiplier: float  # Per-level growth factor
    max_level: int  # Ceiling for the level search


# =============================================================================
# Engine Results
# =============================================================================


class LevelProgress(TypedDict):
    """Where a point total sits inside its current level.

    Created by: LevelingEngine.get_level_progress()
    Consumed by: dashboards (progress bar, level badge, "points to go" caption)
    """

    current_level: int
    total_points: int
    points_in_current_level: int
    points_needed_for_next_level: int
    progress_percentage: int  # 0-100, floored
    points_to_next_level: int


class LevelUpResult(TypedDict):
    """Comparison of the levels implied by two point totals.

    Created by: LevelingEngine.check_level_up()
    Consumed by: task completion handlers (level-up notifications)
    """

    leveled_up: bool
    old_level: int
    new_level: int
    levels_gained: int  # 0 unless leveled_up
    multi_level: bool  # More than one level crossed in a single award
    leveled_down: bool  # New total sits in a lower level (penalty, reset)


class LevelRequirement(TypedDict):
    """Point thresholds for a single level."""

    level: int
    points_to_level_up: int  # Step cost from this level to the next
    cumulative_points: int  # Total points needed to reach this level


class LevelCacheStatus(TypedDict):
    """Result of checking a stored level against the derived level.

    Created by: LevelingEngine.reconcile_cached_level()
    """

    cached_level: int
    computed_level: int
    is_stale: bool
