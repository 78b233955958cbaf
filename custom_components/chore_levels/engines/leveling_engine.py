"""Leveling Engine - Pure logic for converting point totals into levels.

This engine provides stateless, pure Python functions for:
- Step cost per level (exponential curve, floored to whole points)
- Cumulative points required to reach a level
- Level lookup from a lifetime point total
- Progress reporting inside the current level
- Level-up detection between two point totals (single and multi-level jumps)
- Level tables and stale level-cache detection

Curve:
    step_cost(L)  = floor(base_points * multiplier ** (L - 1))
    cumulative(L) = step_cost(1) + ... + step_cost(L - 1), cumulative(1) = 0

    With the defaults (50, 1.5) the step costs run 50, 75, 112, 168, 253, ...
    so levels 2-5 are reached at 50, 125, 237 and 405 points.

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
The curve constants are injected at construction and never change afterwards,
so one instance can be shared by the award path and the display path.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .. import const
from ..utils.math_utils import floor_percentage, is_whole_number, to_whole_number

if TYPE_CHECKING:
    from ..type_defs import (
        LevelCacheStatus,
        LevelCurveConfig,
        LevelProgress,
        LevelRequirement,
        LevelUpResult,
    )


class LevelingError(Exception):
    """Base class for leveling engine errors."""


class InvalidPointsError(LevelingError, ValueError):
    """Raised when a point total or level is not a usable whole number.

    Attributes:
        field: Name of the offending argument
        value: The rejected value
    """

    def __init__(self, field: str, value: object, reason: str | None = None) -> None:
        """Initialize InvalidPointsError.

        Args:
            field: Name of the offending argument
            value: The rejected value
            reason: Optional explanation (defaults to "must be a whole number")
        """
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field}: {value!r} ({reason or 'must be a whole number'})"
        )


class LevelCapExceededError(LevelingError):
    """Raised when a level search or table passes the configured ceiling.

    This signals a misconfigured curve (a multiplier below 1 or a zero base
    never lets step costs outgrow the total) or an absurd point total.

    Attributes:
        max_level: The configured ceiling
    """

    def __init__(self, max_level: int) -> None:
        """Initialize LevelCapExceededError.

        Args:
            max_level: The configured ceiling that was passed
        """
        self.max_level = max_level
        super().__init__(f"Level calculation exceeded max_level={max_level}")


class LevelingEngine:
    """Pure logic engine for the exponential leveling curve.

    Instances hold only the immutable curve constants. Every method is a
    deterministic function of its arguments and the constants, safe to call
    from any number of callers concurrently.

    Evaluation Flow:
        1. Task completion handler awards points and calls check_level_up()
        2. Dashboard calls get_level_progress() for progress bars and badges
        3. Both reach the same instance, so the curve cannot drift between them
    """

    def __init__(
        self,
        base_points: int = const.DEFAULT_BASE_POINTS,
        multiplier: float = const.DEFAULT_MULTIPLIER,
        max_level: int = const.DEFAULT_MAX_LEVEL,
    ) -> None:
        """Initialize the engine with its curve constants.

        Args:
            base_points: Points to go from level 1 to level 2 (>= 0)
            multiplier: Per-level growth factor (finite, > 0)
            max_level: Ceiling for level searches and tables (>= 1)

        Raises:
            InvalidPointsError: If a constant is malformed
        """
        if not is_whole_number(base_points) or base_points < 0:
            raise InvalidPointsError(
                const.CONF_BASE_POINTS, base_points, "must be a whole number >= 0"
            )
        if (
            isinstance(multiplier, bool)
            or not isinstance(multiplier, (int, float))
            or not math.isfinite(multiplier)
            or multiplier <= 0
        ):
            raise InvalidPointsError(
                const.CONF_MULTIPLIER, multiplier, "must be a finite number > 0"
            )
        if not is_whole_number(max_level) or max_level < 1:
            raise InvalidPointsError(
                const.CONF_MAX_LEVEL, max_level, "must be a whole number >= 1"
            )

        self._base_points = to_whole_number(base_points)
        self._multiplier = float(multiplier)
        self._max_level = to_whole_number(max_level)

    def __repr__(self) -> str:
        """Return a debug representation showing the curve."""
        return (
            f"{self.__class__.__name__}(base_points={self._base_points}, "
            f"multiplier={self._multiplier}, max_level={self._max_level})"
        )

    @property
    def curve(self) -> LevelCurveConfig:
        """Return the curve constants this engine was built with."""
        return {
            "base_points": self._base_points,
            "multiplier": self._multiplier,
            "max_level": self._max_level,
        }

    # =========================================================================
    # THRESHOLDS
    # =========================================================================

    def points_required_for_level_up(self, level: int) -> int:
        """Calculate points needed to level up FROM a specific level.

        Args:
            level: The current level (1-based)

        Returns:
            floor(base_points * multiplier ** (level - 1))

        Raises:
            InvalidPointsError: If level is not a whole number
            LevelCapExceededError: If the cost no longer fits in a float
        """
        level = self._validate(const.DATA_LEVEL, level)
        return self._step_cost(level)

    def points_required_for_level(self, level: int) -> int:
        """Calculate the total points required to reach a specific level.

        Sums the already-floored step costs so the result always agrees with
        calculate_level_from_points().

        Args:
            level: The target level (1-based); anything <= 1 needs 0 points

        Returns:
            Cumulative points required to have at least this level

        Raises:
            LevelCapExceededError: If level is beyond max_level + 1
        """
        level = self._validate(const.DATA_LEVEL, level)
        if level <= 1:
            return 0
        if level > self._max_level + 1:
            raise LevelCapExceededError(self._max_level)
        return sum(self._step_cost(step) for step in range(1, level))

    # =========================================================================
    # LEVEL LOOKUP
    # =========================================================================

    def calculate_level_from_points(self, total_points: int) -> int:
        """Calculate the current level based on total points.

        Negative totals floor to level 1 instead of raising.

        Args:
            total_points: Lifetime points accumulated

        Returns:
            Current level (1-based, minimum 1)

        Raises:
            InvalidPointsError: If total_points is not a whole number
            LevelCapExceededError: If the search passes max_level
        """
        total_points = self._validate(const.DATA_TOTAL_POINTS, total_points)
        return self._level_for(total_points)

    def get_level_progress(self, total_points: int) -> LevelProgress:
        """Get progress information for the current level.

        Args:
            total_points: Lifetime points accumulated

        Returns:
            LevelProgress with level, in-level points, percentage and remainder.
            A negative total reports level 1 with zero progress.
        """
        total_points = self._validate(const.DATA_TOTAL_POINTS, total_points)
        current_level = self._level_for(total_points)

        floor_current = self.points_required_for_level(current_level)
        floor_next = floor_current + self._step_cost(current_level)

        points_needed = floor_next - floor_current
        points_in_level = max(0, total_points - floor_current)

        return {
            "current_level": current_level,
            "total_points": total_points,
            "points_in_current_level": points_in_level,
            "points_needed_for_next_level": points_needed,
            "progress_percentage": floor_percentage(points_in_level, points_needed),
            "points_to_next_level": max(0, points_needed - points_in_level),
        }

    def check_level_up(self, old_points: int, new_points: int) -> LevelUpResult:
        """Check if a change in points results in a level up.

        Args:
            old_points: Points before the award
            new_points: Points after the award

        Returns:
            LevelUpResult. levels_gained may exceed 1 when a single award
            crosses several thresholds; multi_level flags that case.
        """
        old_points = self._validate(const.FIELD_POINTS_BEFORE, old_points)
        new_points = self._validate(const.FIELD_POINTS_AFTER, new_points)

        old_level = self._level_for(old_points)
        new_level = self._level_for(new_points)
        levels_gained = max(0, new_level - old_level)

        return {
            "leveled_up": levels_gained > 0,
            "old_level": old_level,
            "new_level": new_level,
            "levels_gained": levels_gained,
            "multi_level": levels_gained > 1,
            "leveled_down": new_level < old_level,
        }

    # =========================================================================
    # TABLES AND CACHES
    # =========================================================================

    def get_level_requirement(self, level: int) -> LevelRequirement:
        """Return the step and cumulative thresholds for one level."""
        level = self._validate(const.DATA_LEVEL, level)
        if level < 1:
            raise InvalidPointsError(const.DATA_LEVEL, level, "must be >= 1")
        return {
            "level": level,
            "points_to_level_up": self._step_cost(level),
            "cumulative_points": self.points_required_for_level(level),
        }

    def build_level_table(self, max_level: int) -> list[LevelRequirement]:
        """Build the thresholds for levels 1..max_level.

        Cumulative totals are accumulated in a single pass.

        Raises:
            InvalidPointsError: If max_level is not a whole number >= 1
            LevelCapExceededError: If max_level is above the engine ceiling
        """
        max_level = self._validate(const.FIELD_MAX_LEVEL, max_level)
        if max_level < 1:
            raise InvalidPointsError(const.FIELD_MAX_LEVEL, max_level, "must be >= 1")
        if max_level > self._max_level:
            raise LevelCapExceededError(self._max_level)

        table: list[LevelRequirement] = []
        cumulative = 0
        for level in range(1, max_level + 1):
            step_cost = self._step_cost(level)
            table.append(
                {
                    "level": level,
                    "points_to_level_up": step_cost,
                    "cumulative_points": cumulative,
                }
            )
            cumulative += step_cost
        return table

    def reconcile_cached_level(
        self, cached_level: int, total_points: int
    ) -> LevelCacheStatus:
        """Compare a stored level against the level derived from points.

        Args:
            cached_level: Level persisted alongside the point total
            total_points: The persisted point total

        Returns:
            LevelCacheStatus; is_stale is True when the two disagree
        """
        cached_level = self._validate(const.FIELD_CACHED_LEVEL, cached_level)
        computed_level = self.calculate_level_from_points(total_points)
        return {
            "cached_level": cached_level,
            "computed_level": computed_level,
            "is_stale": cached_level != computed_level,
        }

    # =========================================================================
    # INTERNALS
    # =========================================================================

    @staticmethod
    def _validate(field: str, value: object) -> int:
        """Return value as int or raise InvalidPointsError."""
        if not is_whole_number(value):
            raise InvalidPointsError(field, value)
        return to_whole_number(value)  # type: ignore[arg-type]

    def _step_cost(self, level: int) -> int:
        """Floored step cost for an already-validated level."""
        try:
            return math.floor(self._base_points * self._multiplier ** (level - 1))
        except OverflowError as err:
            raise LevelCapExceededError(self._max_level) from err

    def _level_for(self, total_points: int) -> int:
        """Walk the curve until the next step no longer fits in total_points."""
        if total_points < 0:
            return 1

        level = 1
        points_used = 0
        while level <= self._max_level:
            points_needed = self._step_cost(level)
            if points_used + points_needed > total_points:
                return level
            points_used += points_needed
            level += 1

        raise LevelCapExceededError(self._max_level)
