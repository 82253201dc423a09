from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ScoringRules:
    points_per_line: int = 100
    lines_per_level: int = 10

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line * level

    def level_for_lines(self, total_lines: int) -> int:
        return 1 + total_lines // self.lines_per_level


@dataclass
class ScoreState:
    """Score, cumulative cleared lines and the level derived from them."""

    rules: ScoringRules = field(default_factory=ScoringRules)
    score: int = 0
    lines_cleared: int = 0
    level: int = 1

    def reset(self) -> None:
        self.score = 0
        self.lines_cleared = 0
        self.level = 1

    def apply_clear(self, rows_cleared: int, previous_level: Optional[int] = None) -> int:
        """Credit a clear of `rows_cleared` rows and return the points gained.

        Points use the level in force before the clear; the level is
        recomputed afterwards.
        """
        if rows_cleared <= 0:
            return 0
        if previous_level is None:
            previous_level = self.level
        gained = self.rules.score_for_lines(rows_cleared, previous_level)
        self.score += gained
        self.lines_cleared += rows_cleared
        self.level = self.rules.level_for_lines(self.lines_cleared)
        return gained


@dataclass
class GravityCurve:
    base_ms: int = 500
    step_ms: int = 50
    min_ms: int = 100

    def interval_ms(self, level: int) -> int:
        return max(self.min_ms, self.base_ms - (max(1, level) - 1) * self.step_ms)
