from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_base: int = 100
    lines_per_level: int = 10
    base_interval_ms: int = 800
    interval_step_ms: int = 80
    min_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * lines * self.line_base * level

    def level_for_lines(self, total_lines: int) -> int:
        return max(0, total_lines) // self.lines_per_level + 1

    def gravity_interval_ms(self, level: int) -> int:
        return max(self.min_interval_ms, self.base_interval_ms - (level - 1) * self.interval_step_ms)
