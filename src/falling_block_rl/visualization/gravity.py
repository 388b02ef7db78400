from __future__ import annotations


class GravityTimer:
    """Turns elapsed wall time into gravity ticks.

    The caller advances it only while the game is playing and resets it on
    start or resume, so no ticks accumulate while paused.
    """

    def __init__(self) -> None:
        self.elapsed_ms = 0

    def reset(self) -> None:
        self.elapsed_ms = 0

    def update(self, dt_ms: int, interval_ms: int) -> int:
        """Advance by ``dt_ms`` and return how many ticks are now due."""
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self.elapsed_ms += max(0, int(dt_ms))
        due = self.elapsed_ms // interval_ms
        self.elapsed_ms -= due * interval_ms
        return int(due)
