"""
RSVP presentation ticker.

Models the fixed-interval reveal of a round's items: one periodic tick
advances one item, holding pauses without losing position, and the round
completes once the last item has been shown for a full interval.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


MIN_TICK_MS = 100
TICK_TOLERANCE = 0.9  # Timer reruns may fire slightly early


@dataclass
class RsvpTicker:
    """
    Position and pause state of one presentation.

    The owner drives poll() from a single periodic timer and must stop that
    timer while `running` is False.
    """
    item_count: int
    speed_ms: int
    position: int = 0
    paused: bool = False
    done: bool = False
    last_tick_at: Optional[float] = None  # Monotonic seconds; None until the interval starts

    def __post_init__(self):
        if self.item_count <= 0:
            self.done = True

    @property
    def interval_ms(self) -> int:
        return max(MIN_TICK_MS, self.speed_ms)

    @property
    def running(self) -> bool:
        """True while a timer should be active."""
        return not self.paused and not self.done

    @property
    def visible_index(self) -> int:
        """Index of the item currently on screen."""
        return min(self.position, max(0, self.item_count - 1))

    def tick(self) -> bool:
        """
        Advance by one item.

        Returns:
            True when this tick completed the presentation
        """
        if not self.running:
            return False
        self.position += 1
        if self.position >= self.item_count:
            self.done = True
            return True
        return False

    def poll(self, now: float) -> bool:
        """
        Tick once a full interval has elapsed since the last tick.

        The first poll after start, restart or release only starts the
        interval, so the current item is always shown for a whole interval.

        Args:
            now: Monotonic time in seconds

        Returns:
            True when this poll completed the presentation
        """
        if not self.running:
            return False
        if self.last_tick_at is None:
            self.last_tick_at = now
            return False
        if (now - self.last_tick_at) * 1000 < self.interval_ms * TICK_TOLERANCE:
            return False
        self.last_tick_at = now
        return self.tick()

    def hold(self) -> None:
        self.paused = True

    def release(self) -> None:
        self.paused = False
        self.last_tick_at = None

    def restart(self, item_count: Optional[int] = None) -> None:
        """Reset for a new round (or a replay of the same one)."""
        if item_count is not None:
            self.item_count = item_count
        self.position = 0
        self.paused = False
        self.last_tick_at = None
        self.done = self.item_count <= 0

    def progress_label(self) -> str:
        if self.item_count <= 0:
            return "Showing 0 / 0"
        return f"Showing {min(self.position + 1, self.item_count)} / {self.item_count}"
