"""
Countdown Timer

Tick-driven game clock that ends a game when it runs out.
"""

import math
from typing import Callable, Optional, Tuple

from ..config.game_settings import TIMER_START_SECONDS


def format_time(remaining: float) -> str:
    """Formats seconds as zero-padded MM:SS."""
    minutes, seconds = split_time(remaining)
    return f"{minutes:02d}:{seconds:02d}"


def split_time(remaining: float) -> Tuple[int, int]:
    """Whole minutes and whole seconds of a remaining duration."""
    return math.floor(remaining / 60), math.floor(remaining % 60)


class CountdownTimer:
    """
    Countdown clock with a single expiry callback.

    The timer does not run on its own: its owner calls tick() with the
    elapsed time. Whenever the remaining time reaches zero while the
    timer is running, or a deduction drives it to zero, the timer clamps
    to zero, stops, and fires the expiry callback once.
    """

    def __init__(self,
                 start_time: float = TIMER_START_SECONDS,
                 on_expired: Optional[Callable[[], None]] = None,
                 on_display: Optional[Callable[[int, int], None]] = None):
        self.start_time = start_time
        self.remaining = start_time
        self.running = False
        self._on_expired = on_expired
        self._on_display = on_display
        self._last_display: Optional[Tuple[int, int]] = None

    def set_expiry_callback(self, callback: Optional[Callable[[], None]]) -> None:
        self._on_expired = callback

    def set_display_callback(self, callback: Optional[Callable[[int, int], None]]) -> None:
        self._on_display = callback

    def start(self, duration: Optional[float] = None) -> None:
        """Start or restart the countdown from the full duration."""
        self.remaining = self.start_time if duration is None else duration
        self.running = True
        self._update_display(force=True)

    def stop(self) -> None:
        self.running = False

    def deduct(self, seconds: float) -> None:
        """Subtract time whether or not the timer is running."""
        crossing = self.running or self.remaining > 0
        self.remaining -= seconds
        if self.remaining <= 0:
            if crossing:
                self._expire()
            else:
                self.remaining = 0.0
        self._update_display(force=True)

    def tick(self, delta_seconds: float) -> None:
        if not self.running:
            return

        self.remaining -= delta_seconds
        if self.remaining <= 0:
            self._expire()
        self._update_display()

    def display(self) -> Tuple[int, int]:
        return split_time(self.remaining)

    def display_text(self) -> str:
        return format_time(self.remaining)

    def _expire(self) -> None:
        self.remaining = 0.0
        self.running = False
        if self._on_expired is not None:
            self._on_expired()

    def _update_display(self, force: bool = False) -> None:
        current = self.display()
        if not force and current == self._last_display:
            return
        self._last_display = current
        if self._on_display is not None:
            self._on_display(*current)
