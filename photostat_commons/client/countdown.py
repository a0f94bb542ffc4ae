"""
Develop countdown

Two flavors share one clamp-at-zero rule: a countdown to a fixed wall-clock
target (computed once) and a fixed-duration countdown. Both tick down by
exactly one second per tick and hold at zero.
"""
import math
import time
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple
from ..constants import TimingConstants


def seconds_until(target: datetime, now: Optional[datetime] = None) -> int:
    """
    Whole seconds from ``now`` until ``target``, never negative.

    Naive datetimes on either side are taken as UTC.
    """
    if target.tzinfo is None:
        target = target.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    remaining = (target - now).total_seconds()
    return max(0, math.floor(remaining))


def split_seconds(total_seconds: int) -> Tuple[int, int, int]:
    """(hours, minutes, seconds) for a non-negative second count."""
    total_seconds = max(0, int(total_seconds))
    return total_seconds // 3600, (total_seconds % 3600) // 60, total_seconds % 60


def format_countdown(total_seconds: int) -> str:
    """Zero-padded hh:mm:ss"""
    hours, minutes, seconds = split_seconds(total_seconds)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class Countdown:

    def __init__(self, initial_seconds: int):
        self.remaining = max(0, int(initial_seconds))

    @classmethod
    def until(cls, target: datetime, now: Optional[datetime] = None) -> 'Countdown':
        return cls(seconds_until(target, now))

    @property
    def finished(self) -> bool:
        return self.remaining == 0

    @property
    def hours(self) -> int:
        return split_seconds(self.remaining)[0]

    @property
    def minutes(self) -> int:
        return split_seconds(self.remaining)[1]

    @property
    def seconds(self) -> int:
        return split_seconds(self.remaining)[2]

    def tick(self) -> int:
        self.remaining = max(0, self.remaining - 1)
        return self.remaining

    def format(self) -> str:
        return format_countdown(self.remaining)

    def run(
        self,
        on_tick: Callable[['Countdown'], None],
        sleep: Callable[[float], None] = time.sleep,
        max_ticks: Optional[int] = None,
        stop_at_zero: bool = False
    ) -> int:
        """
        Tick once per second, calling ``on_tick`` after each tick

        The timer keeps firing once it reaches zero unless ``stop_at_zero`` is
        set; ``max_ticks`` bounds the loop otherwise it runs until interrupted.

        Returns:
            Number of ticks performed
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if stop_at_zero and self.finished:
                break
            sleep(TimingConstants.TICK_INTERVAL)
            self.tick()
            ticks += 1
            on_tick(self)
        return ticks
