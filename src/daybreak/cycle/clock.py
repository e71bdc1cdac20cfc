"""Time-of-day progression and the tick schedule that drives it."""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging

from daybreak import config
from daybreak.domain.enums import TimeOfDay
from daybreak.session.state import GameState

logger = logging.getLogger(__name__)

_ORDER = list(TimeOfDay)


def next_time_of_day(time_of_day: TimeOfDay) -> TimeOfDay:
    index = _ORDER.index(TimeOfDay(time_of_day))
    return _ORDER[(index + 1) % len(_ORDER)]


def advance_time(state: GameState) -> GameState:
    """Step to the next part of the day; night rolls over into a fresh day."""
    upcoming = next_time_of_day(state.time_of_day)
    if upcoming == _ORDER[0]:
        logger.debug("Day %d ends, %d actions cleared", state.day, len(state.completed_actions))
        return replace(
            state,
            time_of_day=upcoming,
            day=state.day + 1,
            completed_actions=frozenset(),
        )
    return replace(state, time_of_day=upcoming)


@dataclass(frozen=True)
class TickSchedule:
    speed: int = config.DEFAULT_SPEED
    base_seconds: float = config.TICK_SECONDS

    def __post_init__(self) -> None:
        if self.speed not in config.SPEED_MULTIPLIERS:
            raise ValueError(
                f"Speed must be one of {config.SPEED_MULTIPLIERS}, got {self.speed}"
            )
        if self.base_seconds <= 0:
            raise ValueError("base_seconds must be positive")

    @property
    def interval(self) -> float:
        return self.base_seconds / self.speed

    def with_speed(self, speed: int) -> "TickSchedule":
        return replace(self, speed=speed)

    def next_speed(self) -> "TickSchedule":
        speeds = list(config.SPEED_MULTIPLIERS)
        index = speeds.index(self.speed)
        return self.with_speed(speeds[(index + 1) % len(speeds)])


@dataclass
class Ticker:
    schedule: TickSchedule
    elapsed: float = 0.0

    def due(self, seconds: float) -> int:
        """Add wall time and return how many time steps are now owed."""
        if seconds <= 0:
            return 0
        self.elapsed += seconds
        steps = int(self.elapsed // self.schedule.interval)
        self.elapsed -= steps * self.schedule.interval
        return steps

    def clear(self) -> None:
        self.elapsed = 0.0
