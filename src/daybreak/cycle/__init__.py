"""Day and time-of-day cycle."""

from daybreak.cycle.clock import TickSchedule, Ticker, advance_time, next_time_of_day

__all__ = [
    "advance_time",
    "next_time_of_day",
    "TickSchedule",
    "Ticker",
]
