"""Simulated time of day for the broadcast schedule."""

from abc import ABC, abstractmethod
from datetime import datetime

from airwaves.radio.models import HOURS_PER_DAY, Weekday

SECONDS_PER_HOUR = 3600.0


class ClockSource(ABC):
  """External wall-clock, consulted once to synchronize the simulation."""

  @abstractmethod
  def now(self) -> datetime:
    """Current local date and time."""


class SystemClockSource(ClockSource):
  """Reads the host's local time."""

  def now(self) -> datetime:
    return datetime.now()


class FixedClockSource(ClockSource):
  """Always reports the same instant. Useful for tests and replays."""

  def __init__(self, instant: datetime) -> None:
    self.instant = instant

  def now(self) -> datetime:
    return self.instant


class Clock:
  """Time-of-day / weekday pair advanced by simulation ticks.

  Simulated time runs at the same rate as elapsed tick time, so once
  synchronized from a ClockSource it tracks real time 1:1.
  """

  def __init__(
    self, time_of_day: float = 0.0, weekday: Weekday = Weekday.MONDAY
  ) -> None:
    if not 0.0 <= time_of_day < HOURS_PER_DAY:
      msg = f"time_of_day must be in [0, 24), got {time_of_day}"
      raise ValueError(msg)
    self.time_of_day = time_of_day
    self.weekday = Weekday(weekday)

  @classmethod
  def from_source(cls, source: ClockSource) -> "Clock":
    now = source.now()
    hours = now.hour + now.minute / 60.0 + now.second / SECONDS_PER_HOUR
    return cls(time_of_day=hours, weekday=Weekday(now.weekday()))

  def advance(self, elapsed_seconds: float) -> None:
    """Move time forward, rolling the weekday over at midnight.

    Args:
      elapsed_seconds: Non-negative simulated seconds since the last call.
    """
    if elapsed_seconds < 0:
      msg = f"elapsed_seconds must be >= 0, got {elapsed_seconds}"
      raise ValueError(msg)

    self.time_of_day += elapsed_seconds / SECONDS_PER_HOUR
    while self.time_of_day >= HOURS_PER_DAY:
      self.time_of_day -= HOURS_PER_DAY
      self.weekday = self.weekday.next()

  def __repr__(self) -> str:
    hours = int(self.time_of_day)
    minutes = int((self.time_of_day - hours) * 60)
    return f"Clock({self.weekday.name.title()} {hours:02d}:{minutes:02d})"
