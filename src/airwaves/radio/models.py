"""Broadcast data model: stations, weekly schedules and program slots.

Everything here is immutable after load. A `StationRegistry` owns the roster
and validates it once; the engine only ever reads from it.
"""

import logging
from collections.abc import Iterator, Sequence
from enum import IntEnum, StrEnum
from itertools import pairwise

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

ContentHandle = str
"""Opaque identifier of a playable clip, resolved by the audio output."""

HOURS_PER_DAY = 24.0


class ConfigurationError(ValueError):
  """Raised when static radio configuration is malformed."""


class Weekday(IntEnum):
  """Day of week, numbered like `datetime.weekday()`."""

  MONDAY = 0
  TUESDAY = 1
  WEDNESDAY = 2
  THURSDAY = 3
  FRIDAY = 4
  SATURDAY = 5
  SUNDAY = 6

  def next(self) -> "Weekday":
    """The following day, wrapping Sunday to Monday."""
    return Weekday((self.value + 1) % 7)

  @classmethod
  def parse(cls, value: "int | str | Weekday") -> "Weekday":
    """Accept a member, its number, or a (possibly abbreviated) day name."""
    if isinstance(value, Weekday):
      return value
    if isinstance(value, int):
      return cls(value)
    if not isinstance(value, str):
      msg = f"Weekday must be a name or number, got {value!r}"
      raise ValueError(msg)
    text = value.strip().lower()
    if text.isdigit():
      return cls(int(text))
    for day in cls:
      if len(text) >= 3 and day.name.lower().startswith(text):
        return day
    msg = f"Unknown weekday: {value!r}"
    raise ValueError(msg)


class ProgramType(StrEnum):
  """Kind of programming a slot carries."""

  MUSIC = "music"
  NEWS = "news"
  TALK_SHOW = "talk_show"
  RELIGIOUS = "religious"
  SPORTS = "sports"
  TRAFFIC = "traffic"
  WEATHER = "weather"


class Language(StrEnum):
  """Broadcast language."""

  ENGLISH = "english"
  SWAHILI = "swahili"
  SHENG = "sheng"
  MIXED = "mixed"


class ContentCategory(StrEnum):
  """Station-owned content pools."""

  MUSIC = "music"
  JINGLES = "jingles"
  NEWS = "news"
  ADS = "ads"
  PRESENTERS = "presenters"


class ProgramSlot(BaseModel):
  """A scheduled program on one weekday.

  Attributes:
    name: Program name as announced on air.
    start_hour: Start time in fractional hours, 0 <= start < 24.
    duration: Length in hours. Must be positive; checked by StationRegistry.
    type: Program type, drives content selection on track completion.
    language: Broadcast language of the program.
    specific_content: Clips started when the program begins (may be empty).
  """

  name: str
  start_hour: float = Field(ge=0.0, lt=HOURS_PER_DAY)
  duration: float
  type: ProgramType = ProgramType.MUSIC
  language: Language = Language.ENGLISH
  specific_content: tuple[ContentHandle, ...] = ()

  model_config = {"frozen": True}

  @property
  def end_hour(self) -> float:
    return self.start_hour + self.duration

  def covers(self, hour: float) -> bool:
    """Whether `hour` falls in [start, start + duration)."""
    return self.start_hour <= hour < self.end_hour


class DaySchedule(BaseModel):
  """Ordered program slots for a single weekday."""

  day: Weekday
  slots: tuple[ProgramSlot, ...] = ()

  model_config = {"frozen": True}

  @field_validator("day", mode="before")
  @classmethod
  def _parse_day(cls, value: int | str) -> Weekday:
    return Weekday.parse(value)


class Schedule(BaseModel):
  """Weekly schedule: at most one effective entry per weekday.

  If the same weekday is listed twice, the first entry wins.
  """

  days: tuple[DaySchedule, ...] = ()

  model_config = {"frozen": True}

  def for_day(self, day: Weekday) -> DaySchedule | None:
    return next((entry for entry in self.days if entry.day == day), None)

  def all_slots(self) -> Iterator[ProgramSlot]:
    for entry in self.days:
      yield from entry.slots


class Station(BaseModel):
  """A broadcaster on the dial.

  Attributes:
    name: Station name.
    frequency: Dial frequency (MHz on an FM dial).
    pools: Station-owned content pools keyed by category.
    languages: Languages the station broadcasts in.
    schedule: Weekly program schedule.
    presenter_names: On-air presenters, informational only.
    is_24_hours: Whether the station broadcasts around the clock.
  """

  name: str
  frequency: float = Field(gt=0.0)
  pools: dict[ContentCategory, tuple[ContentHandle, ...]] = Field(
    default_factory=dict
  )
  languages: tuple[Language, ...] = ()
  schedule: Schedule = Field(default_factory=Schedule)
  presenter_names: tuple[str, ...] = ()
  is_24_hours: bool = True

  model_config = {"frozen": True}

  def pool(self, category: ContentCategory) -> tuple[ContentHandle, ...]:
    """Content pool for `category`; empty when the station has none."""
    return self.pools.get(category, ())

  @property
  def music(self) -> tuple[ContentHandle, ...]:
    return self.pool(ContentCategory.MUSIC)


class StationRegistry:
  """Static, ordered catalog of stations.

  Registry order is significant: it breaks ties when two stations are equally
  close to a requested frequency.
  """

  def __init__(self, stations: Sequence[Station]) -> None:
    """Validate and store the roster.

    Args:
      stations: Stations in dial-scan order.

    Raises:
      ConfigurationError: If the roster is empty or a slot has a non-positive
        duration.
    """
    if not stations:
      msg = "Station registry requires at least one station"
      raise ConfigurationError(msg)

    for station in stations:
      for slot in station.schedule.all_slots():
        if slot.duration <= 0:
          msg = (
            f"{station.name}: program {slot.name!r} has non-positive "
            f"duration {slot.duration}"
          )
          raise ConfigurationError(msg)
      _warn_overlaps(station)

    self._stations = tuple(stations)

  def __iter__(self) -> Iterator[Station]:
    return iter(self._stations)

  def __len__(self) -> int:
    return len(self._stations)

  @property
  def stations(self) -> tuple[Station, ...]:
    return self._stations

  def by_name(self, name: str) -> Station:
    for station in self._stations:
      if station.name == name:
        return station
    raise KeyError(name)

  def nearest(self, frequency: float) -> tuple[Station, float]:
    """Station closest to `frequency` and its absolute offset.

    Ties resolve to the earliest station in registry order.
    """
    closest = self._stations[0]
    min_diff = abs(closest.frequency - frequency)
    for station in self._stations[1:]:
      diff = abs(station.frequency - frequency)
      if diff < min_diff:
        min_diff = diff
        closest = station
    return closest, min_diff


def _warn_overlaps(station: Station) -> None:
  # Overlaps are legal; the earlier slot in list order shadows the later one.
  for entry in station.schedule.days:
    ordered = sorted(entry.slots, key=lambda s: s.start_hour)
    for first, second in pairwise(ordered):
      if second.start_hour < first.end_hour:
        logger.warning(
          f"{station.name} {entry.day.name.title()}: {first.name!r} "
          f"({first.start_hour}-{first.end_hour}h) overlaps {second.name!r} "
          f"({second.start_hour}-{second.end_hour}h); first in list order wins"
        )
