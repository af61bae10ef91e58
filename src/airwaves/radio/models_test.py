"""Tests for the broadcast data model and station registry."""

import logging

import pytest
from pydantic import ValidationError

from airwaves.radio.models import (
  ConfigurationError,
  ContentCategory,
  DaySchedule,
  ProgramSlot,
  ProgramType,
  Schedule,
  Station,
  StationRegistry,
  Weekday,
)


def make_station(name: str, frequency: float, *days: DaySchedule) -> Station:
  return Station(name=name, frequency=frequency, schedule=Schedule(days=days))


class TestWeekday:
  """Tests for Weekday."""

  def test_next_wraps_sunday_to_monday(self) -> None:
    """Test that the week wraps around."""
    assert Weekday.SUNDAY.next() is Weekday.MONDAY
    assert Weekday.MONDAY.next() is Weekday.TUESDAY

  def test_matches_datetime_numbering(self) -> None:
    """Test that Monday is 0 like datetime.weekday()."""
    assert Weekday.MONDAY == 0
    assert Weekday.SUNDAY == 6

  @pytest.mark.parametrize(
    ("value", "expected"),
    [
      ("mon", Weekday.MONDAY),
      ("Sunday", Weekday.SUNDAY),
      (" THU ", Weekday.THURSDAY),
      ("4", Weekday.FRIDAY),
      (2, Weekday.WEDNESDAY),
      (Weekday.SATURDAY, Weekday.SATURDAY),
    ],
  )
  def test_parse(self, value, expected) -> None:
    """Test parsing names, abbreviations and numbers."""
    assert Weekday.parse(value) is expected

  @pytest.mark.parametrize("value", ["mo", "someday", "", "7"])
  def test_parse_rejects_unknown(self, value) -> None:
    """Test that ambiguous or unknown names are rejected."""
    with pytest.raises(ValueError):  # noqa: PT011
      Weekday.parse(value)

  @pytest.mark.parametrize("value", [1.0, None, ["mon"]])
  def test_parse_rejects_non_text(self, value) -> None:
    """Test that values other than names and numbers are rejected."""
    with pytest.raises(ValueError, match="name or number"):
      Weekday.parse(value)


class TestProgramSlot:
  """Tests for ProgramSlot."""

  def test_covers_is_half_open(self) -> None:
    """Test that a slot covers [start, start + duration)."""
    slot = ProgramSlot(name="Drive", start_hour=6, duration=3)
    assert slot.end_hour == 9
    assert slot.covers(6.0)
    assert slot.covers(8.99)
    assert not slot.covers(9.0)
    assert not slot.covers(5.99)

  def test_defaults(self) -> None:
    """Test that a bare slot is a music program without specific content."""
    slot = ProgramSlot(name="Hits", start_hour=0, duration=1)
    assert slot.type is ProgramType.MUSIC
    assert slot.specific_content == ()

  @pytest.mark.parametrize("start", [-0.5, 24.0, 30.0])
  def test_start_hour_range(self, start) -> None:
    """Test that start hours outside [0, 24) are rejected."""
    with pytest.raises(ValidationError):
      ProgramSlot(name="Bad", start_hour=start, duration=1)

  def test_is_frozen(self) -> None:
    """Test that slots are immutable."""
    slot = ProgramSlot(name="Hits", start_hour=0, duration=1)
    with pytest.raises(ValidationError):
      slot.duration = 2  # type: ignore[misc]


class TestSchedule:
  """Tests for Schedule and DaySchedule."""

  def test_day_accepts_names(self) -> None:
    """Test that day entries can be given by name."""
    entry = DaySchedule(day="tuesday", slots=())  # type: ignore[arg-type]
    assert entry.day is Weekday.TUESDAY

  def test_for_day_returns_first_entry(self) -> None:
    """Test that a duplicated weekday resolves to its first entry."""
    first = DaySchedule(
      day=Weekday.MONDAY, slots=(ProgramSlot(name="A", start_hour=0, duration=1),)
    )
    second = DaySchedule(
      day=Weekday.MONDAY, slots=(ProgramSlot(name="B", start_hour=0, duration=1),)
    )
    schedule = Schedule(days=(first, second))
    assert schedule.for_day(Weekday.MONDAY) is first

  def test_for_day_missing(self) -> None:
    """Test that a day without an entry yields None."""
    schedule = Schedule(days=(DaySchedule(day=Weekday.MONDAY),))
    assert schedule.for_day(Weekday.FRIDAY) is None

  def test_all_slots(self) -> None:
    """Test iterating slots across days."""
    a = ProgramSlot(name="A", start_hour=0, duration=1)
    b = ProgramSlot(name="B", start_hour=5, duration=1)
    schedule = Schedule(
      days=(
        DaySchedule(day=Weekday.MONDAY, slots=(a,)),
        DaySchedule(day=Weekday.TUESDAY, slots=(b,)),
      )
    )
    assert [s.name for s in schedule.all_slots()] == ["A", "B"]


class TestStation:
  """Tests for Station."""

  def test_pool_lookup(self) -> None:
    """Test that missing pools resolve to an empty tuple."""
    station = Station(
      name="Kiss FM",
      frequency=100.3,
      pools={ContentCategory.MUSIC: ("kiss/01", "kiss/02")},
    )
    assert station.music == ("kiss/01", "kiss/02")
    assert station.pool(ContentCategory.ADS) == ()

  def test_frequency_must_be_positive(self) -> None:
    """Test that a zero frequency is rejected."""
    with pytest.raises(ValidationError):
      Station(name="Nowhere", frequency=0.0)


class TestStationRegistry:
  """Tests for StationRegistry."""

  def test_empty_roster_rejected(self) -> None:
    """Test that a registry needs at least one station."""
    with pytest.raises(ConfigurationError):
      StationRegistry([])

  @pytest.mark.parametrize("duration", [0.0, -1.0])
  def test_non_positive_duration_rejected(self, duration) -> None:
    """Test that slots must have a positive duration."""
    station = make_station(
      "Broken FM",
      99.0,
      DaySchedule(
        day=Weekday.MONDAY,
        slots=(ProgramSlot(name="Void", start_hour=3, duration=duration),),
      ),
    )
    with pytest.raises(ConfigurationError, match="Void"):
      StationRegistry([station])

  def test_configuration_error_is_value_error(self) -> None:
    """Test that callers can catch configuration errors as ValueError."""
    assert issubclass(ConfigurationError, ValueError)

  def test_nearest_picks_closest(self) -> None:
    """Test nearest station resolution."""
    registry = StationRegistry(
      [make_station("Kiss FM", 100.3), make_station("Classic 105", 105.2)]
    )
    station, diff = registry.nearest(104.0)
    assert station.name == "Classic 105"
    assert diff == pytest.approx(1.2)

  def test_nearest_tie_prefers_registry_order(self) -> None:
    """Test that equidistant stations resolve to the earlier one."""
    low = make_station("Low", 100.0)
    high = make_station("High", 101.0)

    station, diff = StationRegistry([low, high]).nearest(100.5)
    assert station is low
    assert diff == 0.5

    station, _ = StationRegistry([high, low]).nearest(100.5)
    assert station is high

  def test_iteration_and_lookup(self) -> None:
    """Test that registry order is preserved."""
    stations = [make_station("A", 90.0), make_station("B", 91.0)]
    registry = StationRegistry(stations)
    assert len(registry) == 2
    assert [s.name for s in registry] == ["A", "B"]
    assert registry.by_name("B") is stations[1]
    with pytest.raises(KeyError):
      registry.by_name("C")

  def test_overlapping_slots_warn(self, caplog) -> None:
    """Test that overlapping slots are accepted but logged."""
    station = make_station(
      "Overlap FM",
      95.0,
      DaySchedule(
        day=Weekday.MONDAY,
        slots=(
          ProgramSlot(name="Long Show", start_hour=6, duration=4),
          ProgramSlot(name="Short Show", start_hour=8, duration=1),
        ),
      ),
    )
    with caplog.at_level(logging.WARNING, logger="airwaves.radio.models"):
      StationRegistry([station])

    assert "overlaps" in caplog.text
    assert "Long Show" in caplog.text

  def test_adjacent_slots_do_not_warn(self, caplog) -> None:
    """Test that back-to-back slots are not treated as overlapping."""
    station = make_station(
      "Tidy FM",
      95.0,
      DaySchedule(
        day=Weekday.MONDAY,
        slots=(
          ProgramSlot(name="Morning", start_hour=6, duration=3),
          ProgramSlot(name="Midday", start_hour=9, duration=3),
        ),
      ),
    )
    with caplog.at_level(logging.WARNING, logger="airwaves.radio.models"):
      StationRegistry([station])

    assert "overlaps" not in caplog.text
