"""Tests for the preset station rosters."""

import logging

import pytest

from airwaves.radio import stations
from airwaves.radio.audio import SimulatedAudioOutput
from airwaves.radio.clock import Clock
from airwaves.radio.engine import RadioEngine
from airwaves.radio.models import ProgramType, StationRegistry, Weekday
from airwaves.radio.scheduler import find_slot
from airwaves.radio.tuner import TuneOutcome


def test_nairobi_roster() -> None:
  """Test the stations on the Nairobi dial."""
  names = [s.name for s in stations.NAIROBI]
  assert names == ["Classic 105", "Kiss FM", "Jambo FM", "Nation FM"]
  assert [s.frequency for s in stations.NAIROBI] == [105.2, 100.3, 97.5, 96.3]


def test_nairobi_schedules_do_not_overlap(caplog) -> None:
  """Test that the presets load without overlap warnings."""
  with caplog.at_level(logging.WARNING):
    StationRegistry(stations.NAIROBI)
  assert "overlaps" not in caplog.text


def test_clips() -> None:
  """Test symbolic handle generation."""
  assert stations.clips("kiss_fm/music", 3) == (
    "kiss_fm/music/01",
    "kiss_fm/music/02",
    "kiss_fm/music/03",
  )


@pytest.mark.parametrize("station", stations.NAIROBI, ids=lambda s: s.name)
def test_every_station_tunable(station) -> None:
  """Test that each preset station can be tuned in by its frequency."""
  engine = RadioEngine(
    StationRegistry(stations.NAIROBI),
    Clock(8.0, Weekday.MONDAY),
    SimulatedAudioOutput(),
    library=stations.NAIROBI_LIBRARY,
  )
  assert engine.tune(station.frequency) is TuneOutcome.ACTIVATED
  assert engine.active_station is station
  assert engine.active_program is not None


@pytest.mark.parametrize("station", stations.NAIROBI, ids=lambda s: s.name)
def test_weekdays_fully_scheduled(station) -> None:
  """Test that Monday to Friday are covered around the clock."""
  for day in stations.WEEKDAYS:
    for hour in range(24):
      assert find_slot(station.schedule, day, hour + 0.5) is not None


def test_jambo_weekend_has_gaps() -> None:
  """Test that Jambo FM only airs specific weekend programs."""
  schedule = stations.jambo_fm().schedule
  assert find_slot(schedule, Weekday.SATURDAY, 8.0) is None
  slot = find_slot(schedule, Weekday.SATURDAY, 13.0)
  assert slot.type is ProgramType.SPORTS


def test_nairobi_library() -> None:
  """Test the shared content library."""
  library = stations.NAIROBI_LIBRARY
  assert library.static_noise == ("shared/static/hiss",)
  assert library.tuning_sound == "shared/fx/tuning"
  assert len(library.news_headlines) == 6
