"""Radio broadcast engine: tuning, reception and scheduled programming."""

from airwaves.radio import stations
from airwaves.radio.arbiter import ContentArbiter, ContentLibrary
from airwaves.radio.audio import (
  AudioChannel,
  AudioEvent,
  AudioOutput,
  SimulatedAudioOutput,
)
from airwaves.radio.clock import (
  Clock,
  ClockSource,
  FixedClockSource,
  SystemClockSource,
)
from airwaves.radio.engine import EngineConfig, RadioEngine, RadioStatus
from airwaves.radio.models import (
  ConfigurationError,
  ContentCategory,
  DaySchedule,
  Language,
  ProgramSlot,
  ProgramType,
  Schedule,
  Station,
  StationRegistry,
  Weekday,
)
from airwaves.radio.scheduler import ProgramScheduler, find_slot
from airwaves.radio.signal import (
  CoherentNoise,
  FalloffCurve,
  NoiseFunction,
  SignalModel,
)
from airwaves.radio.tuner import TuneOutcome, Tuner

__all__ = [
  # Engine
  "EngineConfig",
  "RadioEngine",
  "RadioStatus",
  # Components
  "Clock",
  "ContentArbiter",
  "ProgramScheduler",
  "SignalModel",
  "TuneOutcome",
  "Tuner",
  "find_slot",
  # Capabilities
  "AudioChannel",
  "AudioEvent",
  "AudioOutput",
  "ClockSource",
  "FixedClockSource",
  "NoiseFunction",
  "SimulatedAudioOutput",
  "SystemClockSource",
  # Signal shaping
  "CoherentNoise",
  "FalloffCurve",
  # Data model
  "ConfigurationError",
  "ContentCategory",
  "ContentLibrary",
  "DaySchedule",
  "Language",
  "ProgramSlot",
  "ProgramType",
  "Schedule",
  "Station",
  "StationRegistry",
  "Weekday",
  # Presets
  "stations",
]
