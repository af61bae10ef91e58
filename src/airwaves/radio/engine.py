"""Radio engine: orchestrates tuning, reception and programming.

The engine is driven from outside through two entry points:
- `tick(elapsed_seconds)`: advance simulated time and re-evaluate everything
  derived from it, in a fixed order: clock, signal quality and volume mix,
  program schedule, content.
- `tune(frequency)`: move the dial (e.g. on user input).

Both must be called from the same thread; the engine keeps no locks and never
blocks or runs work in the background.
"""

import logging
from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel, Field

from airwaves.radio.arbiter import ContentArbiter, ContentLibrary
from airwaves.radio.audio import AudioChannel, AudioOutput
from airwaves.radio.clock import Clock, ClockSource
from airwaves.radio.models import (
  ProgramSlot,
  Station,
  StationRegistry,
  Weekday,
)
from airwaves.radio.scheduler import ProgramScheduler
from airwaves.radio.signal import (
  CoherentNoise,
  FalloffCurve,
  NoiseFunction,
  SignalModel,
)
from airwaves.radio.tuner import DEFAULT_TUNING_TOLERANCE, TuneOutcome, Tuner

logger = logging.getLogger(__name__)


class EngineConfig(BaseModel):
  """Tunable parameters of the radio engine.

  Attributes:
    tuning_tolerance: Maximum dial offset at which a station is reachable.
    max_signal_strength: Programme volume at perfect reception.
    static_volume: Static volume when reception is lost entirely.
    interference_rate: Noise axis units advanced per simulated second.
    interference_depth: Maximum quality subtracted by interference.
    falloff: Offset-to-quality curve.
    noise_seed: Seed for the interference noise (None draws fresh entropy).
    rng_seed: Seed for content selection (None draws fresh entropy).
  """

  tuning_tolerance: float = Field(
    DEFAULT_TUNING_TOLERANCE,
    description="Maximum dial offset at which a station is reachable.",
    gt=0.0,
  )
  max_signal_strength: float = Field(
    1.0, description="Programme volume at perfect reception.", ge=0.0, le=1.0
  )
  static_volume: float = Field(
    0.1, description="Static volume when reception is lost.", ge=0.0, le=1.0
  )
  interference_rate: float = Field(
    0.1, description="Noise axis units per simulated second.", ge=0.0
  )
  interference_depth: float = Field(
    0.2, description="Maximum quality lost to interference.", ge=0.0, le=1.0
  )
  falloff: FalloffCurve = Field(default_factory=FalloffCurve)
  noise_seed: int | None = None
  rng_seed: int | None = None

  model_config = {"frozen": True}


class RadioStatus(BaseModel):
  """Read-only snapshot of the receiver."""

  station: str | None
  frequency: float | None
  quality: float
  program: str | None
  weekday: Weekday
  time_of_day: float
  now_playing: bool

  model_config = {"frozen": True}

  def __str__(self) -> str:
    hours = int(self.time_of_day)
    minutes = int((self.time_of_day - hours) * 60)
    dial = f"{self.frequency:.1f}" if self.frequency is not None else "--"
    return (
      f"{self.weekday.name.title()[:3]} {hours:02d}:{minutes:02d} | "
      f"dial {dial} | {self.station or 'untuned'} | "
      f"quality {self.quality:.2f} | {self.program or 'no program'}"
      f"{' | playing' if self.now_playing else ''}"
    )


class RadioEngine:
  """In-world radio receiver.

  All mutable state (clock, tuner, program) lives on the instance; stations,
  content and configuration are read-only after construction.
  """

  def __init__(
    self,
    registry: StationRegistry,
    clock: Clock,
    audio: AudioOutput,
    *,
    library: ContentLibrary | None = None,
    config: EngineConfig | None = None,
    noise: NoiseFunction | None = None,
    rng: np.random.Generator | None = None,
  ) -> None:
    """Wire the engine components together.

    Prefer `RadioEngine.initialize`, which validates a raw station list and
    synchronizes the clock from a ClockSource.

    Args:
      registry: Validated station roster.
      clock: Simulated clock, already synchronized.
      audio: Audio backend executing playback and volume changes.
      library: Global content pools and cues.
      config: Engine parameters.
      noise: Interference source; defaults to CoherentNoise(config.noise_seed).
      rng: Generator for content picks; defaults to one seeded by
        config.rng_seed.
    """
    self.config = config or EngineConfig()
    self.library = library or ContentLibrary()
    self.registry = registry
    self.clock = clock
    self.audio = audio
    self.elapsed_time = 0.0

    self.signal = SignalModel(
      self.config.falloff,
      noise or CoherentNoise(seed=self.config.noise_seed),
      interference_rate=self.config.interference_rate,
      interference_depth=self.config.interference_depth,
      max_signal_strength=self.config.max_signal_strength,
      static_volume=self.config.static_volume,
    )
    self.tuner = Tuner(
      registry,
      audio,
      tolerance=self.config.tuning_tolerance,
      tuning_sound=self.library.tuning_sound,
    )
    self.scheduler = ProgramScheduler()
    self.arbiter = ContentArbiter(
      audio,
      self.library,
      rng if rng is not None else np.random.default_rng(self.config.rng_seed),
    )

    if self.library.static_noise:
      self.audio.set_volume(AudioChannel.STATIC, 0.0)
      self.audio.loop(AudioChannel.STATIC, self.library.static_noise[0])

  @classmethod
  def initialize(
    cls,
    stations: Sequence[Station],
    clock_source: ClockSource,
    audio: AudioOutput,
    *,
    library: ContentLibrary | None = None,
    config: EngineConfig | None = None,
    noise: NoiseFunction | None = None,
    rng: np.random.Generator | None = None,
  ) -> "RadioEngine":
    """Validate the roster, synchronize the clock and build an untuned engine.

    Raises:
      ConfigurationError: If `stations` is empty or a program slot has a
        non-positive duration.
    """
    registry = StationRegistry(stations)
    clock = Clock.from_source(clock_source)
    logger.info(f"Radio initialized with {len(registry)} stations at {clock}")
    return cls(
      registry,
      clock,
      audio,
      library=library,
      config=config,
      noise=noise,
      rng=rng,
    )

  @property
  def active_station(self) -> Station | None:
    return self.tuner.station

  @property
  def signal_quality(self) -> float:
    return self.tuner.quality

  @property
  def active_program(self) -> ProgramSlot | None:
    return self.scheduler.active

  def tick(self, elapsed_seconds: float) -> None:
    """Advance the simulation by `elapsed_seconds`."""
    self.clock.advance(elapsed_seconds)
    self.elapsed_time += elapsed_seconds

    station = self.tuner.station
    if station is None:
      return

    self.tuner.quality = self.signal.quality(self.tuner.offset, self.elapsed_time)
    self.signal.apply_mix(self.audio, self.tuner.quality)

    if self.scheduler.update(station, self.clock):
      self.arbiter.restart(self.scheduler.active)

    program = self.scheduler.active
    if program is not None and not self.audio.is_playing():
      self.arbiter.continue_program(station, program)

  def tune(self, frequency: float) -> TuneOutcome:
    """Move the dial to `frequency`.

    Switching to another station, or out of range, cuts current playback
    immediately. Tuning to the station already on air changes nothing but the
    dial offset.
    """
    outcome = self.tuner.tune(frequency)

    if outcome is TuneOutcome.ACTIVATED:
      station = self.tuner.station
      self.audio.stop()
      self.signal.apply_mix(self.audio, self.tuner.quality)
      self.scheduler.reset()
      self.scheduler.update(station, self.clock)
      self.arbiter.restart(self.scheduler.active)
    elif outcome is TuneOutcome.OUT_OF_RANGE:
      self.audio.stop()
      self.scheduler.reset()
      self.signal.apply_mix(self.audio, 0.0)

    return outcome

  def status(self) -> RadioStatus:
    station = self.tuner.station
    program = self.scheduler.active
    return RadioStatus(
      station=station.name if station else None,
      frequency=self.tuner.frequency,
      quality=self.tuner.quality,
      program=program.name if program else None,
      weekday=self.clock.weekday,
      time_of_day=self.clock.time_of_day,
      now_playing=self.audio.is_playing(),
    )
