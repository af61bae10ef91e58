"""Dial tuning: frequency to station resolution."""

import logging
from enum import Enum

from airwaves.radio.audio import AudioOutput
from airwaves.radio.models import Station, StationRegistry

logger = logging.getLogger(__name__)

DEFAULT_TUNING_TOLERANCE = 0.3


class TuneOutcome(Enum):
  """Result of a tune request."""

  ACTIVATED = "activated"  # a different station is now active
  UNCHANGED = "unchanged"  # the active station stays active
  OUT_OF_RANGE = "out_of_range"  # nothing within tolerance, receiver untuned


class Tuner:
  """Tracks the dial position, active station and signal quality.

  An untuned receiver (no active station) is a normal state with quality 0.
  """

  def __init__(
    self,
    registry: StationRegistry,
    audio: AudioOutput,
    *,
    tolerance: float = DEFAULT_TUNING_TOLERANCE,
    tuning_sound: str | None = None,
  ) -> None:
    """Initialize an untuned tuner.

    Args:
      registry: Stations reachable on the dial.
      audio: Output that receives the tuning cue.
      tolerance: Maximum offset (exclusive) at which a station is reachable.
      tuning_sound: One-shot cue played on every tune request, if set.
    """
    self.registry = registry
    self.audio = audio
    self.tolerance = tolerance
    self.tuning_sound = tuning_sound

    self.frequency: float | None = None
    self.station: Station | None = None
    self.quality = 0.0

  @property
  def offset(self) -> float:
    """Absolute distance between the dial and the active station."""
    if self.station is None or self.frequency is None:
      return 0.0
    return abs(self.frequency - self.station.frequency)

  def tune(self, frequency: float) -> TuneOutcome:
    """Move the dial to `frequency`.

    The nearest station within tolerance becomes active. Re-tuning to the
    already active station only updates the dial position.
    """
    self.frequency = frequency
    if self.tuning_sound:
      self.audio.play_one_shot(self.tuning_sound)

    closest, diff = self.registry.nearest(frequency)

    # A NaN offset compares false and leaves the receiver untuned.
    if not diff < self.tolerance:
      if self.station is not None:
        logger.info(f"Lost {self.station.name} at {frequency:.2f}")
      self.station = None
      self.quality = 0.0
      return TuneOutcome.OUT_OF_RANGE

    if closest is self.station:
      return TuneOutcome.UNCHANGED

    self.station = closest
    self.quality = 1.0
    logger.info(f"Tuned to {closest.name} ({closest.frequency:.1f}) at {frequency:.2f}")
    return TuneOutcome.ACTIVATED
