"""Content arbitration: which clip to put on air.

Two triggers select content:
- Restart: a program begins (or a station is tuned in). Programs that define
  specific content start one of those clips immediately.
- Continuation: the main channel ran dry. The program type decides which pool
  the next clip is drawn from.
"""

import logging
from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel

from airwaves.radio.audio import AudioOutput
from airwaves.radio.models import ContentHandle, ProgramSlot, ProgramType, Station

logger = logging.getLogger(__name__)


class ContentLibrary(BaseModel):
  """Station-independent content pools.

  Attributes:
    news_headlines: Clips for news programs.
    traffic_updates: Clips for traffic programs.
    weather_reports: Clips for weather programs.
    static_noise: Static bed; the first clip is looped under every station.
    tuning_sound: One-shot cue played whenever the dial moves.
  """

  news_headlines: tuple[ContentHandle, ...] = ()
  traffic_updates: tuple[ContentHandle, ...] = ()
  weather_reports: tuple[ContentHandle, ...] = ()
  static_noise: tuple[ContentHandle, ...] = ()
  tuning_sound: ContentHandle | None = None

  model_config = {"frozen": True}


class ContentArbiter:
  """Selects and starts content for the active program."""

  def __init__(
    self,
    audio: AudioOutput,
    library: ContentLibrary,
    rng: np.random.Generator | None = None,
  ) -> None:
    """Initialize the arbiter.

    Args:
      audio: Output the selected clips are played on.
      library: Global news/traffic/weather pools.
      rng: Random generator for uniform picks. Seed it for reproducible runs.
    """
    self.audio = audio
    self.library = library
    self.rng = rng if rng is not None else np.random.default_rng()

  def pick(self, pool: Sequence[ContentHandle]) -> ContentHandle | None:
    """Uniformly random clip from `pool`, or None if it is empty."""
    if not pool:
      return None
    return pool[int(self.rng.integers(len(pool)))]

  def pool_for(
    self, station: Station, slot: ProgramSlot
  ) -> tuple[ContentHandle, ...]:
    """Pool feeding a program once its current clip has finished."""
    match slot.type:
      case ProgramType.NEWS:
        return self.library.news_headlines
      case ProgramType.TRAFFIC:
        return self.library.traffic_updates
      case ProgramType.WEATHER:
        return self.library.weather_reports
      case _:
        # Music and every spoken format without its own pool.
        return station.music

  def restart(self, slot: ProgramSlot | None) -> ContentHandle | None:
    """Start a program's specific content, if it has any."""
    if slot is None or not slot.specific_content:
      return None

    clip = self.pick(slot.specific_content)
    self.audio.stop()
    self.audio.play(clip)
    logger.info(f"{slot.name}: playing {clip}")
    return clip

  def continue_program(
    self, station: Station, slot: ProgramSlot
  ) -> ContentHandle | None:
    """Start the next clip for `slot` after the previous one finished."""
    clip = self.pick(self.pool_for(station, slot))
    if clip is None:
      logger.debug(f"{station.name}: no {slot.type.value} content, staying silent")
      return None

    self.audio.play(clip)
    logger.info(f"{station.name} / {slot.name}: playing {clip}")
    return clip
