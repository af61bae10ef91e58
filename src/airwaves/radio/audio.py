"""Audio output capability consumed by the radio engine.

The engine never decodes or mixes audio itself. It decides which clip should
be playing and at what relative volume, and delegates execution to an
AudioOutput implementation supplied by the host.
"""

import logging
from abc import ABC, abstractmethod
from enum import StrEnum

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class AudioChannel(StrEnum):
  """Independent outputs of the receiver."""

  MAIN = "main"
  STATIC = "static"
  EFFECTS = "effects"


class AudioOutput(ABC):
  """Abstract audio backend.

  `play`, `stop` and `is_playing` act on the main (programme) channel.
  """

  @abstractmethod
  def play(self, clip: str) -> None:
    """Replace whatever is on the main channel with `clip`."""

  @abstractmethod
  def stop(self) -> None:
    """Halt main channel playback immediately."""

  @abstractmethod
  def is_playing(self) -> bool:
    """Whether the main channel still has content playing."""

  @abstractmethod
  def play_one_shot(self, clip: str) -> None:
    """Fire-and-forget cue on the effects channel."""

  @abstractmethod
  def loop(self, channel: AudioChannel, clip: str) -> None:
    """Play `clip` continuously on `channel`."""

  @abstractmethod
  def set_volume(self, channel: AudioChannel, level: float) -> None:
    """Set the volume of `channel`, level in [0, 1]."""


class AudioEvent(BaseModel):
  """A call recorded by SimulatedAudioOutput."""

  action: str
  channel: AudioChannel = AudioChannel.MAIN
  clip: str | None = None
  level: float | None = None

  model_config = {"frozen": True}


class SimulatedAudioOutput(AudioOutput):
  """In-memory audio output for headless simulation and tests.

  Every clip on the main channel lasts `clip_seconds`; the driver moves
  playback forward with `advance()`, after which finished clips report as not
  playing. All calls are recorded in `events`.
  """

  def __init__(self, clip_seconds: float = 180.0) -> None:
    if clip_seconds <= 0:
      msg = f"clip_seconds must be > 0, got {clip_seconds}"
      raise ValueError(msg)
    self.clip_seconds = clip_seconds
    self.current: str | None = None
    self.position = 0.0
    self.volumes: dict[AudioChannel, float] = dict.fromkeys(AudioChannel, 1.0)
    self.loops: dict[AudioChannel, str] = {}
    self.events: list[AudioEvent] = []

  def play(self, clip: str) -> None:
    self.current = clip
    self.position = 0.0
    self.events.append(AudioEvent(action="play", clip=clip))
    logger.debug(f"main <- {clip}")

  def stop(self) -> None:
    self.current = None
    self.position = 0.0
    self.events.append(AudioEvent(action="stop"))

  def is_playing(self) -> bool:
    return self.current is not None

  def play_one_shot(self, clip: str) -> None:
    self.events.append(
      AudioEvent(action="one_shot", channel=AudioChannel.EFFECTS, clip=clip)
    )

  def loop(self, channel: AudioChannel, clip: str) -> None:
    self.loops[channel] = clip
    self.events.append(AudioEvent(action="loop", channel=channel, clip=clip))

  def set_volume(self, channel: AudioChannel, level: float) -> None:
    self.volumes[channel] = level
    self.events.append(AudioEvent(action="volume", channel=channel, level=level))

  def advance(self, seconds: float) -> None:
    """Move main channel playback forward; finished clips are released."""
    if self.current is None:
      return
    self.position += seconds
    if self.position >= self.clip_seconds:
      logger.debug(f"main finished {self.current}")
      self.current = None
      self.position = 0.0

  def played(self) -> list[str]:
    """Clips started on the main channel, in order."""
    return [e.clip for e in self.events if e.action == "play" and e.clip]
