"""Reception quality simulation.

Quality is derived each tick from two independent effects:
- Detuning: a falloff curve maps the offset between the dial and the station
  frequency to a base quality.
- Interference: slowly varying coherent noise sampled along simulated time is
  subtracted from the base.

The resulting quality drives the mix between the programme channel and the
static bed on the audio output.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Literal

import numpy as np
from pydantic import BaseModel, Field, model_validator
from scipy.interpolate import PchipInterpolator

from airwaves.radio.audio import AudioChannel, AudioOutput

logger = logging.getLogger(__name__)

DEFAULT_FALLOFF_POINTS: tuple[tuple[float, float], ...] = (
  (0.0, 1.0),
  (0.1, 0.85),
  (0.2, 0.45),
  (0.3, 0.0),
)


class FalloffCurve(BaseModel):
  """Monotonically non-increasing mapping from tuning offset to quality.

  Control points are (offset, quality) pairs. Offsets must be non-negative and
  strictly increasing; qualities must lie in [0, 1] and never increase. Values
  outside the control range are held at the nearest end point.

  Attributes:
    points: Ordered control points.
    interpolation: "linear" for piecewise linear, "pchip" for monotone cubic.
  """

  points: tuple[tuple[float, float], ...] = Field(
    default=DEFAULT_FALLOFF_POINTS, min_length=1
  )
  interpolation: Literal["linear", "pchip"] = "linear"

  model_config = {"frozen": True}

  @model_validator(mode="after")
  def _check_points(self) -> "FalloffCurve":
    offsets = [p[0] for p in self.points]
    qualities = [p[1] for p in self.points]
    if offsets[0] < 0:
      msg = f"Falloff offsets must be >= 0, got {offsets[0]}"
      raise ValueError(msg)
    if any(b <= a for a, b in zip(offsets, offsets[1:], strict=False)):
      msg = f"Falloff offsets must be strictly increasing: {offsets}"
      raise ValueError(msg)
    if any(not 0.0 <= q <= 1.0 for q in qualities):
      msg = f"Falloff qualities must lie in [0, 1]: {qualities}"
      raise ValueError(msg)
    if any(b > a for a, b in zip(qualities, qualities[1:], strict=False)):
      msg = f"Falloff qualities must be non-increasing: {qualities}"
      raise ValueError(msg)
    return self

  def __init__(self, **data) -> None:
    super().__init__(**data)
    self._offsets = np.array([p[0] for p in self.points], dtype=np.float64)
    self._qualities = np.array([p[1] for p in self.points], dtype=np.float64)
    self._pchip = None
    if self.interpolation == "pchip" and len(self.points) > 1:
      self._pchip = PchipInterpolator(self._offsets, self._qualities)

  def evaluate(self, offset: float) -> float:
    """Base quality for a tuning offset (sign is ignored)."""
    offsets = self._offsets
    qualities = self._qualities
    x = abs(offset)

    if len(offsets) == 1:
      return float(qualities[0])

    if self._pchip is not None:
      x = float(np.clip(x, offsets[0], offsets[-1]))
      value = self._pchip(x)
    else:
      value = np.interp(x, offsets, qualities)

    return float(np.clip(value, 0.0, 1.0))


class NoiseFunction(ABC):
  """Deterministic, smooth pseudo-random function with values in [0, 1]."""

  @abstractmethod
  def sample(self, x: float) -> float:
    """Noise value at position `x` along the axis."""


class CoherentNoise(BaseModel, NoiseFunction):
  """One-dimensional gradient noise (Perlin style).

  Each integer lattice point carries a pseudo-random gradient drawn from a
  seeded generator; between lattice points the gradients are blended with the
  quintic fade curve, so the output is continuous with continuous slope. The
  raw value lies in [-0.5, 0.5] and is shifted into [0, 1].
  """

  seed: int | None = None
  lattice_size: int = Field(default=256, gt=1)

  model_config = {"frozen": True}

  def __init__(self, **data) -> None:
    super().__init__(**data)
    rng = np.random.default_rng(self.seed)
    self._perm = rng.permutation(self.lattice_size)
    self._gradients = rng.uniform(-1.0, 1.0, self.lattice_size)

  def _gradient(self, lattice: int) -> float:
    index = self._perm[lattice % self.lattice_size]
    return float(self._gradients[index])

  def sample(self, x: float) -> float:
    """Noise value at `x`, in [0, 1]."""
    cell = math.floor(x)
    frac = x - cell

    g0 = self._gradient(cell)
    g1 = self._gradient(cell + 1)

    # Quintic fade: 6t^5 - 15t^4 + 10t^3
    fade = frac * frac * frac * (frac * (frac * 6.0 - 15.0) + 10.0)
    near = g0 * frac
    far = g1 * (frac - 1.0)
    value = near + fade * (far - near)

    return float(np.clip(0.5 + value, 0.0, 1.0))


class SignalModel:
  """Computes reception quality and pushes the resulting volume mix."""

  def __init__(
    self,
    falloff: FalloffCurve,
    noise: NoiseFunction,
    *,
    interference_rate: float = 0.1,
    interference_depth: float = 0.2,
    max_signal_strength: float = 1.0,
    static_volume: float = 0.1,
  ) -> None:
    """Initialize the signal model.

    Args:
      falloff: Offset-to-quality curve.
      noise: Interference source sampled along simulated time.
      interference_rate: Noise axis units per simulated second.
      interference_depth: Maximum quality lost to interference.
      max_signal_strength: Programme channel volume at full quality.
      static_volume: Static channel volume at zero quality.
    """
    self.falloff = falloff
    self.noise = noise
    self.interference_rate = interference_rate
    self.interference_depth = interference_depth
    self.max_signal_strength = max_signal_strength
    self.static_volume = static_volume

  def interference(self, elapsed_time: float) -> float:
    return self.noise.sample(elapsed_time * self.interference_rate) * (
      self.interference_depth
    )

  def quality(self, offset: float, elapsed_time: float) -> float:
    """Reception quality in [0, 1].

    Args:
      offset: Difference between dial and station frequency.
      elapsed_time: Simulated seconds since engine start.
    """
    base = self.falloff.evaluate(offset)
    quality = float(np.clip(base - self.interference(elapsed_time), 0.0, 1.0))
    logger.debug(f"signal offset={offset:.3f} base={base:.3f} quality={quality:.3f}")
    return quality

  def apply_mix(self, audio: AudioOutput, quality: float) -> None:
    """Set programme and static volumes for `quality`."""
    audio.set_volume(AudioChannel.MAIN, quality * self.max_signal_strength)
    audio.set_volume(AudioChannel.STATIC, (1.0 - quality) * self.static_volume)
