#!/usr/bin/env python3
"""Headless radio simulation script.

This script drives the radio engine tick by tick:
Clock -> Signal Model -> Program Scheduler -> Content Arbiter -> Audio Output

Audio is simulated: every clip lasts a fixed time and the script logs what
the receiver would be playing, how good the reception is and which program
is on air.
"""

import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Annotated

import numpy as np
import typer

from airwaves.config import ConfigurationError, RadioConfig, load_config
from airwaves.radio import stations
from airwaves.radio.audio import SimulatedAudioOutput
from airwaves.radio.clock import FixedClockSource
from airwaves.radio.engine import EngineConfig, RadioEngine
from airwaves.radio.models import Weekday
from airwaves.setup_logging import setup_logging

logger = logging.getLogger(__name__)


def parse_start(value: str) -> datetime:
  """Parse "<weekday> HH:MM" into a datetime in the current week."""
  try:
    day_text, time_text = value.split()
    day = Weekday.parse(day_text)
    hours, minutes = (int(part) for part in time_text.split(":"))
  except ValueError:
    logger.exception(f"Invalid start {value!r}, expected e.g. 'Mon 07:30'")
    sys.exit(1)

  today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
  monday = today - timedelta(days=today.weekday())
  return monday + timedelta(days=int(day), hours=hours, minutes=minutes)


def load_setup(config_path: Path | None, seed: int | None) -> RadioConfig:
  """Radio setup from a JSON file, or the Nairobi dial by default."""
  if config_path is not None:
    try:
      return load_config(config_path)
    except ConfigurationError:
      logger.exception("Could not load configuration")
      sys.exit(1)

  return RadioConfig(
    stations=stations.NAIROBI,
    library=stations.NAIROBI_LIBRARY,
    engine=EngineConfig(noise_seed=seed, rng_seed=seed),
  )


def main(
  frequency: Annotated[
    float, typer.Argument(help="Dial frequency to tune to (e.g. 100.3).")
  ],
  config: Annotated[
    Path | None,
    typer.Option(
      "--config",
      "-c",
      help="Radio configuration JSON (default: built-in Nairobi dial).",
      exists=True,
      readable=True,
    ),
  ] = None,
  start: Annotated[
    str,
    typer.Option("--start", "-s", help="Simulated start, e.g. 'Mon 07:30'."),
  ] = "Mon 07:30",
  hours: Annotated[
    float,
    typer.Option("--hours", help="Simulated hours to run.", min=0.0),
  ] = 2.0,
  tick: Annotated[
    float,
    typer.Option("--tick", "-t", help="Simulated seconds per tick.", min=0.01),
  ] = 1.0,
  clip_seconds: Annotated[
    float,
    typer.Option("--clip-seconds", help="Length of every simulated clip.", min=1.0),
  ] = 180.0,
  report_every: Annotated[
    float,
    typer.Option("--report-every", help="Simulated minutes between status logs."),
  ] = 15.0,
  seed: Annotated[
    int | None,
    typer.Option("--seed", help="Seed for interference and content picks."),
  ] = None,
  log_level: Annotated[
    str | None,
    typer.Option("--log-level", "-l", help="Override the configured log level."),
  ] = None,
) -> None:
  """Simulate an in-world radio tuned to FREQUENCY."""
  setup = load_setup(config, seed)
  setup_logging(level=log_level or setup.log_level)

  audio = SimulatedAudioOutput(clip_seconds=clip_seconds)
  try:
    engine = RadioEngine.initialize(
      setup.stations,
      FixedClockSource(parse_start(start)),
      audio,
      library=setup.library,
      config=setup.engine,
      rng=np.random.default_rng(seed) if seed is not None else None,
    )
  except ConfigurationError:
    logger.exception("Invalid station roster")
    sys.exit(1)

  outcome = engine.tune(frequency)
  logger.info(f"Tune {frequency}: {outcome.value}")
  logger.info(str(engine.status()))

  total_ticks = int(hours * 3600 / tick)
  report_ticks = max(1, int(report_every * 60 / tick))
  for i in range(1, total_ticks + 1):
    audio.advance(tick)
    engine.tick(tick)
    if i % report_ticks == 0:
      logger.info(str(engine.status()))

  played = audio.played()
  logger.info(f"Simulation complete: {len(played)} clips started")
  for clip in played:
    logger.debug(f"  {clip}")


if __name__ == "__main__":
  typer.run(main)
