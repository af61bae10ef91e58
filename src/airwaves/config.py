"""Configuration module for Airwaves."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from airwaves.radio.arbiter import ContentLibrary
from airwaves.radio.engine import EngineConfig
from airwaves.radio.models import ConfigurationError, Station

logger = logging.getLogger(__name__)

__all__ = ["ConfigurationError", "EngineConfig", "RadioConfig", "load_config"]


class RadioConfig(BaseModel):
  """Complete radio setup as loaded from a JSON file.

  Attributes:
    stations: Station roster in dial-scan order.
    library: Global content pools.
    engine: Engine parameters.
    log_level: Logging level for the driver.
  """

  stations: tuple[Station, ...] = Field(..., description="Station roster.")
  library: ContentLibrary = Field(default_factory=ContentLibrary)
  engine: EngineConfig = Field(default_factory=EngineConfig)
  log_level: str = Field("INFO", description="Logging level for the driver.")

  model_config = {"frozen": True}


def load_config(path: Path) -> RadioConfig:
  """Read and validate a radio configuration file.

  Raises:
    ConfigurationError: If the file cannot be read or does not validate.
  """
  try:
    text = path.read_text(encoding="utf-8")
  except OSError as e:
    msg = f"Cannot read radio config {path}: {e}"
    raise ConfigurationError(msg) from e

  try:
    config = RadioConfig.model_validate_json(text)
  except ValidationError as e:
    msg = f"Invalid radio config {path}:\n{e}"
    raise ConfigurationError(msg) from e

  logger.info(f"Loaded {len(config.stations)} stations from {path}")
  return config
