"""Logging configuration for the airwaves package."""

import coloredlogs

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
  """Install colored console logging on the root logger.

  Call once from the entry point that drives the engine; library modules only
  create their own loggers and never configure handlers.

  Args:
    level: Logging level name (e.g., "INFO", "DEBUG", "WARNING").
  """
  coloredlogs.install(
    level=level.upper(),
    fmt=LOG_FORMAT,
    datefmt="%H:%M:%S",
    field_styles={
      "asctime": {"color": "green"},
      "levelname": {"bold": True},
      "name": {"color": "blue"},
    },
  )
