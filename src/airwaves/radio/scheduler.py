"""Schedule resolution: which program is on air right now."""

import logging

from airwaves.radio.clock import Clock
from airwaves.radio.models import ProgramSlot, Schedule, Station, Weekday

logger = logging.getLogger(__name__)


def find_slot(schedule: Schedule, day: Weekday, hour: float) -> ProgramSlot | None:
  """First slot of `day` covering `hour`, in list order.

  Slots are scanned in the order they appear in the schedule, so when two
  slots overlap the earlier one always wins.
  """
  entry = schedule.for_day(day)
  if entry is None:
    return None
  return next((slot for slot in entry.slots if slot.covers(hour)), None)


class ProgramScheduler:
  """Owns the active program slot of the tuned station.

  If the station has no schedule entry for the current weekday, the previous
  program stays active; it is only replaced by a matching slot or cleared by
  `reset()`.
  """

  def __init__(self) -> None:
    self.active: ProgramSlot | None = None

  def reset(self) -> None:
    self.active = None

  def update(self, station: Station, clock: Clock) -> bool:
    """Re-resolve the program for `clock`.

    Returns:
      True if a different slot became active and content should restart.
    """
    if station.schedule.for_day(clock.weekday) is None:
      return False

    slot = find_slot(station.schedule, clock.weekday, clock.time_of_day)
    if slot is None or slot is self.active:
      return False

    self.active = slot
    logger.info(
      f"{station.name}: now on air {slot.name!r} ({slot.type.value}, "
      f"{slot.start_hour:g}h for {slot.duration:g}h)"
    )
    return True
