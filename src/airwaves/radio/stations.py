"""Pre-configured station rosters.

Each roster is a tuple of Station objects in dial-scan order, ready to pass to
`RadioEngine.initialize`. Content handles are symbolic clip identifiers of the
form "<station>/<category>/<nn>"; the host's audio backend maps them to assets.

Typical Usage:
  ```python
  from airwaves.radio import stations
  from airwaves.radio.clock import SystemClockSource
  from airwaves.radio.engine import RadioEngine

  engine = RadioEngine.initialize(
    stations.NAIROBI,
    SystemClockSource(),
    audio,
    library=stations.NAIROBI_LIBRARY,
  )
  engine.tune(100.3)  # Kiss FM
  ```
"""

from collections.abc import Iterable

from airwaves.radio.arbiter import ContentLibrary
from airwaves.radio.models import (
  ContentCategory,
  ContentHandle,
  DaySchedule,
  Language,
  ProgramSlot,
  ProgramType,
  Schedule,
  Station,
  Weekday,
)

WEEKDAYS = (
  Weekday.MONDAY,
  Weekday.TUESDAY,
  Weekday.WEDNESDAY,
  Weekday.THURSDAY,
  Weekday.FRIDAY,
)


def clips(prefix: str, count: int) -> tuple[ContentHandle, ...]:
  """Symbolic handles "<prefix>/01" .. "<prefix>/<count>"."""
  return tuple(f"{prefix}/{i:02d}" for i in range(1, count + 1))


def station_pools(
  slug: str, music: int = 12, jingles: int = 3, news: int = 2, ads: int = 4
) -> dict[ContentCategory, tuple[ContentHandle, ...]]:
  """Placeholder content pools for a station."""
  return {
    ContentCategory.MUSIC: clips(f"{slug}/music", music),
    ContentCategory.JINGLES: clips(f"{slug}/jingles", jingles),
    ContentCategory.NEWS: clips(f"{slug}/news", news),
    ContentCategory.ADS: clips(f"{slug}/ads", ads),
    ContentCategory.PRESENTERS: clips(f"{slug}/presenters", 2),
  }


def weekly(
  weekday_slots: Iterable[ProgramSlot],
  saturday: Iterable[ProgramSlot],
  sunday: Iterable[ProgramSlot],
) -> Schedule:
  """Schedule repeating the same lineup Monday to Friday."""
  weekday_slots = tuple(weekday_slots)
  return Schedule(
    days=(
      *(DaySchedule(day=day, slots=weekday_slots) for day in WEEKDAYS),
      DaySchedule(day=Weekday.SATURDAY, slots=tuple(saturday)),
      DaySchedule(day=Weekday.SUNDAY, slots=tuple(sunday)),
    )
  )


def classic_105() -> Station:
  """Classic 105: English/Swahili classic hits with a talk breakfast show."""
  slug = "classic_105"
  lang = Language.ENGLISH
  return Station(
    name="Classic 105",
    frequency=105.2,
    pools=station_pools(slug),
    languages=(Language.ENGLISH, Language.SWAHILI),
    presenter_names=("Baraka Otieno", "Wanjiru Kamau"),
    schedule=weekly(
      [
        ProgramSlot(name="Overnight Classics", start_hour=0, duration=6),
        ProgramSlot(
          name="Classic Breakfast",
          start_hour=6,
          duration=4,
          type=ProgramType.TALK_SHOW,
          language=Language.MIXED,
          specific_content=clips(f"{slug}/breakfast", 3),
        ),
        ProgramSlot(name="Midday Hits", start_hour=10, duration=3, language=lang),
        ProgramSlot(
          name="Lunchtime News",
          start_hour=13,
          duration=1,
          type=ProgramType.NEWS,
          language=lang,
        ),
        ProgramSlot(name="Afternoon Drive", start_hour=14, duration=3),
        ProgramSlot(
          name="Jam Watch",
          start_hour=17,
          duration=2,
          type=ProgramType.TRAFFIC,
          language=Language.SWAHILI,
        ),
        ProgramSlot(name="Evening Classics", start_hour=19, duration=5),
      ],
      saturday=[
        ProgramSlot(name="Weekend Classics", start_hour=0, duration=14),
        ProgramSlot(
          name="Saturday Sports",
          start_hour=14,
          duration=4,
          type=ProgramType.SPORTS,
        ),
        ProgramSlot(name="Saturday Night Classics", start_hour=18, duration=6),
      ],
      sunday=[
        ProgramSlot(
          name="Sunday Praise",
          start_hour=6,
          duration=4,
          type=ProgramType.RELIGIOUS,
          specific_content=clips(f"{slug}/praise", 2),
        ),
        ProgramSlot(name="Sunday Classics", start_hour=10, duration=14),
      ],
    ),
  )


def kiss_fm() -> Station:
  """Kiss FM: contemporary hits in English and Sheng."""
  slug = "kiss_fm"
  return Station(
    name="Kiss FM",
    frequency=100.3,
    pools=station_pools(slug, music=20),
    languages=(Language.ENGLISH, Language.SHENG),
    presenter_names=("DJ Shiko", "Kevo Mbugua"),
    schedule=weekly(
      [
        ProgramSlot(name="Kiss Overnight", start_hour=0, duration=6),
        ProgramSlot(
          name="Kiss Breakfast",
          start_hour=6,
          duration=4,
          type=ProgramType.TALK_SHOW,
          language=Language.SHENG,
          specific_content=clips(f"{slug}/breakfast", 2),
        ),
        ProgramSlot(name="Kiss Midday", start_hour=10, duration=6),
        ProgramSlot(
          name="Kiss Traffic",
          start_hour=16,
          duration=3,
          type=ProgramType.TRAFFIC,
          language=Language.SHENG,
        ),
        ProgramSlot(
          name="Weather Check",
          start_hour=19,
          duration=0.5,
          type=ProgramType.WEATHER,
        ),
        ProgramSlot(name="Kiss Nights", start_hour=19.5, duration=4.5),
      ],
      saturday=[ProgramSlot(name="Kiss Weekend", start_hour=0, duration=24)],
      sunday=[ProgramSlot(name="Kiss Sunday Chill", start_hour=0, duration=24)],
    ),
  )


def jambo_fm() -> Station:
  """Jambo FM: Swahili and Sheng talk and music."""
  slug = "jambo_fm"
  lang = Language.SWAHILI
  return Station(
    name="Jambo FM",
    frequency=97.5,
    pools=station_pools(slug),
    languages=(Language.SWAHILI, Language.SHENG),
    presenter_names=("Mzee Jambo",),
    schedule=weekly(
      [
        ProgramSlot(name="Usiku Mwema", start_hour=0, duration=5, language=lang),
        ProgramSlot(
          name="Habari za Asubuhi",
          start_hour=5,
          duration=1,
          type=ProgramType.NEWS,
          language=lang,
        ),
        ProgramSlot(
          name="Jambo Asubuhi",
          start_hour=6,
          duration=4,
          type=ProgramType.TALK_SHOW,
          language=lang,
          specific_content=clips(f"{slug}/asubuhi", 2),
        ),
        ProgramSlot(name="Muziki Mchana", start_hour=10, duration=9, language=lang),
        ProgramSlot(
          name="Habari Jioni",
          start_hour=19,
          duration=1,
          type=ProgramType.NEWS,
          language=lang,
        ),
        ProgramSlot(name="Jioni Tamu", start_hour=20, duration=4, language=lang),
      ],
      saturday=[
        ProgramSlot(
          name="Michezo Jumamosi",
          start_hour=12,
          duration=6,
          type=ProgramType.SPORTS,
          language=lang,
        ),
      ],
      sunday=[
        ProgramSlot(
          name="Ibada ya Jumapili",
          start_hour=6,
          duration=5,
          type=ProgramType.RELIGIOUS,
          language=lang,
        ),
      ],
    ),
  )


def nation_fm() -> Station:
  """Nation FM: news-led station with bulletins and weather."""
  slug = "nation_fm"
  return Station(
    name="Nation FM",
    frequency=96.3,
    pools=station_pools(slug, music=8, news=6),
    languages=(Language.ENGLISH, Language.SWAHILI),
    schedule=weekly(
      [
        ProgramSlot(name="Night Mix", start_hour=0, duration=6),
        ProgramSlot(
          name="Morning Bulletin",
          start_hour=6,
          duration=2,
          type=ProgramType.NEWS,
          specific_content=clips(f"{slug}/headlines", 1),
        ),
        ProgramSlot(
          name="Weather Desk",
          start_hour=8,
          duration=1,
          type=ProgramType.WEATHER,
        ),
        ProgramSlot(
          name="Nation Talk",
          start_hour=9,
          duration=4,
          type=ProgramType.TALK_SHOW,
        ),
        ProgramSlot(
          name="Midday Bulletin",
          start_hour=13,
          duration=1,
          type=ProgramType.NEWS,
        ),
        ProgramSlot(name="Afternoon Mix", start_hour=14, duration=4),
        ProgramSlot(
          name="Evening Traffic",
          start_hour=18,
          duration=1,
          type=ProgramType.TRAFFIC,
        ),
        ProgramSlot(
          name="Prime Time News",
          start_hour=19,
          duration=2,
          type=ProgramType.NEWS,
        ),
        ProgramSlot(name="Late Mix", start_hour=21, duration=3),
      ],
      saturday=[ProgramSlot(name="Weekend Mix", start_hour=0, duration=24)],
      sunday=[ProgramSlot(name="Weekend Mix", start_hour=0, duration=24)],
    ),
  )


def nairobi() -> tuple[Station, ...]:
  """The Nairobi FM dial: Classic 105, Kiss FM, Jambo FM and Nation FM."""
  return (classic_105(), kiss_fm(), jambo_fm(), nation_fm())


NAIROBI: tuple[Station, ...] = nairobi()

NAIROBI_LIBRARY = ContentLibrary(
  news_headlines=clips("shared/news", 6),
  traffic_updates=clips("shared/traffic", 4),
  weather_reports=clips("shared/weather", 3),
  static_noise=("shared/static/hiss",),
  tuning_sound="shared/fx/tuning",
)
