from typing import Annotated, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

SourceTag = Literal["elm", "mi"]

TIME_PATTERN = r"^\d{1,2}:\d{2}$"
DAY_KEY_PATTERN = r"^(0[1-9]|[12]\d|3[01])$"
MONTH_KEY_PATTERN = r"^(0[1-9]|1[0-2])$"

DayKey = Annotated[str, StringConstraints(pattern=DAY_KEY_PATTERN)]
TimeOfDay = Annotated[str, StringConstraints(pattern=TIME_PATTERN)]


class ElmDayTimes(BaseModel):
    model_config = ConfigDict(frozen=True)

    sunrise: TimeOfDay
    fajr: TimeOfDay
    zuhr: TimeOfDay
    asr_mithl1: TimeOfDay
    asr_mithl2: TimeOfDay
    maghrib: TimeOfDay
    isha: TimeOfDay


# MI publiceert iqamah-tijden: geen sunrise en maar één asr-kolom
class MiDayTimes(BaseModel):
    model_config = ConfigDict(frozen=True)

    fajr: TimeOfDay
    zuhr: TimeOfDay
    asr: TimeOfDay
    maghrib: TimeOfDay
    isha: TimeOfDay


class ElmMonthlyTimetable(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    year: int
    month: str = Field(pattern=MONTH_KEY_PATTERN)
    days: Dict[DayKey, ElmDayTimes] = Field(default_factory=dict)


class MiMonthlyTimetable(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    year: int
    month: str = Field(pattern=MONTH_KEY_PATTERN)
    days: Dict[DayKey, MiDayTimes] = Field(default_factory=dict)


class StoredTimetable(BaseModel):
    """Index entry for a timetable document on disk."""

    source: SourceTag
    year: int
    month: str
    file: str
