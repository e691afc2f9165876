"""Temporal value objects.

ONLY temporal normalization - the four date/time shapes accepted by the
date range validator, each able to convert itself to an instant (an aware
UTC datetime) in a reference zone:

- DateOnly: a ``date``, anchored at the start of the day in the zone.
- LocalDateTime: a naive ``datetime``, read as wall time in the zone.
- ZonedDateTime: an aware ``datetime``, already an absolute instant.
- CalendarTimestamp: a ``time.struct_time``; absolute when it carries a UTC
  offset, otherwise read as wall time in the zone.

Ambiguous or skipped wall times resolve to the earliest matching instant
(``fold=0``).

Following maximum separation architecture - one file = one purpose.
"""

import calendar
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from typing import Any

from ..exceptions import UnsupportedTemporalTypeError


class TemporalValue(ABC):
    """A date/time value that can be normalized to an instant."""

    @abstractmethod
    def to_instant(self, zone: tzinfo) -> datetime:
        """Convert to an aware UTC datetime using the reference zone."""

    @staticmethod
    def of(value: Any) -> "TemporalValue":
        """Wrap a raw date/time object in its temporal variant.

        Raises:
            UnsupportedTemporalTypeError: If the object is not a supported type
        """
        # datetime is a subclass of date, so it must be checked first
        if isinstance(value, datetime):
            if value.tzinfo is not None and value.utcoffset() is not None:
                return ZonedDateTime(value)
            return LocalDateTime(value)
        if isinstance(value, date):
            return DateOnly(value)
        if isinstance(value, time.struct_time):
            return CalendarTimestamp(value)
        raise UnsupportedTemporalTypeError(value)


@dataclass(frozen=True)
class DateOnly(TemporalValue):
    value: date

    def to_instant(self, zone: tzinfo) -> datetime:
        start_of_day = datetime(self.value.year, self.value.month, self.value.day, tzinfo=zone)
        return start_of_day.astimezone(timezone.utc)


@dataclass(frozen=True)
class LocalDateTime(TemporalValue):
    value: datetime

    def to_instant(self, zone: tzinfo) -> datetime:
        return self.value.replace(tzinfo=zone, fold=0).astimezone(timezone.utc)


@dataclass(frozen=True)
class ZonedDateTime(TemporalValue):
    value: datetime

    def to_instant(self, zone: tzinfo) -> datetime:
        return self.value.astimezone(timezone.utc)


@dataclass(frozen=True)
class CalendarTimestamp(TemporalValue):
    value: time.struct_time

    def to_instant(self, zone: tzinfo) -> datetime:
        offset = getattr(self.value, "tm_gmtoff", None)
        if offset is not None:
            seconds = calendar.timegm(self.value) - offset
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        wall_time = datetime(*self.value[:6], tzinfo=zone)
        return wall_time.astimezone(timezone.utc)
