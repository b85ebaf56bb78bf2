"""
Time helpers bound to the configured reference time zone.

Weekday slots and end-of-day boundaries are computed in
settings.menu_timezone; values handed to the database are UTC.
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from lunch_shared.config.settings import settings


def reference_tz() -> ZoneInfo:
    return ZoneInfo(settings.menu_timezone)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def localize(moment: datetime) -> datetime:
    """Express a moment in the reference zone. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(reference_tz())


def to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def local_date(moment: datetime) -> date:
    return localize(moment).date()


def start_of_day(day: date) -> datetime:
    """First instant of a local calendar day, in UTC."""
    return datetime.combine(day, time.min, tzinfo=reference_tz()).astimezone(timezone.utc)


def end_of_day(day: date) -> datetime:
    """Last instant of a local calendar day, in UTC (inclusive bound)."""
    next_day = start_of_day(day + timedelta(days=1))
    return next_day - timedelta(microseconds=1)


def week_of(day: date) -> list[date]:
    """Monday through Sunday of the ISO week containing day."""
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]
