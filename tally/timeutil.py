import calendar
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

DEFAULT_TIMEZONE = "America/Sao_Paulo"


def get_zone(timezone: str) -> ZoneInfo:
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone {}, using {}", timezone, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def now_in_timezone(timezone: str = DEFAULT_TIMEZONE) -> datetime:
    return datetime.now(get_zone(timezone))


def today_in_timezone(timezone: str = DEFAULT_TIMEZONE) -> date:
    """The user's calendar day, which can differ from the server's."""
    return now_in_timezone(timezone).date()


def month_bounds(day: date) -> tuple[date, date]:
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def format_day(day: date) -> str:
    return day.strftime("%d/%m/%Y")


def format_period(day: date) -> str:
    return f"{day.month:02d}/{day.year}"
