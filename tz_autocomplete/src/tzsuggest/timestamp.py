"""
Compose a point in time from structured command arguments.

Each of year/month/day/hour/minute/secs overrides the matching field of the
current wall-clock time in the selected timezone (UTC unless a `timezone`
option is given). The result is a Unix timestamp in whole seconds.
"""
from __future__ import annotations
import logging
from datetime import datetime, tzinfo
from typing import Dict, Iterable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import DEFAULT_TIMEZONE
from .errors import Fatal, InvalidArgs, UnknownTimezone
from .models import CommandOption

log = logging.getLogger(__name__)

# option name -> datetime field
FIELDS: Dict[str, str] = {
    "year": "year",
    "month": "month",
    "day": "day",
    "hour": "hour",
    "minute": "minute",
    "secs": "second",
}


def resolve_timezone(name: object) -> tzinfo:
    if not isinstance(name, str):
        log.error("Non-string command option value encountered for timezone.")
        raise Fatal()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as err:
        log.error("Failed to set timezone: %s.", err)
        raise UnknownTimezone() from err


def _is_unambiguous(naive: datetime, tz: tzinfo) -> bool:
    # Both folds agree unless the wall time is repeated (fall back) or skipped (spring forward)
    return naive.replace(tzinfo=tz, fold=0).utcoffset() == naive.replace(tzinfo=tz, fold=1).utcoffset()


def compose_datetime(options: Iterable[CommandOption], now: Optional[datetime] = None) -> datetime:
    tz: tzinfo = ZoneInfo(DEFAULT_TIMEZONE)
    fields: Dict[str, int] = {}

    for opt in options:
        log.info("Received argument %s as %r.", opt.name, opt.value)
        if opt.name == "timezone":
            tz = resolve_timezone(opt.value)
            continue
        field = FIELDS.get(opt.name)
        if field is None:
            log.error("Unable to parse command name %s.", opt.name)
            raise InvalidArgs()
        if not isinstance(opt.value, int) or isinstance(opt.value, bool):
            log.error("Incorrect command option value received.")
            raise Fatal()
        fields[field] = opt.value

    current = (now or datetime.now(tz)).astimezone(tz)
    try:
        naive = current.replace(tzinfo=None, microsecond=0, fold=0).replace(**fields)
    except (ValueError, OverflowError) as err:
        log.error("Failed to set %r to parser: %s.", fields, err)
        raise InvalidArgs() from err

    if not _is_unambiguous(naive, tz):
        log.error("Failed to create date-time: %s is ambiguous or skipped in %s.", naive, tz)
        raise InvalidArgs("That local time is ambiguous or does not exist in the selected timezone.")
    return naive.replace(tzinfo=tz)


def compose_timestamp(options: Iterable[CommandOption], now: Optional[datetime] = None) -> int:
    return int(compose_datetime(options, now).timestamp())
