# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    """Parse a timestamp written in local time and convert it to UTC."""
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime, tz="local"))
    return pendulum_date_time.in_tz("UTC")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def iso_str_to_display_str(value: Optional[str]) -> Optional[str]:
    """
    Render a stored ISO 8601 timestamp in local time. Values that do not parse
    as a timestamp are shown unchanged, since the database stores free text.
    """
    if value is None:
        return None
    try:
        parsed = pendulum.parse(value)
    except ValueError:
        return value
    if not isinstance(parsed, pendulum.DateTime):
        return value
    return datetime_to_display_local_datetime_str(parsed)
