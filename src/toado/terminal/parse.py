# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional

import pendulum
import typer

from toado.query.condition import (
    Between,
    Condition,
    Equal,
    GreaterOrEqual,
    GreaterThan,
    In,
    LessOrEqual,
    LessThan,
    Like,
    NotEqual,
)
from toado.query.order import ALL_ROWS, Limit, OrderDir, RowLimit
from toado.query.update_action import NULL, UpdateAction, from_optional
from toado.time import datetime_from_str_utc, datetime_to_iso_str, now_utc

DATETIME_HELP = (
    "valid inputs: YYYY-MM-DD [HH:mm], HH:mm, now, today, yesterday, tomorrow, "
    "or day offset like 1, -1"
)


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[str]:
    """Parse a command line timestamp into the ISO 8601 UTC text stored in the database."""
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_to_iso_str(datetime_from_str_utc(datetime))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # (H)H:mm today
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))
        if hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return datetime_to_iso_str(pendulum_date_time.in_tz("UTC"))

    if re.match(r"^-?\d+$", datetime):
        pendulum_date_time = pendulum.today("local").add(days=int(datetime))
        return datetime_to_iso_str(pendulum_date_time.in_tz("UTC"))

    match datetime:
        case "now" | "n":
            return datetime_to_iso_str(now_utc())
        case "today" | "t":
            return datetime_to_iso_str(pendulum.today("local").in_tz("UTC"))
        case "yesterday" | "y":
            return datetime_to_iso_str(pendulum.yesterday("local").in_tz("UTC"))
        case "tomorrow" | "o":
            return datetime_to_iso_str(pendulum.tomorrow("local").in_tz("UTC"))
    raise typer.BadParameter("Incorrect datetime format")


def parse_term_list(term_param: str) -> list[str]:
    """
    Split a comma separated list of search terms. Id ranges such as `3-5` are
    expanded into one term per id.

    Examples:
        "groceries" -> ["groceries"]
        "1,3-5,dishes" -> ["1", "3", "4", "5", "dishes"]
    """
    terms: list[str] = []
    for term in (s.strip() for s in term_param.split(",")):
        if not term:
            continue

        range_match = re.match(r"^(\d+)-(\d+)$", term)
        if range_match:
            start = int(range_match.group(1))
            end = int(range_match.group(2))
            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{term}' (start must not exceed end)"
                )
            terms += [str(i) for i in range(start, end + 1)]
        else:
            terms.append(term)

    if len(terms) == 0:
        raise typer.BadParameter("At least one search term is required")
    return terms


_WHERE_P = re.compile(
    r"^\s*(?P<col>[A-Za-z_][A-Za-z0-9_]*)\s*"
    r"(?P<op>!=|>=|<=|=|>|<|\blike\b|\bin\b|\bbetween\b)\s*"
    r"(?P<value>.+?)\s*$",
    re.IGNORECASE,
)


def parse_condition(where_param: str) -> Condition:
    """
    Parse a `COLUMN OPERATOR VALUE` filter, e.g. `priority >= 3`,
    `name like %milk%`, `id in 1,2,3` or `priority between 1 and 5`.
    """
    where_match = _WHERE_P.match(where_param)
    if where_match is None:
        raise typer.BadParameter(f"Invalid filter: '{where_param}'")

    col = where_match.group("col")
    value = where_match.group("value")
    match where_match.group("op").lower():
        case "=":
            return Equal(col, __parse_value(value))
        case "!=":
            return NotEqual(col, __parse_value(value))
        case ">":
            return GreaterThan(col, __parse_value(value))
        case "<":
            return LessThan(col, __parse_value(value))
        case ">=":
            return GreaterOrEqual(col, __parse_value(value))
        case "<=":
            return LessOrEqual(col, __parse_value(value))
        case "like":
            return Like(col, __parse_value(value))
        case "in":
            return In(col, [__parse_value(v) for v in value.split(",")])
        case "between":
            bounds = re.split(r"\s+and\s+", value, flags=re.IGNORECASE)
            if len(bounds) != 2:
                raise typer.BadParameter(
                    f"Invalid filter: '{where_param}' (expected 'between LOW and HIGH')"
                )
            return Between(col, __parse_value(bounds[0]), __parse_value(bounds[1]))
    raise typer.BadParameter(f"Invalid filter: '{where_param}'")


def parse_conditions(where_params: Optional[list[str]]) -> Optional[Condition]:
    """Combine every filter with AND. No filters means no condition."""
    if not where_params:
        return None
    condition: Condition = parse_condition(where_params[0])
    for where_param in where_params[1:]:
        condition = condition.and_(parse_condition(where_param))
    return condition


def update_action(value: Optional[Any], clear: bool, option_name: str) -> UpdateAction:
    """Map an update option and its matching --clear flag to a column action."""
    if clear and value is not None:
        raise typer.BadParameter(
            f"--{option_name} and --clear-{option_name} cannot be used together"
        )
    if clear:
        return NULL
    return from_optional(value)


def __parse_value(value: str) -> Any:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    if re.match(r"^-?\d+$", value):
        return int(value)
    return value


def parse_order_dir(ascending: Optional[bool]) -> Optional[OrderDir]:
    if ascending is None:
        return None
    return OrderDir.ASC if ascending else OrderDir.DESC


def parse_row_limit(limit: Optional[int], full: bool) -> Optional[RowLimit]:
    if full and limit is not None:
        raise typer.BadParameter("--full and --limit cannot be used together")
    if full:
        return ALL_ROWS
    if limit is None:
        return None
    return Limit(limit)
