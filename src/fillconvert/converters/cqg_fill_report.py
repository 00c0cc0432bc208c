#!/usr/bin/env python3
"""
CQG Fill Report converter.

A fill report sheet looks like:

    Fills reported as of 12/10/25 8:20:27 PM for the following accounts: ac214461 (214461)
    Time | Symbol | B (100) | S (100) | Fill P | ...
    9:30:15 AM | F.US.EPZ25 | 1 | | 6850.25 | ...
    ...
    <blank>
    Disclaimer: ...

and becomes TraderVue rows of Date, Time, Symbol, Quantity, Price, Side.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging
import re
from typing import NamedTuple

from fillconvert import constants as const
from fillconvert import util
from fillconvert.converters.basereportconverter import BaseReportConverter
from fillconvert.errors import AmbiguousSideError, FieldError, FormatError, MissingColumnError
from fillconvert.report_identifier import ReportType


# Module-level logger
logger = logging.getLogger(__name__)

# Rows before the data region: title line, header row
DATA_START = 2

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class HeaderIndices(NamedTuple):
    time_idx: int
    symbol_idx: int
    buy_idx: int
    sell_idx: int
    fill_price_idx: int


def parse_report_date(line: str) -> str:
    """
    Pull the report date out of the title line and return it as MM/DD/YYYY.

    "Fills reported as of 12/10/25 8:20:27 PM ..." -> "12/10/2025"
    """
    parts = line.split()

    try:
        date_str = parts[parts.index(const.DATE_MARKER) + 1]
    except (ValueError, IndexError):
        logger.debug(f"No date found in title line: {line!r}")
        raise FormatError("Could not find date in first line") from None

    date_parts = date_str.split("/")
    if len(date_parts) != 3:
        logger.debug(f"Invalid date format: {date_str}")
        raise FieldError(f"Invalid date format: {date_str}")

    month, day, year = date_parts
    # Two digit years are always 20xx
    if len(year) == 2:
        year = f"20{year}"

    return f"{month}/{day}/{year}"


def parse_header_row(header_row: list[str]) -> HeaderIndices:
    time_idx = None
    symbol_idx = None
    buy_idx = None
    sell_idx = None
    fill_price_idx = None

    for i, col in enumerate(header_row):
        col = col.strip()

        if col == "Time":
            time_idx = i
        elif col == "Symbol":
            symbol_idx = i
        elif col.startswith("B ("):
            buy_idx = i
        elif col.startswith("S ("):
            sell_idx = i
        elif col == "Fill P":
            fill_price_idx = i

    found = [
        ("Time", time_idx),
        ("Symbol", symbol_idx),
        ("B (...)", buy_idx),
        ("S (...)", sell_idx),
        ("Fill P", fill_price_idx),
    ]
    for label, idx in found:
        if idx is None:
            logger.debug(f"Missing required column '{label}'. Found columns: {header_row}")
            raise MissingColumnError(label)

    return HeaderIndices(time_idx, symbol_idx, buy_idx, sell_idx, fill_price_idx)  # type: ignore[arg-type]


def find_data_end_index(rows: list[list[str]]) -> int:
    """
    Index one past the last data row.

    The table is followed by a blank row and then the disclaimer, so the data
    ends one row before the last row starting with "Disclaimer".
    """
    for i in range(len(rows) - 1, -1, -1):
        row = rows[i]
        if row and row[0].strip().startswith(const.DISCLAIMER_MARKER):
            return max(i - 1, 0)
    return len(rows)


def convert_time(time_str: str) -> str:
    """Normalize "9:30:15 AM", "2:05 PM" or "14:22" style times to HH:MM:SS"""
    time_str = time_str.strip()
    parts = time_str.split()

    # Already HH:MM:SS
    if len(parts) == 1 and time_str.count(":") == 2:
        return time_str

    if not parts:
        raise FieldError("Empty time string")

    components = parts[0].split(":")
    if len(components) < 2:
        raise FieldError(f"Invalid time format: {time_str}")

    # int() alone would also take "3_0" and non-ASCII digits
    fields = components[:3]
    if not all(INTEGER_RE.fullmatch(field) for field in fields):
        raise FieldError(f"Invalid time format: {time_str}")

    hour = int(fields[0])
    minute = int(fields[1])
    second = int(fields[2]) if len(fields) == 3 else 0

    if len(parts) > 1:
        meridiem = parts[1].upper()
        if meridiem == "PM" and hour != 12:
            hour += 12
        elif meridiem == "AM" and hour == 12:
            hour = 0

    return f"{hour:02d}:{minute:02d}:{second:02d}"


def _cell(row: list[str], idx: int) -> str:
    return row[idx].strip() if idx < len(row) else ""


def convert_row(row: list[str], date: str, indices: HeaderIndices) -> list[str]:
    time = convert_time(row[indices.time_idx] if indices.time_idx < len(row) else "")
    symbol = _cell(row, indices.symbol_idx)

    buy_qty = _cell(row, indices.buy_idx)
    sell_qty = _cell(row, indices.sell_idx)

    if buy_qty and buy_qty != "0":
        side, quantity = "Buy", buy_qty
    elif sell_qty and sell_qty != "0":
        side, quantity = "Sell", sell_qty
    else:
        raise AmbiguousSideError("Could not determine side: both B and S columns are empty or zero")

    price = _cell(row, indices.fill_price_idx)

    return [date, time, symbol, quantity, price, side]


def normalize(rows: list[list[str]]) -> list[list[str]]:
    """
    Convert a decoded CQG fill report grid into TraderVue rows.

    Args:
        rows: Worksheet grid, title line first and header row second

    Returns:
        Output header followed by one row per fill, in report order

    Raises:
        FormatError: fewer than 2 rows, or no date in the title line
        MissingColumnError: a required header label is absent
        FieldError: a date, time or side could not be interpreted
    """
    if len(rows) < 2:
        logger.debug(f"Report has {len(rows)} rows, expected a date line and a header")
        raise FormatError("File must contain at least 2 rows (date line and header)")

    title = rows[0][0] if rows[0] else ""
    date = parse_report_date(title)
    indices = parse_header_row(rows[1])
    data_end = find_data_end_index(rows)
    logger.debug(f"Report date {date}, columns {indices._asdict()}, data rows {DATA_START}..{data_end}")

    result = [list(const.OUTPUT_HEADER)]
    skipped = 0

    for i in range(DATA_START, data_end):
        row = rows[i]
        if util.is_blank_row(row):
            skipped += 1
            logger.debug(f"Skipping blank row {i + 1}")
            continue

        try:
            result.append(convert_row(row, date, indices))
        except FieldError as e:
            raise type(e)(f"Row {i + 1}: {e}") from e

    logger.info(f"Converted {len(result) - 1} fills, skipped {skipped} blank rows")
    return result


class CQGFillReport(BaseReportConverter):
    def __init__(self, fname: str):
        super().__init__(ReportType.CQG_FILL_REPORT, fname)

    def normalize(self, grid: list[list[str]]) -> list[list[str]]:
        return normalize(grid)
