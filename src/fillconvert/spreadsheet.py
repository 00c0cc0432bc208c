#!/usr/bin/env python3
"""
Spreadsheet input and CSV output.

Reports arrive as .xlsx workbooks and are flattened into a grid of strings
(one list per row) before any report-specific parsing happens. Converted
grids go back out as CSV.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging
import os
import zipfile
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any

import openpyxl
import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from fillconvert.errors import SpreadsheetError


# Module-level logger
logger = logging.getLogger(__name__)

Grid = list[list[str]]

TIME_FORMAT = "%H:%M:%S"


def _round_to_second(dt: datetime) -> datetime:
    # Excel stores times as day fractions, so 09:30:15 can come back as 09:30:14.999999
    if dt.microsecond >= 500_000:
        dt = dt + timedelta(seconds=1)
    return dt.replace(microsecond=0)


def cell_to_string(value: Any) -> str:
    """Render one worksheet value the way the report converters expect it."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return _round_to_second(value).strftime(TIME_FORMAT)
    if isinstance(value, time):
        return _round_to_second(datetime.combine(date.min, value)).strftime(TIME_FORMAT)
    if isinstance(value, date):
        return "00:00:00"
    if isinstance(value, timedelta):
        total = int(round(value.total_seconds()))
        hours, rem = divmod(total, 3600)
        minutes, seconds = divmod(rem, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def read_xlsx(path: str | Path) -> Grid:
    """
    Read the first worksheet of an .xlsx workbook into a grid of strings.

    Args:
        path: Workbook location

    Returns:
        List of rows, each padded to the width of the widest row

    Raises:
        FileNotFoundError: path does not exist
        SpreadsheetError: the workbook has no worksheets or cannot be decoded
    """
    if not os.path.exists(path):
        logger.debug(f"File not found: {path}")
        raise FileNotFoundError(f"File not found: {path}")

    logger.debug(f"Opening workbook: {path}")
    try:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, ValueError) as e:
        logger.debug(f"Unable to open workbook {path}: {e}")
        raise SpreadsheetError(f"Unable to read workbook {path}: {e}") from e

    try:
        if not wb.worksheets:
            raise SpreadsheetError("No worksheets found")

        ws = wb.worksheets[0]
        # Generated workbooks often carry a stale dimension record
        ws.reset_dimensions()

        rows = [[cell_to_string(value) for value in row] for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    width = max((len(row) for row in rows), default=0)
    for row in rows:
        if len(row) < width:
            row.extend([""] * (width - len(row)))

    logger.info(f"Read {len(rows)} rows x {width} columns from sheet '{ws.title}'")
    return rows


def write_csv(path: str | Path, rows: Grid) -> None:
    """
    Write a grid to CSV. The first row is the header.

    Args:
        path: Destination file, overwritten if present
        rows: Header row followed by data rows
    """
    if not rows:
        logger.warning(f"No rows to write, creating empty file {path}")
        Path(path).write_text("", encoding="utf-8")
        return

    df = pd.DataFrame(rows[1:], columns=rows[0])
    df.to_csv(path, index=False, lineterminator="\n", encoding="utf-8")
    logger.info(f"Wrote {len(df)} rows to {path}")


def dump_grid(path: str | Path, rows: Grid) -> None:
    """Write a raw grid without treating any row as a header (debug output)"""
    pd.DataFrame(rows).to_csv(path, index=False, header=False, lineterminator="\n", encoding="utf-8")
