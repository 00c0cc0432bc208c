#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging
import os
from pathlib import Path

from fillconvert import spreadsheet
from fillconvert.report_identifier import ReportType


# Module-level logger
logger = logging.getLogger(__name__)


class BaseReportConverter:

    def __init__(self, report_type: ReportType, fname: str):
        self.report_type = report_type
        self.file_path = fname
        self.debug = False

    def set_debug(self, debug: bool):
        self.debug = debug

    def read_grid(self) -> list[list[str]]:
        return spreadsheet.read_xlsx(self.file_path)

    def normalize(self, grid: list[list[str]]) -> list[list[str]]:
        raise NotImplementedError("Subclasses should implement this method")

    def process(self) -> list[list[str]]:
        basename = os.path.basename(self.file_path)
        basename, _ = os.path.splitext(basename)

        logger.info(f"Processing {self.report_type.value} file: {self.file_path}")

        grid = self.read_grid()
        logger.debug(f"Loaded {len(grid)} rows")
        if self.debug:
            spreadsheet.dump_grid(f"{basename}_load.csv", grid)

        rows = self.normalize(grid)
        return rows

    def write(self, rows: list[list[str]], output: str | Path) -> None:
        spreadsheet.write_csv(output, rows)
