"""
Report Format Identifier

Detects which report layout a spreadsheet follows by looking at the title
line, the column labels of the header row, and the trailing disclaimer.

Supported reports:
- CQG Fill Report

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

from fillconvert import constants as const
from fillconvert import spreadsheet


# Module-level logger
logger = logging.getLogger(__name__)


class ReportType(Enum):
    """Enumeration of supported report types"""
    CQG_FILL_REPORT = "cqg-fill-report"
    UNKNOWN = "unknown"


class ReportIdentifier:
    """
    Identifies the report format of a workbook.

    Detection Strategy:
    1. Check the title line for the report's fixed wording
    2. Look for the expected column labels in the second row
    3. Check for the disclaimer block at the end
    4. Apply weighted scoring system for confidence
    """

    CQG_SIGNATURES: dict[str, Any] = {
        "title": const.REPORT_TITLE,
        "exact_headers": ["Time", "Symbol", "Fill P"],
        "prefix_headers": ["B (", "S ("],
        "footer_keyword": const.DISCLAIMER_MARKER,
    }

    # Points out of 100: title 40, each header label 10, disclaimer 10
    THRESHOLD = 0.6

    def __init__(self):
        self.confidence_scores: dict[ReportType, float] = {}

    def identify(self, file_path: str | Path) -> tuple[ReportType, float]:
        """
        Identify the report type of a workbook on disk.

        Returns:
            Tuple of (ReportType, confidence_score) with confidence between 0.0 and 1.0
        """
        logger.debug(f"Analyzing file: {file_path}")
        grid = spreadsheet.read_xlsx(file_path)
        return self.identify_grid(grid)

    def identify_grid(self, grid: list[list[str]]) -> tuple[ReportType, float]:
        if not grid:
            logger.warning("Empty grid, unable to identify report")
            return (ReportType.UNKNOWN, 0.0)

        self.confidence_scores = {ReportType.CQG_FILL_REPORT: self._score_cqg(grid)}

        best_type, best_score = max(self.confidence_scores.items(), key=lambda item: item[1])
        logger.info(f"Identification scores: { {t.value: round(s, 2) for t, s in self.confidence_scores.items()} }")

        if best_score < self.THRESHOLD:
            return (ReportType.UNKNOWN, best_score)
        return (best_type, best_score)

    def _score_cqg(self, grid: list[list[str]]) -> float:
        sig = self.CQG_SIGNATURES
        points = 0

        title = grid[0][0].strip() if grid[0] else ""
        if title.startswith(sig["title"]):
            points += 40

        if len(grid) > 1:
            labels = [cell.strip() for cell in grid[1]]
            for header in sig["exact_headers"]:
                if header in labels:
                    points += 10
            for prefix in sig["prefix_headers"]:
                if any(label.startswith(prefix) for label in labels):
                    points += 10

        if any(row and row[0].strip().startswith(sig["footer_keyword"]) for row in grid):
            points += 10

        return points / 100
