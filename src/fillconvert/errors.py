#!/usr/bin/env python3
"""
Conversion error types.

Every failure aborts the whole conversion; the category tells the caller
whether the report layout, its header, or a single field was at fault.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""


class ConversionError(ValueError):
    """Base class for report normalization failures"""


class FormatError(ConversionError):
    """The report does not have the expected overall layout"""


class MissingColumnError(ConversionError):
    """A required column label was not found in the header row"""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f"Could not find '{column}' column")


class FieldError(ConversionError):
    """A single cell could not be interpreted"""


class AmbiguousSideError(FieldError):
    """Neither the buy nor the sell quantity is set on a fill"""


class SpreadsheetError(Exception):
    """The workbook could not be opened or decoded"""
