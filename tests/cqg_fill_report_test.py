#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import sys
import os
# Add src and tests to path for imports (needed when running test file directly)
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import unittest

from fillconvert.converters.cqg_fill_report import (
    CQGFillReport, HeaderIndices, convert_row, convert_time, find_data_end_index,
    normalize, parse_header_row, parse_report_date
)
from fillconvert.errors import AmbiguousSideError, ConversionError, FieldError, FormatError, MissingColumnError
from report_factory import DISCLAIMER, HEADER, TITLE, fill, pad, sample_grid


class TestParseReportDate(unittest.TestCase):
    def test_two_digit_year(self):
        self.assertEqual(parse_report_date(TITLE), "12/10/2025")

    def test_four_digit_year_unchanged(self):
        self.assertEqual(parse_report_date("Fills reported as of 1/5/2025 9:00:00 AM"), "1/5/2025")

    def test_month_and_day_not_padded(self):
        self.assertEqual(parse_report_date("as of 3/7/24"), "3/7/2024")

    def test_missing_of(self):
        with self.assertRaises(FormatError):
            parse_report_date("Fills reported 12/10/25 8:20:27 PM")

    def test_of_is_last_token(self):
        with self.assertRaises(FormatError):
            parse_report_date("Fills reported as of")

    def test_of_must_be_whole_token(self):
        with self.assertRaises(FormatError):
            parse_report_date("Fills reported as-of 12/10/25")

    def test_bad_date_token(self):
        with self.assertRaises(FieldError) as ctx:
            parse_report_date("Fills reported as of 12-10-25 8:20:27 PM")
        self.assertIn("12-10-25", str(ctx.exception))

    def test_too_many_date_parts(self):
        with self.assertRaises(FieldError):
            parse_report_date("as of 12/10/25/01")


class TestParseHeaderRow(unittest.TestCase):
    def test_resolves_all_columns(self):
        indices = parse_header_row(["Time", "Symbol", "B (100)", "S (100)", "Fill P"])
        self.assertEqual(indices, HeaderIndices(0, 1, 2, 3, 4))

    def test_labels_are_trimmed(self):
        indices = parse_header_row(["  Fill P ", " Time", "Symbol  ", "S (7)", "B (7)"])
        self.assertEqual(indices.time_idx, 1)
        self.assertEqual(indices.symbol_idx, 2)
        self.assertEqual(indices.buy_idx, 4)
        self.assertEqual(indices.sell_idx, 3)
        self.assertEqual(indices.fill_price_idx, 0)

    def test_buy_sell_match_by_prefix(self):
        indices = parse_header_row(["Time", "Symbol", "B (account 214461)", "S (account 214461)", "Fill P"])
        self.assertEqual(indices.buy_idx, 2)
        self.assertEqual(indices.sell_idx, 3)

    def test_missing_fill_price(self):
        with self.assertRaises(MissingColumnError) as ctx:
            parse_header_row(["Time", "Symbol", "B (100)", "S (100)"])
        self.assertEqual(ctx.exception.column, "Fill P")
        self.assertIn("Fill P", str(ctx.exception))

    def test_missing_each_column(self):
        full = ["Time", "Symbol", "B (100)", "S (100)", "Fill P"]
        expected = ["Time", "Symbol", "B (...)", "S (...)", "Fill P"]
        for i, label in enumerate(expected):
            header = full[:i] + full[i + 1:]
            with self.subTest(label=label):
                with self.assertRaises(MissingColumnError) as ctx:
                    parse_header_row(header)
                self.assertEqual(ctx.exception.column, label)

    def test_exact_match_required(self):
        with self.assertRaises(MissingColumnError) as ctx:
            parse_header_row(["Time", "Symbols", "B (100)", "S (100)", "Fill Price"])
        self.assertEqual(ctx.exception.column, "Symbol")

    def test_indices_are_immutable(self):
        indices = parse_header_row(["Time", "Symbol", "B (100)", "S (100)", "Fill P"])
        with self.assertRaises(AttributeError):
            indices.time_idx = 3


class TestFindDataEndIndex(unittest.TestCase):
    def test_stops_before_separator(self):
        grid = sample_grid()
        # title, header, 3 fills, blank, disclaimer -> disclaimer at 6
        self.assertEqual(find_data_end_index(grid), 5)

    def test_no_disclaimer(self):
        grid = sample_grid(disclaimer=False)
        self.assertEqual(find_data_end_index(grid), len(grid))

    def test_uses_last_disclaimer(self):
        grid = sample_grid()
        grid.append(pad([]))
        grid.append(pad(["Disclaimer (continued)"]))
        self.assertEqual(find_data_end_index(grid), len(grid) - 2)

    def test_disclaimer_at_top_saturates(self):
        self.assertEqual(find_data_end_index([["Disclaimer"]]), 0)

    def test_empty_rows_are_ignored(self):
        self.assertEqual(find_data_end_index([[], ["x"], []]), 3)

    def test_disclaimer_cell_is_trimmed(self):
        grid = sample_grid(disclaimer=False)
        grid.append(pad([]))
        grid.append(pad(["   Disclaimer: fills are unofficial"]))
        self.assertEqual(find_data_end_index(grid), len(grid) - 2)
        self.assertEqual(len(normalize(grid)), 4)


class TestConvertTime(unittest.TestCase):
    def test_am(self):
        self.assertEqual(convert_time("9:30:15 AM"), "09:30:15")

    def test_midnight_hour(self):
        self.assertEqual(convert_time("12:05:00 AM"), "00:05:00")

    def test_noon_hour(self):
        self.assertEqual(convert_time("12:30:00 PM"), "12:30:00")

    def test_pm(self):
        self.assertEqual(convert_time("2:05:09 PM"), "14:05:09")

    def test_lowercase_meridiem(self):
        self.assertEqual(convert_time("1:00:00 pm"), "13:00:00")

    def test_already_formatted(self):
        self.assertEqual(convert_time("14:22:10"), "14:22:10")

    def test_already_formatted_passes_through_verbatim(self):
        self.assertEqual(convert_time(" 9:05:00 "), "9:05:00")

    def test_seconds_default_to_zero(self):
        self.assertEqual(convert_time("9:30"), "09:30:00")
        self.assertEqual(convert_time("9:30 PM"), "21:30:00")

    def test_unknown_meridiem_ignored(self):
        self.assertEqual(convert_time("9:30 CET"), "09:30:00")

    def test_empty(self):
        with self.assertRaises(FieldError):
            convert_time("   ")

    def test_no_minutes(self):
        with self.assertRaises(FieldError):
            convert_time("930 AM")

    def test_not_a_number(self):
        with self.assertRaises(FieldError):
            convert_time("nine:30 AM")

    def test_only_plain_ascii_digits(self):
        for value in ("9:3_0 AM", "1_0:30 PM", "\u0669:30 AM", "9:1_5:30 PM", "9: 30"):
            with self.subTest(value=value):
                with self.assertRaises(FieldError):
                    convert_time(value)

    def test_signed_components_accepted(self):
        self.assertEqual(convert_time("+9:30 AM"), "09:30:00")


class TestConvertRow(unittest.TestCase):
    def setUp(self):
        self.indices = parse_header_row(HEADER)

    def test_buy(self):
        row = fill("9:30:15 AM", buy=" 1 ", price=" 6850.25 ", symbol=" F.US.EPZ25 ")
        self.assertEqual(convert_row(row, "12/10/2025", self.indices),
                         ["12/10/2025", "09:30:15", "F.US.EPZ25", "1", "6850.25", "Buy"])

    def test_sell_when_buy_is_zero(self):
        row = fill("9:30:15 AM", buy="0", sell="50")
        result = convert_row(row, "12/10/2025", self.indices)
        self.assertEqual(result[3], "50")
        self.assertEqual(result[5], "Sell")

    def test_buy_wins_when_both_set(self):
        row = fill("9:30:15 AM", buy="2", sell="3")
        self.assertEqual(convert_row(row, "d", self.indices)[5], "Buy")

    def test_both_zero(self):
        with self.assertRaises(AmbiguousSideError):
            convert_row(fill("9:30:15 AM", buy="0", sell=""), "d", self.indices)

    def test_both_empty(self):
        with self.assertRaises(AmbiguousSideError):
            convert_row(fill("9:30:15 AM"), "d", self.indices)

    def test_short_row_treats_missing_cells_as_empty(self):
        row = ["10:00:00", "214461", "F.US.EPZ25", "4"]
        self.assertEqual(convert_row(row, "d", self.indices),
                         ["d", "10:00:00", "F.US.EPZ25", "4", "", "Buy"])

    def test_price_not_validated(self):
        row = fill("10:00:00", buy="1", price="n/a")
        self.assertEqual(convert_row(row, "d", self.indices)[4], "n/a")


class TestNormalize(unittest.TestCase):
    def test_full_report(self):
        rows = normalize(sample_grid())
        self.assertEqual(rows, [
            ["Date", "Time", "Symbol", "Quantity", "Price", "Side"],
            ["12/10/2025", "09:30:15", "F.US.EPZ25", "1", "6850.25", "Buy"],
            ["12/10/2025", "00:05:00", "F.US.EPZ25", "2", "6851", "Sell"],
            ["12/10/2025", "14:22:10", "F.US.ENQZ25", "3", "21500.5", "Buy"],
        ])

    def test_too_few_rows(self):
        for grid in ([], [pad([TITLE])]):
            with self.subTest(rows=len(grid)):
                with self.assertRaises(FormatError):
                    normalize(grid)

    def test_header_only(self):
        rows = normalize([pad([TITLE]), list(HEADER)])
        self.assertEqual(rows, [["Date", "Time", "Symbol", "Quantity", "Price", "Side"]])

    def test_empty_title_row(self):
        with self.assertRaises(FormatError):
            normalize([[], list(HEADER)])

    def test_blank_rows_skipped(self):
        fills = [
            fill("9:30:15 AM", buy="1"),
            pad([]),
            ["  ", "", " ", "", "", ""],
            [],
            fill("9:31:00 AM", sell="1"),
        ]
        rows = normalize(sample_grid(fills))
        # Output count equals data region rows minus the blank ones
        self.assertEqual(len(rows) - 1, len(fills) - 3)
        self.assertEqual([r[5] for r in rows[1:]], ["Buy", "Sell"])

    def test_row_before_disclaimer_is_excluded(self):
        grid = [pad([TITLE]), list(HEADER),
                fill("9:30:15 AM", buy="1"),
                fill("9:31:00 AM", sell="1"),
                pad([DISCLAIMER]),
                fill("9:32:00 AM", buy="9")]
        rows = normalize(grid)
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][1], "09:30:15")

    def test_disclaimer_right_after_header(self):
        grid = [pad([TITLE]), list(HEADER), pad([DISCLAIMER]), fill("bad", buy="1")]
        self.assertEqual(len(normalize(grid)), 1)

    def test_without_disclaimer_all_rows_converted(self):
        rows = normalize(sample_grid(disclaimer=False))
        self.assertEqual(len(rows), 4)

    def test_missing_column_aborts(self):
        grid = sample_grid()
        grid[1] = ["Time", "Account", "Symbol", "B (100)", "S (100)", "Price"]
        with self.assertRaises(MissingColumnError):
            normalize(grid)

    def test_ambiguous_side_aborts_with_row_number(self):
        fills = [fill("9:30:15 AM", buy="1"), fill("9:31:00 AM", buy="0", sell="0")]
        with self.assertRaises(AmbiguousSideError) as ctx:
            normalize(sample_grid(fills))
        self.assertIn("Row 4", str(ctx.exception))

    def test_bad_time_aborts(self):
        with self.assertRaises(FieldError):
            normalize(sample_grid([fill("soon", buy="1")]))

    def test_all_errors_are_conversion_errors(self):
        for exc in (FormatError, MissingColumnError("Time"), FieldError, AmbiguousSideError):
            self.assertTrue(isinstance(exc, ConversionError) or issubclass(exc, ConversionError))
        self.assertTrue(issubclass(ConversionError, ValueError))

    def test_converter_class_delegates(self):
        converter = CQGFillReport("unused.xlsx")
        self.assertEqual(converter.normalize(sample_grid()), normalize(sample_grid()))


if __name__ == '__main__':
    unittest.main()
