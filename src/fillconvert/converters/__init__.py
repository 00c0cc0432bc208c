"""
Report converters.

Each module handles one broker report layout and turns its decoded grid into
the TraderVue generic import format.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging

from fillconvert.converters.basereportconverter import BaseReportConverter
from fillconvert.converters.cqg_fill_report import CQGFillReport
from fillconvert.report_identifier import ReportType


logger = logging.getLogger(__name__)

CONVERTERS: dict[ReportType, type[BaseReportConverter]] = {
    ReportType.CQG_FILL_REPORT: CQGFillReport,
}


def formats_supported() -> list[str]:
    return [report_type.value for report_type in CONVERTERS]


def get_converter(report_type: ReportType | str, fname: str) -> BaseReportConverter:
    if isinstance(report_type, str):
        report_type = ReportType(report_type)

    converter_cls = CONVERTERS.get(report_type)
    if converter_cls is None:
        logger.info(f"Format {report_type.value} not supported yet")
        raise ValueError(f"Format {report_type.value} not supported yet")
    return converter_cls(fname)


__all__ = ["BaseReportConverter", "CQGFillReport", "formats_supported", "get_converter"]
