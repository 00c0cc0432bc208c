"""
Report Conversion Commands

Commands for converting broker fill reports to TraderVue CSV, previewing the
result, and identifying an unknown report.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import logging
from pathlib import Path

import click
from tabulate import tabulate

from fillconvert import util
from fillconvert.converters import formats_supported, get_converter
from fillconvert.report_identifier import ReportIdentifier, ReportType


logger = logging.getLogger(__name__)


@click.command("convert")
@click.option("-t", "--type", "report_type", required=True, type=click.Choice(formats_supported()),
              help="Type of input report")
@click.option("-i", "--input", "input_path", required=True, type=click.Path(path_type=Path),
              help="Path to input XLSX file")
@click.option("-o", "--output", "output_path", type=click.Path(path_type=Path),
              help="Path to output CSV file (defaults to input file with .csv extension)")
@click.option("--debug", is_flag=True, help="Also dump the decoded worksheet to <name>_load.csv")
@click.pass_context
def convert(ctx, report_type, input_path, output_path, debug):
    """Convert a trading report to CSV format"""
    if output_path is None:
        output_path = util.default_output_path(input_path)

    logger.info(f"Convert - type: {report_type}, input: {input_path}, output: {output_path}")

    try:
        converter = get_converter(report_type, str(input_path))
        converter.set_debug(debug)
        rows = converter.process()
        converter.write(rows, output_path)
    except Exception as e:
        logger.error(f"Error converting {input_path}: {e}")
        logger.debug("Traceback follows", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Successfully converted {input_path} to {output_path}")


@click.command("preview")
@click.option("-t", "--type", "report_type", required=True, type=click.Choice(formats_supported()),
              help="Type of input report")
@click.option("-i", "--input", "input_path", required=True, type=click.Path(path_type=Path),
              help="Path to input XLSX file")
@click.option("--limit", default=20, show_default=True, type=click.IntRange(min=0),
              help="Maximum number of fills to show (0 for all)")
@click.pass_context
def preview(ctx, report_type, input_path, limit):
    """Show the converted fills without writing a file"""
    try:
        rows = get_converter(report_type, str(input_path)).process()
    except Exception as e:
        logger.error(f"Error previewing {input_path}: {e}")
        logger.debug("Traceback follows", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    header, fills = rows[0], rows[1:]
    if not fills:
        click.echo("No fills found.")
        return

    shown = fills if limit == 0 else fills[:limit]
    click.echo(tabulate(shown, headers=header, stralign="right", disable_numparse=True))
    if len(shown) < len(fills):
        click.echo(f"\n... {len(fills) - len(shown)} more fills not shown")


@click.command("identify")
@click.option("-i", "--input", "input_path", required=True, type=click.Path(path_type=Path),
              help="Path to input XLSX file")
@click.pass_context
def identify(ctx, input_path):
    """Detect which report format a file uses"""
    try:
        report_type, confidence = ReportIdentifier().identify(input_path)
    except Exception as e:
        logger.error(f"Error identifying {input_path}: {e}")
        logger.debug("Traceback follows", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if report_type == ReportType.UNKNOWN:
        logger.warning(f"Unable to identify {input_path} (confidence: {confidence:.1%})")
        click.echo(f"Unknown report format (confidence: {confidence:.1%})")
        click.echo(f"Supported formats: {', '.join(formats_supported())}")
        ctx.exit(1)

    logger.info(f"Identified {input_path} as {report_type.value} with {confidence:.1%} confidence")
    click.echo(f"{report_type.value} ({confidence:.1%} confidence)")
