"""
CLI Module

Command-line interface for fillconvert using Click.
Each command module registers its commands on the root group in fillconvert.main.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

from fillconvert.cli.report import convert, identify, preview


__all__ = ["convert", "identify", "preview"]
