#!/usr/bin/env python3
"""
Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""

import os

from dotenv import load_dotenv


# Allow LOG_LEVEL / FILLCONVERT_LOG_FILE to come from a local .env
load_dotenv()

# Logging
LOG_FILE = os.getenv("FILLCONVERT_LOG_FILE", "fillconvert.log")
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# App Version
VERSION = 0.1
AUTHOR = "sangelovich"

# TraderVue generic import columns
OUTPUT_HEADER = ["Date", "Time", "Symbol", "Quantity", "Price", "Side"]
OUTPUT_EXTENSION = ".csv"

# CQG fill report markers
DATE_MARKER = "of"
DISCLAIMER_MARKER = "Disclaimer"
REPORT_TITLE = "Fills reported as of"
