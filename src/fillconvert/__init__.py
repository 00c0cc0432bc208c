"""
fillconvert

Convert broker trading fill reports to TraderVue import format.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.
"""
