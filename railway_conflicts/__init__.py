"""
Railway platform conflict resolver

Models a small railway topology (stations, lines, platforms) and resolves
scheduling conflicts between trains booked onto the same platform.

Features:
- Validated Station, Line and Platform records
- Priority resolution (Stoppage over Through, later arrival cancelled)
- Detection-only conflict reporting with accessibility exemption
- Plain-text booking status reports
"""

__version__ = "1.0.0"
__author__ = "Railway Conflicts Development Team"
__description__ = "Railway platform booking conflict resolver"
