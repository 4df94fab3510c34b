"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_THRESHOLD_HOURS = 8.0
DEFAULT_RATE = 7.95

# Planning views always assume an 8-hour standard day, whatever the threshold.
STANDARD_DAY_HOURS = 8

HOURS_EPSILON = 1e-9

ISO_DATE_FORMAT = "%Y-%m-%d"
