"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_RECORD_STATUS = "active"
TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%Y-%m-%d"
MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
ZERO_PERCENT = "0%"
