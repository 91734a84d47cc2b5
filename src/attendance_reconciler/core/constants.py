"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
All clock values are minutes since local midnight.
"""

WORKDAY_START_MINUTES = 10 * 60
WORKDAY_END_MINUTES = 20 * 60

MIN_PRESENCE_MINUTES = 30
MIN_LOGGED_MINUTES = 60

LOG_AFTER_EXIT_MEDIUM_MAX_MINUTES = 30

LATE_CHECKIN_MINUTES = 10 * 60 + 30
SUPER_LATE_CHECKIN_MINUTES = 10 * 60 + 45
MINIMUM_WORK_MINUTES = 8 * 60

DEVICE_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
CLOCK_FORMAT = "%H:%M"
EMPTY_CLOCK_VALUES = frozenset({"", "--:--"})
