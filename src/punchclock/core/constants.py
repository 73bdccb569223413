"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import timedelta, timezone

# Philippine Time, fixed offset, no daylight-saving adjustment.
BUSINESS_TZ = timezone(timedelta(hours=8), "PHT")

DEFAULT_START_HOUR = 10
DEFAULT_START_MINUTE = 0
DEFAULT_END_HOUR = 19
DEFAULT_END_MINUTE = 0

# Clock-outs up to this many minutes past shift end are credited at shift end.
OVERTIME_THRESHOLD_MINUTES = 61

DEFAULT_HISTORY_LIMIT = 50
MIN_PASSWORD_LENGTH = 6
