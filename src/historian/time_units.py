"""Time unit constants shared by the charge and derivative helpers.

Entry timestamps are milliseconds since the epoch.
"""

MSECS_IN_SEC = 1000
SECS_IN_MIN = 60
MINS_IN_HOUR = 60

SECS_IN_HOUR = SECS_IN_MIN * MINS_IN_HOUR
MSECS_IN_HOUR = MSECS_IN_SEC * SECS_IN_HOUR
