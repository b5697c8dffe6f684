"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

PARTICIPANTS_KEY = "ngo-participants"
SESSIONS_KEY = "ngo-sessions"

DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "10:00"

REPORT_TITLE = "NGO ATTENDANCE REPORT"
