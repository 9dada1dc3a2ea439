"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Weekday

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_FIRST_WEEKDAY = Weekday.SUNDAY
DEFAULT_LUNCH_BREAK_MINUTES = 60

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
