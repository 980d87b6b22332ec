"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 50
DEFAULT_ROSTER_REFRESH_SECONDS = 30 * 60
DEFAULT_ERROR_BANNER_SECONDS = 5

# Week token meaning "week chosen, aggregate over every week".
ALL_WEEKS_TOKEN = "n/a"
ALL_WEEKS_ALIASES = frozenset({"n/a", "all", "all weeks"})

QUIZ_NOT_ATTENDED = "Didn't Attend The Quiz"
HW_NOT_COMPLETED = "not completed"

SELECTION_KEY_GRADE = "sessionInfoLastSelectedGrade"
SELECTION_KEY_CENTER = "sessionInfoLastSelectedCenter"
SELECTION_KEY_WEEK = "sessionInfoLastSelectedWeek"
