"""Roster choices and the defaults used when a setting is not given."""

DEFAULT_MEMBERS_PER_PAGE = 10
DEFAULT_AFTERNOON_START_HOUR = 12
DEFAULT_EMAIL_DOMAIN = "sorsu.edu.ph"

MIN_YEAR_LEVEL = 1
MAX_YEAR_LEVEL = 4
MAX_NAME_LENGTH = 100
# matches members.school_id VARCHAR(32)
MAX_SCHOOL_ID_LENGTH = 32
BLOCK_CHOICES = ("1", "2", "3", "4", "5")
YEAR_LEVEL_CHOICES = ("1", "2", "3", "4")

# Filter value that disables a roster filter.
FILTER_ALL = "all"
