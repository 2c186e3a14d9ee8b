"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Check-ins after this time of day are Late.
DEFAULT_WORKDAY_START = time(8, 30)
# Used when an entry is submitted without a check-in time.
DEFAULT_CHECK_IN_TIME = time(8, 30)

MAX_REMARKS_LENGTH = 500
MAX_STATUS_LENGTH = 50

PERCENT_PRECISION = 2
HOURS_PRECISION = 2

UNKNOWN_EMPLOYEE_LABEL = "Unknown Employee"
ALL_EMPLOYEES_LABEL = "All Employees"

DEFAULT_EMPLOYEES = (
    ("Hashini Sewwandi", "Web Developer"),
    ("Kasun Dananjaya", "Software Engineer"),
    ("Nimal Perera", "Manager"),
)
