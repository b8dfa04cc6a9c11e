"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

from .enums import WeekdayId

MENUS_COLLECTION = "weeklyMenus"
CONFIRMATIONS_COLLECTION = "confirmations"
EMPLOYEES_COLLECTION = "employees"
DEPARTMENTS_COLLECTION = "departments"

# Monday-Friday must be filled in before a menu can be published.
DEFAULT_SERVICE_DAYS = (
    WeekdayId.MONDAY,
    WeekdayId.TUESDAY,
    WeekdayId.WEDNESDAY,
    WeekdayId.THURSDAY,
    WeekdayId.FRIDAY,
)
