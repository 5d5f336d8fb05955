"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Used when a worker has no shift (or a flexible one).
FLEXIBLE_WINDOW_START = "05:00"
FLEXIBLE_WINDOW_END = "23:00"

# Midnight shifts check in on the previous evening.
MIDNIGHT_WINDOW_START = "21:00"
MIDNIGHT_WINDOW_END = "23:59"
MIDNIGHT_RECOMMENDED_START = "22:00"

NEXT_SHIFT_MAX_DAYS = 730
STREAK_LOOKBACK_DAYS = 30
UPCOMING_SCHEDULE_DAYS = 90
STREAK_MILESTONES = (7, 14, 30, 60, 90)
BADGE_STREAK_DAYS = 7

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
