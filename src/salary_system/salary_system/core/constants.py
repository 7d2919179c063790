"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_SALARY = 1_000_000.0
MIN_BONUS_PERCENTAGE = 0.0
MAX_BONUS_PERCENTAGE = 200.0
