"""Utility constants and helpers for caldur.

Seconds-axis constants are counts of seconds, months-axis constants are counts
of months. The two axes are never converted into each other here.
"""

# Seconds-axis magnitudes
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Months-axis magnitudes
MONTH = 1
YEAR = 12
DECADE = 120
CENTURY = 1200
MILLENNIUM = 12000


def trunc_div(value: int, divisor: int) -> int:
    """Integer division that truncates toward zero instead of flooring.

    >>> trunc_div(-90, 60)
    -1
    """
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient
