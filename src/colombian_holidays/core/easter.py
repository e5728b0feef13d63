"""
Easter Sunday calculation.

Pure date arithmetic with no external dependencies.
"""

from datetime import date


def compute(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian (Meeus) algorithm.
    
    The result always falls between March 22 and April 25. Only years
    from 1583 onwards are meaningful; earlier years are not rejected but
    the date returned is not a real Gregorian Easter.
    
    Args:
        year: The calendar year.
        
    Returns:
        Date of Easter Sunday.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    
    return date(year, month, day)


get_easter_sunday = compute
