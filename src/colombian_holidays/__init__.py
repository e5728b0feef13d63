"""
Colombian holiday calendar service.

Computes the Colombian public holidays for any Gregorian year, applies
the Ley Emiliani Monday rule and serves the result as JSON view models
and iCalendar documents from a small Flask API.
"""

__version__ = "1.0.0"
__author__ = "AlejandroGarcia"
