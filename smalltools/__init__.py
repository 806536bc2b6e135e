"""Small text and file utilities: calendar, cat, ls, tail, comment tools, filters, counters and histograms."""

__version__ = "0.1.0"