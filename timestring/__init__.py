"""Human readable formatting of time durations, with long and short formatters."""

__version__ = "0.1.0"