"""True Wage Calculator: effective hourly wage after unpaid time."""

__version__ = "0.1.0"
