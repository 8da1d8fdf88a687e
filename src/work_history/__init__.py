"""Convert a work history CSV export into a formatted plain-text report."""

__version__ = "1.0.0"
