"""fitness-record: log workout exercises grouped by date."""

__version__ = "0.1.0"
