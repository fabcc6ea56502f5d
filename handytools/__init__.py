"""Small everyday helpers for sequences, dicts, sets, files, numbers and background futures."""

__version__ = "2.0.0"