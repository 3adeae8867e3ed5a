"""Custom exception hierarchy for the windowquote library.

The pricing engine itself never raises; these cover the store, the job
schedule and the settings file.
"""

from __future__ import annotations


class WindowQuoteError(Exception):
    """Base exception for all windowquote errors."""


class EstimateNotFoundError(WindowQuoteError):
    """Raised when an estimate id is not in the store."""


class InvalidScheduleError(WindowQuoteError):
    """Raised when a job is scheduled with an end before its start."""


class SettingsError(WindowQuoteError):
    """Raised when the standard pricing file cannot be read or written."""
