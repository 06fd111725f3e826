"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TwsortUserError.

Programming errors and bugs should NOT inherit from TwsortUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class TwsortUserError(Exception):
    """
    Base class for all user-facing errors in twsort.

    These errors indicate problems that the user can fix:
    configuration issues, unsupported files, missing paths, etc.
    """
    pass


class UnsupportedFileError(TwsortUserError):
    """File extension has no registered grammar."""
    pass


__all__ = ["TwsortUserError", "UnsupportedFileError"]
