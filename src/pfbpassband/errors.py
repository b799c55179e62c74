#!/usr/bin/env python3
"""
Exceptions raised by pfbpassband.

Every error is a ValueError so callers that already guard parameter
validation with ``except ValueError`` keep working.
"""

import numbers


class PFBError(ValueError):
    """Base class for all pfbpassband errors."""


class SizeMismatchError(PFBError):
    """A buffer or window has the wrong number of elements."""


class ResolutionTooLowError(PFBError):
    """nchan * nfine cannot hold every filter coefficient."""


class InvalidParameterError(PFBError):
    """A design or configuration parameter is out of range."""


def check_positive_int(name: str, value) -> int:
    """Return ``value`` as an int, or raise InvalidParameterError unless it is an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")
    return int(value)
