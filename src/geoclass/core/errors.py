"""
Typed failures raised by geoclass.

Every error is local and synchronous: there is nothing to retry, the caller
either fixes its input or gives up. All of them derive from `ValueError` so
callers that already treat bad input generically keep working.
"""

from __future__ import annotations


class GeoError(ValueError):
    """Base class for all geoclass errors."""


class InvalidFormatError(GeoError):
    """A DMS string does not look like `51° 24' 32.123'' W`."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"No DMS format (like 51° 24' 32.123'' W): {text!r}")


class OutOfRangeError(GeoError):
    """A parsed DMS angle has degrees > 360, minutes >= 60 or seconds >= 60."""

    def __init__(self, text: str, *, degrees: int, minutes: int, seconds: int):
        self.text = text
        self.degrees = degrees
        self.minutes = minutes
        self.seconds = seconds
        super().__init__(
            f"Values out of range in {text!r}: degrees={degrees} minutes={minutes} seconds={seconds}"
        )


class UnknownUnitError(GeoError):
    """A unit value that has no label / cannot be resolved."""

    def __init__(self, unit: object):
        self.unit = unit
        super().__init__(f"Unknown distance unit: {unit!r}")


class EmptyInputError(GeoError):
    """An aggregate (e.g. barycenter) was asked for over zero points."""


class UnknownSourceError(GeoError):
    """`setup_source` was called with a kind that is not registered."""

    def __init__(self, kind: str, known: list[str]):
        self.kind = kind
        self.known = known
        super().__init__(f"Unknown source kind '{kind}', expected one of: {', '.join(known)}")
