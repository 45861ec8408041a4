"""
Degree / DMS (degrees, minutes, seconds) conversion.

`parse_dms()` accepts loosely formatted strings such as `51° 24' 32.123'' W`,
`-7 26 31` or the compact `512432`. The hemisphere may be given as a leading
or trailing sign token: `+`, `-`, or a localized south/west letter.

`format_dms()` is direction-agnostic: callers prepend N/S/E/W themselves.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache

from geoclass.core.errors import InvalidFormatError, OutOfRangeError
from geoclass.core.strings import DEFAULT_LANGUAGE, negative_signs, normalize_language


@dataclass(frozen=True)
class DMSAngle:
    """One parsed DMS string. Degrees are not validated geographically."""

    sign: float
    degrees: int
    minutes: int
    seconds: int
    fraction: str = ""

    def to_degrees(self) -> float:
        # Base-60 to base-100 in two steps; keep this operation order, existing
        # callers depend on the exact float result.
        seconds = float(f"{self.seconds}.{self.fraction}")
        return self.sign * (self.degrees + ((self.minutes + (seconds * 10 / 6) / 100) * 10 / 6) / 100)


@lru_cache
def _dms_pattern(language: str) -> re.Pattern[str]:
    signs = "".join(re.escape(s) for s in negative_signs(language) if s != "-")
    return re.compile(
        rf"\s*([{signs}\-+]?)\s*(\d{{1,3}})[°\s]*(\d{{1,2}})['\s]*(\d{{1,2}})([,.]*)(\d*)['\"\s]*([{signs}\-+]?)",
        re.IGNORECASE,
    )


def _pad_compact(text: str) -> str:
    # Compact encodings lose leading zeros of the degrees ("12432" is 1° 24' 32").
    if len(text) == 6:
        return "0" + text
    if len(text) == 5:
        return "00" + text
    return text


def split_dms(text: str, language: str = DEFAULT_LANGUAGE) -> DMSAngle:
    """Split a DMS string into its parts.

    Raises:
        InvalidFormatError: If the string does not match the DMS pattern.
        OutOfRangeError: If degrees > 360, minutes >= 60 or seconds >= 60.
    """
    language = normalize_language(language)
    match = _dms_pattern(language).search(_pad_compact(text))
    if match is None:
        raise InvalidFormatError(text)

    lead, deg, minutes, seconds, _sep, fraction, trail = match.groups()
    signs = negative_signs(language)
    sign = -1.0 if lead.upper() in signs or trail.upper() in signs else 1.0

    d, m, s = int(deg), int(minutes), int(seconds)
    # Only the integer seconds are bounded; a fraction may push the value past 60.
    if d > 360 or m >= 60 or s >= 60:
        raise OutOfRangeError(text, degrees=d, minutes=m, seconds=s)

    return DMSAngle(sign=sign, degrees=d, minutes=m, seconds=s, fraction=fraction)


def parse_dms(text: str, language: str = DEFAULT_LANGUAGE) -> float:
    """Convert a DMS string to decimal degrees (negative for south/west)."""
    return split_dms(text, language).to_degrees()


def format_dms(degrees: float, decimal_places: int = 0) -> str:
    """Format decimal degrees as `<deg>° <min>' <sec>[.<frac>]''`.

    The absolute value is used. Half a unit of the last printed seconds digit
    is added first, then every component is truncated.

    >>> format_dms(50.18333)
    "50° 11' 0''"
    """
    places = max(int(decimal_places), 0)
    value = abs(float(degrees)) + 0.5 / 3600 / 10**places

    whole = math.floor(value)
    value = 60 * (value - whole)
    minutes = math.floor(value)
    value = 60 * (value - minutes)
    seconds = math.floor(value)
    subseconds = value - seconds
    for _ in range(places):
        subseconds = 10 * subseconds

    sec_text = str(seconds)
    if places > 0:
        sec_text += "." + str(math.floor(subseconds)).rjust(places, "0")

    return f"{whole}° {minutes}' {sec_text}''"


def hemisphere_dms(degrees: float, *, positive: str, negative: str, decimal_places: int = 0) -> str:
    """Prefix `format_dms()` with a hemisphere letter (`positive` only for values > 0)."""
    letter = positive if degrees > 0 else negative
    return f"{letter} {format_dms(degrees, decimal_places)}"
