"""
Localized strings (compass directions and error labels).

Tables are process-wide, read-only mappings. Lookups that get an unknown
language or form silently fall back to English / short form.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal

Language = Literal["en", "de"]
OrientationForm = Literal["short", "long"]

DEFAULT_LANGUAGE: Language = "en"
DEFAULT_FORM: OrientationForm = "short"

# Index order used by every direction tuple.
N, NE, E, SE, S, SW, W, NW = range(8)
DIRECTION_KEYS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

ORIENTATIONS: MappingProxyType[str, MappingProxyType[str, tuple[str, ...]]] = MappingProxyType(
    {
        "short": MappingProxyType(
            {
                "en": ("N", "NE", "E", "SE", "S", "SW", "W", "NW"),
                "de": ("N", "NO", "O", "SO", "S", "SW", "W", "NW"),
            }
        ),
        "long": MappingProxyType(
            {
                "en": (
                    "north",
                    "north east",
                    "east",
                    "south east",
                    "south",
                    "south west",
                    "west",
                    "north west",
                ),
                "de": (
                    "Norden",
                    "Nordosten",
                    "Osten",
                    "Südosten",
                    "Süden",
                    "Südwesten",
                    "Westen",
                    "Nordwesten",
                ),
            }
        ),
    }
)

ERROR_LABELS: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType(
    {
        "error": MappingProxyType({"en": "Error", "de": "Fehler"}),
        "noname": MappingProxyType({"en": "unknown", "de": "Ohne Namen"}),
    }
)


def normalize_language(language: str | None) -> str:
    lang = (language or "").strip().lower()
    return lang if lang in ORIENTATIONS["short"] else DEFAULT_LANGUAGE


def normalize_form(form: str | None) -> str:
    f = (form or "").strip().lower()
    return f if f in ORIENTATIONS else DEFAULT_FORM


def directions(form: str | None = DEFAULT_FORM, language: str | None = DEFAULT_LANGUAGE) -> tuple[str, ...]:
    """Return the 8 compass labels (N, NE, ..., NW) for `form` / `language`."""
    return ORIENTATIONS[normalize_form(form)][normalize_language(language)]


def negative_signs(language: str | None = DEFAULT_LANGUAGE) -> tuple[str, ...]:
    """Hemisphere tokens that make a DMS angle negative (south, west, and `-`)."""
    short = directions("short", language)
    return (short[S], short[W], "-")


def error_label(key: Literal["error", "noname"], language: str | None = DEFAULT_LANGUAGE) -> str:
    return ERROR_LABELS[key][normalize_language(language)]
