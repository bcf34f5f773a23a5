"""Canonical matching keys for street names.

The same key function runs on historical names when the index is built and on
geometry names and search queries at lookup time. Both sides must agree or
matching silently degrades, so every caller goes through ``normalize_street_name``.
"""

from __future__ import annotations

import re
import unicodedata

STREET_PREFIXES: tuple[str, ...] = ("AVENIDA", "AV", "AV.", "CALLE", "PASAJE", "PASEO")

HONORIFIC_TITLES: tuple[str, ...] = (
    "DOCTOR",
    "DR",
    "DR.",
    "CORONEL",
    "GENERAL",
    "TENIENTE",
    "CAPITAN",
    "ALMIRANTE",
    "INGENIERO",
    "ING",
    "ING.",
    "PRESIDENTE",
    "DIPUTADO NACIONAL",
    "MECANICO MILITAR",
)


def _alternation(tokens: tuple[str, ...]) -> str:
    # Longest first so "AVENIDA" wins over "AV" and "DR." over "DR".
    ordered = sorted(tokens, key=len, reverse=True)
    return "|".join(re.escape(token).replace(r"\ ", r"\s+") for token in ordered)


# U+0303 (tilde) is kept after N so that Ñ survives decomposition.
_COMBINING_RE = re.compile("(?<!N)\u0303|[\u0300-\u0302\u0304-\u036f]")
_PUNCT_RE = re.compile(r"[,.]")
_WS_RE = re.compile(r"\s+")
_PREFIX_RE = re.compile(rf"^(?:{_alternation(STREET_PREFIXES)})\s+", re.IGNORECASE)
# Unicode \b: a title glued to an accented letter or Ñ ("ÑDR X") is not a title.
_TITLE_RE = re.compile(rf"\b(?:{_alternation(HONORIFIC_TITLES)})\s+", re.IGNORECASE)


def strip_diacritics(value: str) -> str:
    """Remove accents ("É" -> "E") while keeping "Ñ"."""

    decomposed = unicodedata.normalize("NFD", value)
    stripped = _COMBINING_RE.sub("", decomposed)
    return unicodedata.normalize("NFC", stripped)


def _single_pass(value: str) -> str:
    key = strip_diacritics(value.upper())
    key = _PUNCT_RE.sub("", key)
    key = _WS_RE.sub(" ", key).strip()
    key = _PREFIX_RE.sub("", key, count=1)
    key = _TITLE_RE.sub("", key)
    return key


def normalize_street_name(raw: str | None) -> str:
    """Return the canonical matching key for a raw street name.

    Uppercases, strips accents, drops commas and periods, collapses whitespace,
    removes one leading street-type prefix and every honorific title. Passes are
    repeated until the key is stable, which keeps the function idempotent for
    inputs such as "Doctor Avenida X" where removing a title exposes a prefix.
    """

    if not raw:
        return ""
    key = _single_pass(raw)
    while True:
        again = _single_pass(key)
        if again == key:
            return key
        key = again
