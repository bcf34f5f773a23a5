"""Alternate matching keys for historical street names."""

from __future__ import annotations

from calles.services.normalizer import normalize_street_name

SURNAME_SEPARATOR = ", "


def name_variants(raw_name: str | None) -> set[str]:
    """Return every canonical key a historical name may match under.

    Historical records are often authored as "Lastname, Firstname". For those the
    reordered form ("Firstname Lastname") and the surname alone are added next to
    the plain key. Only the first separator splits the name; anything after it
    stays in the second part.
    """

    raw = raw_name or ""
    variants = {normalize_street_name(raw)}
    if SURNAME_SEPARATOR in raw:
        first, second = raw.split(SURNAME_SEPARATOR, 1)
        variants.add(normalize_street_name(f"{second} {first}"))
        variants.add(normalize_street_name(first))
    return variants
