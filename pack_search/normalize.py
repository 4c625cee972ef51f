from __future__ import annotations

import logging
import re

from .disambiguate import DEFAULT_HOOKS, DisambiguationHook, apply_hooks
from .models import InterpretedQuery, PackIntent
from .numbers import normalize_numbers

logger = logging.getLogger(__name__)

PACK_INDICATORS: tuple[str, ...] = (
    "pack",
    "pk",
    "pck",
    "count",
    "ct",
    "cnt",
    "pcs",
    "piece",
    "pc",
    "unit",
    "un",
    "x",
)

# "16 pack", "16pk", "24 counts", "3 pieces"; never "16 package".
# At most nine digits; a longer digit run never counts as a pack size.
_PACK_RE = re.compile(
    r"\b(\d{1,9})\s*(" + "|".join(PACK_INDICATORS) + r")(?:s|es)?\b",
    re.IGNORECASE,
)

# Connectives around the pack phrase: "a 16 pack of ..." drops the "a" only
# when nothing precedes it, so "vitamin a 100 count" keeps its "a".
_LEADING_ARTICLE_RE = re.compile(r"^\s*(?:a|an|the)\s*$", re.IGNORECASE)
_TRAILING_OF_RE = re.compile(r"^\s*of(?!\S)", re.IGNORECASE)
_MULTISPACE_RE = re.compile(r"\s+")


def find_pack_phrase(text: str) -> re.Match[str] | None:
    """Return the first pack phrase in *text*, scanning left to right."""
    return _PACK_RE.search(text)


def _base_phrase(text: str, match: re.Match[str]) -> str:
    before = _LEADING_ARTICLE_RE.sub("", text[: match.start()])
    after = _TRAILING_OF_RE.sub("", text[match.end() :])
    base = _MULTISPACE_RE.sub(" ", f"{before} {after}").strip()
    # Remove stray separators left at the seams, e.g. "batteries, 16 pack"
    return base.strip(":,;.- ")


def interpret(
    phrase: str,
    *,
    hooks: tuple[DisambiguationHook, ...] | list[DisambiguationHook] = DEFAULT_HOOKS,
) -> InterpretedQuery:
    """Turn a spoken search phrase into an upstream query plus pack intent.

    Never raises. Whenever no usable pack phrase is found the phrase passes
    through untouched:

    - "16 pack of AA batteries" -> "AA batteries", pack of 16
    - "sixteen pack batteries"  -> "batteries", pack of 16
    - "24 pack"                 -> "24 pack", no pack intent
    - "package of cookies"      -> "package of cookies", no pack intent
    """
    passthrough = InterpretedQuery(original_phrase=phrase, api_query=phrase, pack_intent=PackIntent.none())

    normalized = normalize_numbers(phrase)
    match = find_pack_phrase(normalized)
    if match is None:
        return passthrough

    quantity = int(match.group(1))
    if quantity <= 0:
        logger.debug("Ignoring zero pack size in %r", phrase)
        return passthrough

    base = _base_phrase(normalized, match)
    if not base:
        # A bare "24 pack" names no product.
        logger.debug("Pack phrase without a product in %r", phrase)
        return passthrough

    api_query = apply_hooks(base, phrase, hooks)
    logger.debug("Interpreted %r as %r (pack of %d)", phrase, api_query, quantity)
    return InterpretedQuery(
        original_phrase=phrase,
        api_query=api_query,
        pack_intent=PackIntent.of(quantity),
    )
