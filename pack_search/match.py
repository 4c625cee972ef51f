from __future__ import annotations

import logging
import re
from typing import Iterable

from .models import ListingSummary, PackIntent
from .normalize import PACK_INDICATORS

logger = logging.getLogger(__name__)


def title_has_quantity(title: str, quantity: int) -> bool:
    """Whether *quantity* appears in *title* as a number of its own.

    "16" matches "AA 16-Pack", "(16) ct" and "16pk" but not "160 Pack",
    "116 ct", a price like "$16" or "16.99", or a model code like "x16".
    """
    return re.search(rf"(?<![\w.$]){quantity}(?![.,]?\d)", title) is not None


def title_has_pack_indicator(title: str) -> bool:
    # Plain substring match: marketplace titles spell these every which way.
    lowered = title.lower()
    return any(tok in lowered for tok in PACK_INDICATORS)


def matches_pack(listing: ListingSummary, pack_intent: PackIntent) -> bool:
    if not pack_intent.present or pack_intent.quantity is None:
        return True
    title = listing.title.lower()
    return title_has_quantity(title, pack_intent.quantity) and title_has_pack_indicator(title)


def filter_results(
    results: Iterable[ListingSummary],
    pack_intent: PackIntent,
) -> list[ListingSummary]:
    """Keep listings consistent with the requested pack size, in input order.

    Listings without a title, link or image are always dropped since they
    cannot be rendered. Running the filter on its own output changes nothing.
    """
    out: list[ListingSummary] = []
    total = 0
    for listing in results:
        total += 1
        if matches_pack(listing, pack_intent) and listing.is_renderable:
            out.append(listing)

    logger.debug("Kept %d of %d listings for %s", len(out), total, pack_intent)
    return out
