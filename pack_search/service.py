from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from .catalog import search_catalog
from .match import filter_results
from .models import ListingSummary
from .normalize import interpret
from .report import SearchResponse, build_response, error_response

logger = logging.getLogger(__name__)


class ListingSource(Protocol):
    def search(self, query: str, *, limit: int = 50) -> list[ListingSummary]: ...


class SearchService:
    """Spoken phrase in, filtered listings plus a voice reply out.

    Errors from the upstream search come back as failed responses rather
    than exceptions; the voice session has no way to recover mid-call.
    """

    def __init__(self, client: ListingSource | None = None):
        self.client = client

    def search(self, phrase: str, *, limit: int = 50) -> SearchResponse:
        if not phrase or not phrase.strip():
            return error_response(phrase or "", "Search term is required")
        if self.client is None:
            return error_response(phrase, "No search client configured")

        query = interpret(phrase)
        logger.info("Searching %r (pack=%s)", query.api_query, query.pack_intent.quantity)
        try:
            raw = self.client.search(query.api_query, limit=limit)
        except (RuntimeError, requests.RequestException) as exc:
            logger.exception("Product search failed for %r", query.api_query)
            return error_response(phrase, str(exc))

        products = filter_results(raw, query.pack_intent)
        logger.info("Kept %d of %d listings for %r", len(products), len(raw), phrase)
        return build_response(query, products)

    def search_local(self, phrase: str, catalog: dict[str, list[dict[str, Any]]]) -> SearchResponse:
        if not phrase or not phrase.strip():
            return error_response(phrase or "", "Search term is required")

        query = interpret(phrase)
        matches = search_catalog(catalog, query.api_query)
        products = filter_results((p.to_listing() for p in matches), query.pack_intent)
        logger.info("Local catalog kept %d of %d products for %r", len(products), len(matches), phrase)
        return build_response(query, products)
