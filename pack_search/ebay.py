from __future__ import annotations

import logging
import time
from typing import Any, Callable

from .http import HttpClient
from .models import ListingSummary

logger = logging.getLogger(__name__)

FINDING_HOST = "https://svcs.ebay.com"
FINDING_SANDBOX_HOST = "https://svcs.sandbox.ebay.com"
API_HOST = "https://api.ebay.com"
API_SANDBOX_HOST = "https://api.sandbox.ebay.com"

OAUTH_SCOPE = "https://api.ebay.com/oauth/api_scope"
TOKEN_EXPIRY_BUFFER_S = 300  # refresh five minutes early


def format_price(currency: Any, value: Any) -> str:
    """Render a price as "<currency> <value>", or "N/A" when there is none."""
    if value is None or str(value).strip() == "":
        return "N/A"
    cur = str(currency).strip() if currency is not None else ""
    return f"{cur} {str(value).strip()}".strip()


def _first(value: Any) -> Any:
    # Finding API JSON wraps every scalar in a one-element list.
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _text(value: Any) -> str:
    value = _first(value)
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def listing_from_finding_item(item: Any) -> ListingSummary:
    """Map one findItemsByKeywords result item to a ListingSummary.

    Missing or oddly shaped fields become empty strings (price becomes "N/A")
    so the result filter can decide what to drop.
    """
    if not isinstance(item, dict):
        return ListingSummary()

    price = "N/A"
    selling = _first(item.get("sellingStatus"))
    if isinstance(selling, dict):
        current = _first(selling.get("currentPrice"))
        if isinstance(current, dict):
            price = format_price(current.get("@currencyId"), current.get("__value__"))

    return ListingSummary(
        title=_text(item.get("title")),
        link=_text(item.get("viewItemURL")),
        image_url=_text(item.get("galleryURL")),
        price=price,
    )


def listing_from_browse_item(item: Any) -> ListingSummary:
    """Map one Browse API itemSummary to a ListingSummary."""
    if not isinstance(item, dict):
        return ListingSummary()

    price = "N/A"
    raw_price = item.get("price")
    if isinstance(raw_price, dict):
        price = format_price(raw_price.get("currency"), raw_price.get("value"))

    image = item.get("image")
    image_url = _text(image.get("imageUrl")) if isinstance(image, dict) else ""

    return ListingSummary(
        title=_text(item.get("title")),
        link=_text(item.get("itemWebUrl")),
        image_url=image_url,
        price=price,
    )


class EbayTokenProvider:
    """Application OAuth token (client-credentials grant), cached per instance."""

    def __init__(
        self,
        *,
        app_id: str,
        client_secret: str,
        sandbox: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.http = HttpClient(base_url=API_SANDBOX_HOST if sandbox else API_HOST)
        self._app_id = app_id
        self._client_secret = client_secret
        self._clock = clock
        self._token: str | None = None
        self._expires_at = 0.0

    def get_token(self) -> str:
        if self._token and self._clock() < self._expires_at:
            return self._token

        resp = self.http.post(
            "/identity/v1/oauth2/token",
            data={"grant_type": "client_credentials", "scope": OAUTH_SCOPE},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            auth=(self._app_id, self._client_secret),
        )
        if resp.status_code >= 400:
            raise RuntimeError(f"eBay authentication failed with status {resp.status_code}: {resp.text[:500]}")
        try:
            data = resp.json()
            token = str(data["access_token"])
            expires_in = float(data.get("expires_in", 0))
        except Exception as e:
            raise RuntimeError(f"Failed to decode eBay token response: {e}")

        self._token = token
        self._expires_at = self._clock() + expires_in - TOKEN_EXPIRY_BUFFER_S
        logger.info("Fetched eBay application token (expires in %ss)", int(expires_in))
        return token


class EbayClient:
    """Keyword search against eBay.

    Uses the Browse API when a client secret is configured (OAuth), otherwise
    the app-id-only Finding API.
    """

    def __init__(self, *, app_id: str, client_secret: str | None = None, sandbox: bool = False):
        self.app_id = app_id
        self.sandbox = sandbox
        self.finding = HttpClient(base_url=FINDING_SANDBOX_HOST if sandbox else FINDING_HOST)
        self.api = HttpClient(base_url=API_SANDBOX_HOST if sandbox else API_HOST)
        self.tokens = (
            EbayTokenProvider(app_id=app_id, client_secret=client_secret, sandbox=sandbox)
            if client_secret
            else None
        )

    def search(self, query: str, *, limit: int = 50) -> list[ListingSummary]:
        if self.tokens is not None:
            return self.search_browse(query, limit=limit)
        return self.search_finding(query, limit=limit)

    def search_finding(self, query: str, *, limit: int = 50) -> list[ListingSummary]:
        params = {
            "OPERATION-NAME": "findItemsByKeywords",
            "SERVICE-VERSION": "1.0.0",
            "SECURITY-APPNAME": self.app_id,
            "RESPONSE-DATA-FORMAT": "JSON",
            "REST-PAYLOAD": "",
            "keywords": query,
            "paginationInput.entriesPerPage": limit,
        }
        data = self._get_json(self.finding, "/services/search/FindingService/v1", params=params)
        response = _first(data.get("findItemsByKeywordsResponse"))
        result = _first(response.get("searchResult")) if isinstance(response, dict) else None
        items = (result.get("item") or []) if isinstance(result, dict) else []
        listings = [listing_from_finding_item(it) for it in items]
        logger.info("Finding API returned %d items for %r", len(listings), query)
        return listings

    def search_browse(self, query: str, *, limit: int = 50) -> list[ListingSummary]:
        if self.tokens is None:
            raise RuntimeError("Browse API search needs EBAY_CLIENT_SECRET")
        headers = {"Authorization": f"Bearer {self.tokens.get_token()}"}
        data = self._get_json(
            self.api,
            "/buy/browse/v1/item_summary/search",
            params={"q": query, "limit": limit},
            headers=headers,
        )
        items = data.get("itemSummaries") or []
        listings = [listing_from_browse_item(it) for it in items]
        logger.info("Browse API returned %d items for %r", len(listings), query)
        return listings

    def _get_json(
        self,
        http: HttpClient,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        resp = http.get(path, params=params, headers=headers)
        if resp.status_code >= 400:
            raise RuntimeError(f"eBay API error {resp.status_code} for {path}: {resp.text[:500]}")
        try:
            data = resp.json()
        except Exception as e:
            raise RuntimeError(f"Failed to decode JSON from eBay for {path}: {e}")
        if not isinstance(data, dict):
            raise RuntimeError(f"Unexpected JSON from eBay for {path}: {type(data).__name__}")
        return data
