import requests

from pack_search.models import ListingSummary
from pack_search.service import SearchService


def _listing(title, n):
    return ListingSummary(title=title, link=f"https://ebay.com/itm/{n}", image_url=f"https://i.ebayimg.com/{n}.jpg", price="USD 9.99")


class _FakeClient:
    def __init__(self, listings=None, exc=None):
        self.listings = listings or []
        self.exc = exc
        self.queries = []

    def search(self, query, *, limit=50):
        self.queries.append((query, limit))
        if self.exc is not None:
            raise self.exc
        return list(self.listings)


def test_search_interprets_and_filters():
    client = _FakeClient([
        _listing("Duracell AA Batteries 16 Pack", 1),
        _listing("Duracell AA Batteries 160 Pack", 2),
        _listing("Energizer AA Batteries 16", 3),
        _listing("Amazon Basics AA 16-Count", 4),
    ])
    resp = SearchService(client).search("sixteen pack of AA batteries", limit=20)

    assert client.queries == [("AA batteries", 20)]
    assert resp.success
    assert resp.search_term == "sixteen pack of AA batteries"
    assert resp.query.pack_intent.quantity == 16
    assert [p.link for p in resp.products] == ["https://ebay.com/itm/1", "https://ebay.com/itm/4"]


def test_search_without_pack_only_drops_unrenderable():
    client = _FakeClient([
        _listing("Raw Honey", 1),
        ListingSummary(title="Honey", link="", image_url="https://i.ebayimg.com/2.jpg"),
    ])
    resp = SearchService(client).search("raw honey")
    assert client.queries == [("raw honey", 50)]
    assert [p.title for p in resp.products] == ["Raw Honey"]


def test_blank_phrase_is_rejected_without_searching():
    client = _FakeClient()
    resp = SearchService(client).search("   ")
    assert not resp.success
    assert resp.error == "Search term is required"
    assert client.queries == []


def test_upstream_errors_become_failed_responses():
    resp = SearchService(_FakeClient(exc=RuntimeError("eBay API error 503 for /x: down"))).search("batteries")
    assert not resp.success
    assert "eBay API error 503" in resp.response_message

    resp = SearchService(_FakeClient(exc=requests.ConnectionError("no route"))).search("batteries")
    assert not resp.success
    assert resp.error == "no route"


def test_search_without_client():
    resp = SearchService().search("batteries")
    assert not resp.success


def test_search_local_uses_interpreted_query():
    catalog = {
        "Batteries": [
            {"link": "https://shop.example/b/1", "price": 14.5, "currency": "USD", "imageUrl": "https://shop.example/b1.jpg", "description": "AA alkaline 16 pack", "type": "battery"},
            {"link": "https://shop.example/b/2", "price": 9, "currency": "USD", "imageUrl": "https://shop.example/b2.jpg", "description": "AA alkaline 8 pack", "type": "battery"},
        ],
        "Snacks": [
            {"link": "https://shop.example/s/1", "price": 2, "currency": "USD", "imageUrl": "https://shop.example/s1.jpg", "description": "Pretzels 16 pack", "type": "snack"},
        ],
    }
    resp = SearchService().search_local("sixteen pack batteries", catalog)
    assert resp.success
    assert resp.query.api_query == "batteries"
    assert [p.link for p in resp.products] == ["https://shop.example/b/1"]


def test_search_local_blank_phrase():
    assert not SearchService().search_local("", {}).success
