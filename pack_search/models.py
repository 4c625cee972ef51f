from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackIntent:
    """A requested multi-unit pack size, e.g. the 16 in "16 pack"."""

    present: bool = False
    quantity: int | None = None

    @staticmethod
    def none() -> "PackIntent":
        return PackIntent()

    @staticmethod
    def of(quantity: int) -> "PackIntent":
        if quantity <= 0:
            raise ValueError(f"Pack quantity must be positive, got {quantity}")
        return PackIntent(present=True, quantity=quantity)


@dataclass(frozen=True)
class InterpretedQuery:
    # Phrase exactly as the caller sent it.
    original_phrase: str

    # Keyword query sent to the upstream search API.
    api_query: str

    pack_intent: PackIntent = PackIntent()


@dataclass(frozen=True)
class ListingSummary:
    """A single listing returned by an upstream product search."""

    title: str = ""
    link: str = ""
    image_url: str = ""
    price: str = "N/A"              # e.g. "USD 12.99"

    @property
    def is_renderable(self) -> bool:
        return bool(self.title.strip() and self.link.strip() and self.image_url.strip())


@dataclass(frozen=True)
class CatalogProduct:
    """A product entry from the local products.json catalog."""

    link: str
    price: str                      # e.g. "4.99 USD"
    category: str = ""
    image_url: str = ""
    description: str = ""
    flavor: str = ""
    ingredients: str = ""
    weight: str = ""
    quantity: int = 0
    brand: str = ""
    type: str = ""

    def to_listing(self) -> ListingSummary:
        title = " ".join(p for p in (self.brand, self.description) if p) or self.type
        return ListingSummary(title=title, link=self.link, image_url=self.image_url, price=self.price)
