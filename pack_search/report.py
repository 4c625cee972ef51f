from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from .models import InterpretedQuery, ListingSummary

LINK_TEXT = "Explore Product"


@dataclass
class SearchResponse:
    success: bool
    search_term: str
    products: list[ListingSummary] = field(default_factory=list)
    query: InterpretedQuery | None = None
    error: str | None = None

    @property
    def response_message(self) -> str:
        """Sentence the voice agent reads back to the user."""
        if not self.success:
            return f"I'm sorry, but there was an error while searching for products: {self.error}"
        msg = f'I found {len(self.products)} products for "{self.search_term}". '
        if self.products:
            msg += f'You can explore these products by clicking on the "{LINK_TEXT}" links below each image.'
        else:
            msg += "Unfortunately, no products were found for this search term."
        return msg

    def to_dict(self) -> dict:
        payload: dict = {"success": self.success, "responseMessage": self.response_message}
        if not self.success:
            payload["error"] = self.error
            return payload

        pack = self.query.pack_intent if self.query else None
        payload["data"] = {
            "searchTerm": self.search_term,
            "apiQuery": self.query.api_query if self.query else self.search_term,
            "packSize": pack.quantity if pack and pack.present else None,
            "products": [
                {
                    "title": p.title,
                    "linkText": LINK_TEXT,
                    "productUrl": p.link,
                    "imageUrl": p.image_url,
                    "price": p.price,
                }
                for p in self.products
            ],
        }
        return payload

    def summary_text(self) -> str:
        lines = [self.response_message]
        if self.query is not None and self.query.api_query != self.search_term:
            lines.append(f"  query: {self.query.api_query}")
        for i, p in enumerate(self.products, 1):
            lines.append(f"  {i}. {p.title}")
            lines.append(f"     Price: {p.price}  URL: {p.link}")
        return "\n".join(lines)

    def write_json(self, path: str = "artifacts/search_response.json") -> str:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(self.to_dict(), indent=2))
        return str(out)


def build_response(query: InterpretedQuery, products: list[ListingSummary]) -> SearchResponse:
    return SearchResponse(success=True, search_term=query.original_phrase, products=products, query=query)


def error_response(search_term: str, error: str) -> SearchResponse:
    return SearchResponse(success=False, search_term=search_term, error=error)
