from __future__ import annotations

from dataclasses import dataclass
import requests


@dataclass(frozen=True)
class HttpClient:
    base_url: str
    timeout_s: float = 30.0

    def _url(self, path: str) -> str:
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")

    def get(self, path: str, *, params: dict | None = None, headers: dict | None = None) -> requests.Response:
        return requests.get(
            self._url(path),
            params=params,
            headers={"Accept": "application/json", **(headers or {})},
            timeout=self.timeout_s,
        )

    def post(
        self,
        path: str,
        *,
        data: dict | str | None = None,
        headers: dict | None = None,
        auth: tuple[str, str] | None = None,
    ) -> requests.Response:
        return requests.post(
            self._url(path),
            data=data,
            headers={"Accept": "application/json", **(headers or {})},
            auth=auth,
            timeout=self.timeout_s,
        )
