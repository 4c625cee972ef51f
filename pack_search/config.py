from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


REQUIRED_KEYS = [
    "EBAY_APP_ID",
]

OPTIONAL_KEYS = [
    "EBAY_CLIENT_SECRET",
    "EBAY_SANDBOX",
    "PRODUCTS_FILE",
    "LOG_LEVEL",
]

_PLACEHOLDERS = {"PLACEHOLDER", "MASKED", "CHANGEME", ""}


@dataclass(frozen=True)
class Config:
    ebay_app_id: str
    ebay_client_secret: str | None = None
    ebay_sandbox: bool = False

    @staticmethod
    def load_from_env(environ: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if environ is None else environ

        values: dict[str, str] = {}
        for k in REQUIRED_KEYS:
            val = env.get(k)
            if val is None:
                raise RuntimeError(f"Missing environment variable: {k}")
            if val.strip() in _PLACEHOLDERS:
                raise RuntimeError(f"Environment variable {k} is still a placeholder")
            values[k] = val.strip()

        secret = (env.get("EBAY_CLIENT_SECRET") or "").strip()
        return Config(
            ebay_app_id=values["EBAY_APP_ID"],
            ebay_client_secret=secret if secret not in _PLACEHOLDERS else None,
            ebay_sandbox=(env.get("EBAY_SANDBOX") or "").strip().lower() == "true",
        )
