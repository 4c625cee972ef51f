from __future__ import annotations

import argparse
import json
import os

from .catalog import load_catalog
from .config import OPTIONAL_KEYS, REQUIRED_KEYS, Config
from .ebay import EbayClient
from .logging_config import configure_logging
from .normalize import interpret
from .report import SearchResponse
from .service import SearchService

VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pack-search")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")

    sub = p.add_subparsers(dest="cmd", required=False)

    p_config = sub.add_parser("config", help="Config commands")
    sub_config = p_config.add_subparsers(dest="config_cmd", required=True)
    sub_config.add_parser("keys", help="List environment variables")
    sub_config.add_parser("check", help="Validate required environment variables are set")

    p_interpret = sub.add_parser("interpret", help="Show how a spoken phrase is turned into a search query")
    p_interpret.add_argument("phrase", help="Search phrase (e.g. 'sixteen pack of AA batteries')")

    p_search = sub.add_parser("search", help="Search eBay and keep listings matching the requested pack size")
    p_search.add_argument("phrase", help="Search phrase")
    p_search.add_argument("--limit", type=int, default=50, help="Max listings to request upstream")
    p_search.add_argument("--json", action="store_true", help="Print the JSON response payload")
    p_search.add_argument("--out", default=None, help="Also write the JSON payload to this path")

    p_local = sub.add_parser("local", help="Search the local products.json catalog")
    p_local.add_argument("phrase", help="Search phrase")
    p_local.add_argument("--file", default=None, help="Catalog path (default: $PRODUCTS_FILE or products.json)")
    p_local.add_argument("--json", action="store_true", help="Print the JSON response payload")

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(VERSION)
        return 0

    if args.cmd is None:
        p.print_help()
        return 0

    configure_logging(args.log_level)

    if args.cmd == "config":
        if args.config_cmd == "keys":
            for k in REQUIRED_KEYS:
                print(k)
            for k in OPTIONAL_KEYS:
                print(f"{k} (optional)")
            return 0

        if args.config_cmd == "check":
            # Intentionally do not print secret values
            cfg = Config.load_from_env()
            api = "browse" if cfg.ebay_client_secret else "finding"
            print(f"OK: eBay config present (api={api}, sandbox={cfg.ebay_sandbox})")
            return 0

    if args.cmd == "interpret":
        q = interpret(args.phrase)
        print(f"phrase: {q.original_phrase}")
        print(f"query:  {q.api_query}")
        if q.pack_intent.present:
            print(f"pack:   {q.pack_intent.quantity}")
        else:
            print("pack:   none")
        return 0

    if args.cmd == "search":
        cfg = Config.load_from_env()
        client = EbayClient(
            app_id=cfg.ebay_app_id,
            client_secret=cfg.ebay_client_secret,
            sandbox=cfg.ebay_sandbox,
        )
        resp = SearchService(client).search(args.phrase, limit=args.limit)
        if args.out:
            print(f"Response written to {resp.write_json(args.out)}")
        return _print_response(resp, as_json=args.json)

    if args.cmd == "local":
        path = args.file or os.getenv("PRODUCTS_FILE") or "products.json"
        resp = SearchService().search_local(args.phrase, load_catalog(path))
        return _print_response(resp, as_json=args.json)

    raise RuntimeError("unreachable")


def _print_response(resp: SearchResponse, *, as_json: bool) -> int:
    if as_json:
        print(json.dumps(resp.to_dict(), indent=2))
    else:
        print(resp.summary_text())
    return 0 if resp.success and resp.products else 1


if __name__ == "__main__":
    raise SystemExit(main())
