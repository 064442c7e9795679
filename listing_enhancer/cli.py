"""Command line entry - enhance a product JSON file and print the listing."""

import json
import sys

from .clients import UnknownProviderError
from .config import Settings, configure_logging
from .handlers import build_service

USAGE = "Usage: listing-enhancer [product.json]   (reads stdin when no file is given)"


def _read_product(path: str | None) -> dict:
    if path is None:
        raw = sys.stdin.read()
    else:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("product data must be a JSON object")
    return data


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1 or (args and args[0] in ("-h", "--help")):
        print(USAGE)
        return 1

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        product = _read_product(args[0] if args else None)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        service = build_service(settings)
    except UnknownProviderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    listing = service.enhance(product)
    print(json.dumps(listing.to_dict(), indent=2, ensure_ascii=False, default=str))
    return 0
