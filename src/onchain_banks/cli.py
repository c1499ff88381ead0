"""Command-line entry point: build the static site from a card file."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from .config import DEFAULT_SITE_URL, SiteConfig
from .loader import CardDataError, load_cards
from .site import build_site

DEFAULT_CARDS = Path("data/cards.json")
DEFAULT_OUT = Path("site")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the OnchainBanks static site.")
    parser.add_argument("--cards", type=Path, default=DEFAULT_CARDS, help="Raw card JSON file")
    parser.add_argument("--out", type=Path, default=DEFAULT_OUT, help="Output directory")
    parser.add_argument("--site-url", default=DEFAULT_SITE_URL, help="Public base URL")
    parser.add_argument(
        "--build-date",
        type=date.fromisoformat,
        help="Date stamped on pages and the sitemap (YYYY-MM-DD, default: today)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each build step")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cards = load_cards(args.cards)
    except CardDataError as e:
        print(f"✗ {e}")
        return 1

    if args.build_date:
        config = SiteConfig(site_url=args.site_url, build_date=args.build_date)
    else:
        config = SiteConfig(site_url=args.site_url)

    report = build_site(cards, args.out, config)
    print(f"✓ {report.banks} bank profiles")
    print(f"✓ {report.comparisons} comparisons")
    print(f"✓ {report.chains} chain pages")
    print(f"✓ Wrote {report.urls} URLs to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
