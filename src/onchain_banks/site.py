"""Write the rendered site to disk."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .catalog import CHAINS, COMPARISONS, FEATURED_SLUGS, ChainInfo
from .compare import compare_banks
from .config import SiteConfig
from .index import SiteIndex, build_index
from .models import normalize_cards
from .render import (
    render_bank,
    render_chain,
    render_comparison,
    render_home,
    render_llms,
    render_robots,
    render_sitemap,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildReport:
    banks: int
    comparisons: int
    chains: int
    urls: int


class SiteWriter:
    """Owns the output tree and remembers which pages went into it."""

    def __init__(self, out_dir: Path, config: SiteConfig) -> None:
        self.out_dir = Path(out_dir)
        self.config = config
        self.pages: list[str] = []

    def _write(self, relative: str, content: str) -> Path:
        target = self.out_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    def write_page(self, path: str, html: str) -> Path:
        """Write ``<path>/index.html``; an empty path is the home page.

        Writing the same path twice overwrites the file but records it once.
        """
        path = path.strip("/")
        target = self._write(f"{path}/index.html" if path else "index.html", html)
        if path not in self.pages:
            self.pages.append(path)
        return target

    def write_api(self, index: SiteIndex) -> Path:
        payload = {
            "lastUpdated": self.config.lastmod,
            "count": index.bank_count,
            "banks": [bank.to_api() for bank in index.banks],
        }
        return self._write("api/banks.json", json.dumps(payload, indent=2, ensure_ascii=False))

    def write_llms(self, index: SiteIndex) -> Path:
        return self._write("llms.txt", render_llms(index, self.config))

    def write_robots(self) -> Path:
        return self._write("robots.txt", render_robots(self.config))

    def write_cname(self) -> Path:
        return self._write("CNAME", f"{self.config.hostname}\n")

    @property
    def urls(self) -> list[str]:
        return [self.config.url(path) for path in self.pages]

    def write_sitemap(self) -> Path:
        return self._write("sitemap.xml", render_sitemap(self.urls, self.config))


def build_site(
    cards: Sequence[Mapping[str, Any]],
    out_dir: str | Path,
    config: SiteConfig | None = None,
    *,
    comparisons: Sequence[tuple[str, str]] = COMPARISONS,
    featured: Sequence[str] = FEATURED_SLUGS,
    chains: Sequence[ChainInfo] = CHAINS,
) -> BuildReport:
    """Render every page for ``cards`` into ``out_dir``.

    Write errors are not caught; a failed build leaves whatever was already
    written in place.
    """
    config = config or SiteConfig()
    banks = normalize_cards(cards, config.review_site)
    index = build_index(banks, chains)
    writer = SiteWriter(Path(out_dir), config)
    logger.info("Building %d banks into %s", index.bank_count, writer.out_dir)

    writer.write_page("", render_home(index, config, featured))

    for bank in index.banks:
        writer.write_page(f"bank/{bank.slug}", render_bank(bank, index, config))
    logger.info("Wrote %d bank profiles", index.bank_count)

    comparison_count = 0
    for slug_a, slug_b in comparisons:
        a, b = index.get(slug_a), index.get(slug_b)
        if a is None or b is None:
            logger.info("Skipping comparison %s-vs-%s: unknown bank", slug_a, slug_b)
            continue
        comparison = compare_banks(a, b)
        writer.write_page(f"compare/{comparison.slug}", render_comparison(comparison, config))
        comparison_count += 1
    logger.info("Wrote %d comparison pages", comparison_count)

    chain_count = 0
    for chain, members in index.nonempty_chains():
        writer.write_page(f"chain/{chain.key}", render_chain(chain, members, config))
        chain_count += 1
    logger.info("Wrote %d chain pages", chain_count)

    writer.write_api(index)
    writer.write_llms(index)
    writer.write_robots()
    writer.write_cname()
    writer.write_sitemap()
    logger.info("Wrote sitemap with %d URLs", len(writer.pages))

    return BuildReport(
        banks=index.bank_count,
        comparisons=comparison_count,
        chains=chain_count,
        urls=len(writer.pages),
    )
