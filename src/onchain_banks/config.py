"""Site-wide settings for a build."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

DEFAULT_SITE_URL = "https://onchainbanks.io"
DEFAULT_SITE_NAME = "OnchainBanks.io"
DEFAULT_HOSTNAME = "onchainbanks.io"
DEFAULT_REVIEW_SITE = "https://spendbase.cards"


def _today() -> date:
    return datetime.now(UTC).date()


@dataclass(frozen=True)
class SiteConfig:
    site_url: str = DEFAULT_SITE_URL
    site_name: str = DEFAULT_SITE_NAME
    hostname: str = DEFAULT_HOSTNAME
    review_site: str = DEFAULT_REVIEW_SITE
    build_date: date = field(default_factory=_today)

    @property
    def lastmod(self) -> str:
        """Build date as ``YYYY-MM-DD``."""
        return self.build_date.isoformat()

    def url(self, path: str = "") -> str:
        """Absolute URL for a page path such as ``bank/etherfi-cash``."""
        base = self.site_url.rstrip("/")
        path = path.strip("/")
        return f"{base}/{path}/" if path else f"{base}/"

    def file_url(self, name: str) -> str:
        """Absolute URL for a root-level file such as ``sitemap.xml``."""
        return f"{self.site_url.rstrip('/')}/{name}"
