"""Static site builder for the OnchainBanks directory."""

from .config import SiteConfig
from .models import Bank, normalize_card, normalize_cards, slugify
from .site import BuildReport, build_site

__all__ = [
    "Bank",
    "BuildReport",
    "SiteConfig",
    "build_site",
    "normalize_card",
    "normalize_cards",
    "slugify",
]
