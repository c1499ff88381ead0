"""Canonical bank records and the raw-card normalizer."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .catalog import GLOBAL_REGION, UNKNOWN
from .config import DEFAULT_REVIEW_SITE

# Dots and apostrophes inside a word join it ("Ether.fi" -> "etherfi").
_IN_WORD_PUNCT = re.compile(r"(?<=[a-z0-9])[.'’](?=[a-z0-9])")
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    name = _IN_WORD_PUNCT.sub("", name.lower())
    return _NON_SLUG.sub("-", name).strip("-")


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str


@dataclass(frozen=True)
class Bank:
    name: str
    slug: str
    network: str = UNKNOWN
    chain: str = "Multi-chain"
    custody: str = UNKNOWN
    cashback: str = UNKNOWN
    cashback_token: str = UNKNOWN
    annual_fee: str = UNKNOWN
    fx_fee: str = UNKNOWN
    category: str = "onchain"
    archetype: str = "wallet"
    regions: tuple[str, ...] = (GLOBAL_REGION,)
    website: str = "#"
    logo: str = ""
    features: tuple[str, ...] = ()
    perks: tuple[str, ...] = ()
    spendbase_url: str = ""
    coming_soon: bool = False
    tier: str | None = None
    token: str | None = None

    def to_api(self) -> dict[str, Any]:
        """Public fields published in ``api/banks.json``."""
        return {
            "name": self.name,
            "slug": self.slug,
            "network": self.network,
            "chain": self.chain,
            "custody": self.custody,
            "cashback": self.cashback,
            "annualFee": self.annual_fee,
            "fxFee": self.fx_fee,
            "category": self.category,
            "regions": list(self.regions),
            "website": self.website,
            "spendbaseUrl": self.spendbase_url,
        }


def _text(value: Any, default: str) -> str:
    return str(value) if value else default


def _strings(value: Any) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    return (str(value),)


def normalize_card(raw: Mapping[str, Any], review_site: str = DEFAULT_REVIEW_SITE) -> Bank:
    """Build a ``Bank`` from a raw card record.

    Absent, null and empty values fall back to the field defaults. Other
    values are kept as text without further checks, so odd values (a
    cashback of ``"Up to 8%"``, a custody of ``7``) still render.
    """
    name = str(raw["name"])
    slug = slugify(name)
    return Bank(
        name=name,
        slug=slug,
        network=_text(raw.get("network"), UNKNOWN),
        chain=_text(raw.get("chain"), "Multi-chain"),
        custody=_text(raw.get("custody"), UNKNOWN),
        cashback=_text(raw.get("cashback"), UNKNOWN),
        cashback_token=_text(raw.get("cashbackToken"), UNKNOWN),
        annual_fee=_text(raw.get("annualFee"), UNKNOWN),
        fx_fee=_text(raw.get("fxFee"), UNKNOWN),
        category=_text(raw.get("category"), "onchain"),
        archetype=_text(raw.get("archetype"), "wallet"),
        regions=_strings(raw.get("regions") or (GLOBAL_REGION,)),
        website=_text(raw.get("website"), "#"),
        logo=_text(raw.get("logo"), ""),
        features=_strings(raw.get("features") or ()),
        perks=_strings(raw.get("perks") or ()),
        spendbase_url=f"{review_site.rstrip('/')}/card/{slug}/",
        coming_soon=bool(raw.get("comingSoon")),
        tier=_text(raw.get("tier"), "") or None,
        token=_text(raw.get("token"), "") or None,
    )


def normalize_cards(
    records: Iterable[Mapping[str, Any]], review_site: str = DEFAULT_REVIEW_SITE
) -> list[Bank]:
    return [normalize_card(record, review_site) for record in records]
