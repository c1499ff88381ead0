"""Page renderers.

Each renderer is a pure function returning a document string. Markup lives
in the Jinja2 templates next to this module; the functions here assemble the
copy (titles, overview sentences, FAQ entries, JSON-LD) that goes into them.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from jinja2 import Environment, FileSystemLoader, select_autoescape

from . import catalog
from .catalog import (
    CUSTODIAL,
    FEATURED_SLUGS,
    GLOBAL_REGION,
    NON_CUSTODIAL,
    NOT_APPLICABLE,
    UNKNOWN,
    ZERO_FEE,
    ChainInfo,
)
from .compare import Comparison
from .config import SiteConfig
from .index import SiteIndex
from .models import Bank, FaqEntry

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(enabled_extensions=("html", "xml")),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals.update(
        category_label=catalog.category_label,
        category_badge=catalog.category_badge,
        custody_label=catalog.custody_label,
        NON_CUSTODIAL=NON_CUSTODIAL,
        ZERO_FEE=ZERO_FEE,
    )
    env.filters["regions"] = catalog.region_labels
    return env


def render(template_name: str, **context: Any) -> str:
    return get_environment().get_template(template_name).render(**context)


def faq_schema(faqs: Sequence[FaqEntry]) -> dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in faqs
        ],
    }


# --- bank profile ---


def _has_token(token: str, *excluded: str) -> bool:
    return bool(token) and token not in excluded


def overview_sentences(bank: Bank) -> list[str]:
    """The three overview paragraphs of a profile page."""
    if bank.custody == NON_CUSTODIAL:
        article = "a non-custodial"
    elif bank.custody == CUSTODIAL:
        article = "a custodial"
    else:
        article = "an"
    token = ""
    if _has_token(bank.cashback_token, UNKNOWN, NOT_APPLICABLE):
        token = f" paid in {bank.cashback_token}"
    first = (
        f"{bank.name} is {article} onchain banking product operating on {bank.chain}. "
        f"It offers a {bank.network} card with {bank.cashback} cashback{token}."
    )

    features = f"Key features include {', '.join(bank.features)}." if bank.features else ""
    if bank.annual_fee == ZERO_FEE:
        fee = "The card has no annual fee, making it accessible to all users."
    else:
        fee = f"The annual fee is {bank.annual_fee}."
    second = f"{features} {fee}".strip()

    if GLOBAL_REGION in bank.regions:
        availability = f"{bank.name} is available globally"
    else:
        availability = f"{bank.name} is available in {catalog.region_labels(bank.regions)}"
    third = f"{availability}, supporting {bank.network} payments at millions of merchants worldwide."
    return [first, second, third]


def bank_faqs(bank: Bank) -> list[FaqEntry]:
    if bank.custody == NON_CUSTODIAL:
        custody = (
            f"Yes, {bank.name} is non-custodial — you maintain control of your private keys "
            "and funds at all times."
        )
    else:
        custody = (
            f"{bank.name} uses a {bank.custody.lower()} model, meaning the platform manages "
            "your funds on your behalf."
        )
    token = f" paid in {bank.cashback_token}" if _has_token(bank.cashback_token, UNKNOWN) else ""
    if bank.annual_fee == ZERO_FEE:
        fee = f"No, {bank.name} has no annual fee."
    else:
        fee = f"The annual fee for {bank.name} is {bank.annual_fee}."
    return [
        FaqEntry(f"Is {bank.name} self-custody?", custody),
        FaqEntry(
            f"What cashback does {bank.name} offer?",
            f"{bank.name} offers {bank.cashback} cashback{token}.",
        ),
        FaqEntry(f"What blockchain does {bank.name} use?", f"{bank.name} operates on {bank.chain}."),
        FaqEntry(f"Is there an annual fee for {bank.name}?", fee),
    ]


def render_bank(bank: Bank, index: SiteIndex, config: SiteConfig) -> str:
    overview = overview_sentences(bank)
    faqs = bank_faqs(bank)
    canonical = config.url(f"bank/{bank.slug}")
    product_schema = {
        "@context": "https://schema.org",
        "@type": "FinancialProduct",
        "name": bank.name,
        "description": overview[0],
        "url": canonical,
        "provider": {"@type": "Organization", "name": bank.name, "url": bank.website},
    }
    return render(
        "bank.html",
        config=config,
        title=f"{bank.name} — Onchain Bank Profile | {config.site_name}",
        description=(
            f"{bank.name} onchain bank profile: {bank.network} card on {bank.chain}, "
            f"{bank.cashback} cashback, {bank.custody}. "
            f"Compare with {index.bank_count}+ crypto cards."
        ),
        canonical=canonical,
        schemas=[faq_schema(faqs), product_schema],
        bank=bank,
        overview=overview,
        faqs=faqs,
        related=index.related(bank),
    )


# --- comparison ---


def render_comparison(comparison: Comparison, config: SiteConfig) -> str:
    a, b = comparison.a, comparison.b
    faqs = comparison.faqs()
    return render(
        "compare.html",
        config=config,
        title=f"{a.name} vs {b.name} — Which Onchain Bank is Better? | {config.site_name}",
        description=(
            f"Compare {a.name} and {b.name}: cashback, fees, custody, chain. "
            "Side-by-side comparison of two top onchain banks."
        ),
        canonical=config.url(f"compare/{comparison.slug}"),
        schemas=[faq_schema(faqs)],
        cmp=comparison,
        a=a,
        b=b,
        faqs=faqs,
    )


# --- chain listing ---


def render_chain(chain: ChainInfo, members: Sequence[Bank], config: SiteConfig) -> str:
    return render(
        "chain.html",
        config=config,
        title=f"{chain.name} Onchain Banks & Crypto Cards | {config.site_name}",
        description=(
            f"{len(members)} onchain banks and crypto cards on {chain.name}. "
            "Compare cashback, fees, and custody options."
        ),
        canonical=config.url(f"chain/{chain.key}"),
        schemas=[],
        chain=chain,
        members=members,
    )


# --- home ---


def render_home(
    index: SiteIndex, config: SiteConfig, featured: Sequence[str] = FEATURED_SLUGS
) -> str:
    description = (
        f"Tracking {index.bank_count}+ onchain banks, crypto cards, and DeFi spending products. "
        "Compare cards by chain, custody, cashback, and more."
    )
    website_schema = {
        "@context": "https://schema.org",
        "@type": "WebSite",
        "name": "OnchainBanks",
        "url": config.site_url,
        "description": "The comprehensive database of onchain banks and crypto debit cards.",
    }
    return render(
        "home.html",
        config=config,
        title=f"{config.site_name} — The Authority on Onchain Banking",
        description=description,
        canonical=config.url(),
        schemas=[website_schema],
        index=index,
        featured=index.resolve(featured),
        chains=list(index.nonempty_chains()),
    )


# --- text manifests ---


def render_llms(index: SiteIndex, config: SiteConfig) -> str:
    return render(
        "llms.txt", config=config, index=index, review_host=urlparse(config.review_site).netloc
    )


def render_robots(config: SiteConfig) -> str:
    return render("robots.txt", config=config, sitemap_url=config.file_url("sitemap.xml"))


def render_sitemap(urls: Sequence[str], config: SiteConfig) -> str:
    return render("sitemap.xml", config=config, urls=urls)
