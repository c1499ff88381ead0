from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

from onchain_banks.config import SiteConfig  # noqa: E402
from onchain_banks.models import normalize_card  # noqa: E402


@pytest.fixture
def config():
    return SiteConfig(build_date=date(2025, 3, 14))


@pytest.fixture
def make_bank():
    """Build a normalized bank from keyword overrides on a raw card."""

    def _make(name="Test Card", **fields):
        return normalize_card({"name": name, **fields})

    return _make


@pytest.fixture
def sample_cards():
    return [
        {
            "name": "Ether.fi Cash",
            "network": "Visa",
            "chain": "Scroll",
            "custody": "Non-Custodial",
            "cashback": "3%",
            "cashbackToken": "SCR",
            "annualFee": "$0",
            "category": "cryptoNative",
            "features": ["Borrow against staked ETH"],
        },
        {
            "name": "Gnosis Pay",
            "network": "Visa",
            "chain": "Gnosis",
            "custody": "Non-Custodial",
            "cashback": "5%",
            "annualFee": "$0",
            "category": "onchain",
            "regions": ["europe"],
        },
        {
            "name": "Phantom Card",
            "network": "Mastercard",
            "chain": "Solana",
            "custody": "Custodial",
            "cashback": "1%",
            "annualFee": "$50",
            "category": "cryptoNative",
        },
        {
            "name": "Nexo",
            "chain": "14 chains",
            "custody": "Custodial",
            "cashback": "2%",
            "annualFee": "$0",
            "category": "fintech",
        },
        {"name": "Mystery Card", "chain": "Tron"},
    ]
