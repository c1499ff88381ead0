"""Authored site data: chains, curated comparisons, featured banks and labels."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "TBD"
NOT_APPLICABLE = "N/A"
NON_CUSTODIAL = "Non-Custodial"
CUSTODIAL = "Custodial"
ZERO_FEE = "$0"
GLOBAL_REGION = "global"


@dataclass(frozen=True)
class ChainInfo:
    key: str
    name: str
    description: str
    aliases: tuple[str, ...] = ()

    def matches(self, chain: str) -> bool:
        """Return True when a bank's chain string names this chain."""
        wanted = str(chain).lower()
        return any(alias.lower() == wanted for alias in self.aliases or (self.name,))


CHAINS: tuple[ChainInfo, ...] = (
    ChainInfo(
        "solana",
        "Solana",
        "Solana is the fastest-growing blockchain for crypto cards, known for sub-second "
        "finality and near-zero fees. Multiple wallet providers and DeFi protocols on Solana "
        "now offer Visa and Mastercard debit cards.",
    ),
    ChainInfo(
        "ethereum",
        "Ethereum",
        "Ethereum remains the foundational blockchain for DeFi and onchain banking. Several "
        "cards allow direct spending from Ethereum wallets, with some leveraging L2 solutions "
        "for lower fees.",
    ),
    ChainInfo(
        "base",
        "Base",
        "Base is Coinbase's Ethereum L2, gaining traction with DeFi-native card products. Low "
        "fees and Coinbase backing make it attractive for onchain spending solutions.",
    ),
    ChainInfo(
        "bitcoin",
        "Bitcoin",
        "Bitcoin cards let you earn sats-back rewards or spend BTC via Lightning Network. These "
        "products appeal to Bitcoin maximalists who want to stack sats on every purchase.",
    ),
    ChainInfo(
        "scroll",
        "Scroll",
        "Scroll is an Ethereum L2 using zkEVM technology. Ether.fi Cash, the top-ranked crypto "
        "card, operates on Scroll with its DeFi credit model.",
    ),
    ChainInfo(
        "starknet",
        "Starknet",
        "Starknet uses zero-knowledge proofs for scalability. Ready card leverages Starknet's "
        "account abstraction for a true self-custody spending experience.",
    ),
    ChainInfo(
        "gnosis",
        "Gnosis",
        "Gnosis Chain powers Gnosis Pay, one of the first self-custody Visa cards in Europe. The "
        "chain's Safe wallet infrastructure enables multi-sig card spending.",
    ),
    ChainInfo(
        "multi-chain",
        "Multi-Chain",
        "Multi-chain cards support spending from wallets across multiple blockchains. These "
        "products abstract away chain complexity, letting users spend from any supported "
        "network.",
        aliases=("Multi-chain", "14 chains"),
    ),
    ChainInfo(
        "bnb-chain",
        "BNB Chain",
        "BNB Chain powers Binance's card ecosystem, one of the largest in crypto. BNB stakers "
        "can earn up to 8% cashback on the Binance Card.",
    ),
    ChainInfo(
        "cronos",
        "Cronos",
        "Cronos is Crypto.com's blockchain, powering one of the most popular crypto card "
        "programs with over 100M users and up to 8% CRO cashback.",
    ),
    ChainInfo(
        "linea",
        "Linea",
        "Linea is ConsenSys's zkEVM L2 powering the MetaMask Card. It enables direct wallet "
        "spending with sub-second transactions and minimal fees.",
    ),
    ChainInfo(
        "arbitrum",
        "Arbitrum",
        "Arbitrum is a leading Ethereum L2 with a growing DeFi ecosystem. Fiat24 operates on "
        "Arbitrum with its NFT-based banking model.",
    ),
    ChainInfo(
        "avalanche",
        "Avalanche",
        "Avalanche offers fast finality and low fees for crypto card products. The Avalanche "
        "Card leverages the chain's native AVAX token for rewards.",
    ),
    ChainInfo(
        "cardano",
        "Cardano",
        "Cardano's card ecosystem is powered by EMURGO and Wirex, offering ADA spending and up "
        "to 8% crypto cashback.",
    ),
    ChainInfo(
        "multiversx",
        "MultiversX",
        "MultiversX (formerly Elrond) powers xPortal, a crypto super app with up to 5% EGLD "
        "cashback and integrated card spending.",
    ),
)

FEATURED_SLUGS: tuple[str, ...] = (
    "etherfi-cash",
    "gnosis-pay",
    "phantom-card",
    "solayer-emerald",
    "kast-k-card",
    "ready",
    "metamask-card",
    "coinbase",
    "nexo",
    "plutus",
    "binance-card",
    "fold",
)

COMPARISONS: tuple[tuple[str, str], ...] = (
    ("etherfi-cash", "gnosis-pay"),
    ("phantom-card", "solayer-emerald"),
    ("kast-k-card", "ready"),
    ("nexo", "cryptocom"),
    ("bybit", "binance-card"),
    ("metamask-card", "phantom-card"),
    ("plutus", "gnosis-pay"),
    ("fold", "coinbase"),
    ("bleap", "holyheld"),
    ("redotpay", "binance-card"),
    ("etherfi-cash", "phantom-card"),
    ("solayer-emerald", "kast-k-card"),
    ("metamask-card", "gnosis-pay"),
    ("cryptocom", "binance-card"),
    ("nexo", "plutus"),
    ("coinbase", "cryptocom"),
    ("fold", "xapo"),
    ("ready", "bleap"),
    ("bybit", "cryptocom"),
    ("phantom-card", "avici"),
    ("etherfi-cash", "nexo"),
    ("kast-k-card", "phantom-card"),
    ("solayer-emerald", "ready"),
    ("gnosis-pay", "holyheld"),
    ("metamask-card", "coinbase"),
    ("binance-card", "okx-card"),
    ("plutus", "etherfi-cash"),
    ("fold", "bitpay"),
    ("redotpay", "kast-k-card"),
    ("bybit", "nexo"),
    ("bleap", "metamask-card"),
    ("solflare", "phantom-card"),
    ("cryptocom", "plutus"),
    ("avici", "kast-k-card"),
    ("etherfi-cash", "coinbase"),
    ("gnosis-pay", "fiat24"),
    ("solayer-emerald", "phantom-card"),
    ("binance-card", "bybit"),
    ("nexo", "coinbase"),
    ("ready", "metamask-card"),
    ("fold", "cryptocom"),
    ("holyheld", "bleap"),
    ("kast-k-card", "solayer-emerald"),
    ("plutus", "bybit"),
    ("redotpay", "revolut"),
    ("etherfi-cash", "solayer-emerald"),
    ("phantom-card", "fold"),
    ("wirex", "cryptocom"),
    ("gnosis-pay", "ready"),
    ("metamask-card", "etherfi-cash"),
)

CATEGORY_LABELS = {
    "cryptoNative": "Crypto-Native",
    "onchain": "Onchain",
    "exchange": "Exchange",
    "fintech": "Fintech",
    "neobank": "Neobank",
}

# Badge colours; anything missing falls back to the neutral badge.
CATEGORY_BADGES = {
    "cryptoNative": "text-lime-400 bg-lime-400/10",
    "onchain": "text-purple-400 bg-purple-400/10",
    "exchange": "text-blue-400 bg-blue-400/10",
}
GENERIC_BADGE = "text-gray-400 bg-gray-400/10"

CUSTODY_LABELS = {
    NON_CUSTODIAL: "🔐 Non-Custodial",
    CUSTODIAL: "🏦 Custodial",
    "Hybrid": "🔄 Hybrid",
    UNKNOWN: "❓ TBD",
}

REGION_LABELS = {
    "global": "🌍 Global",
    "americas": "🇺🇸 Americas",
    "europe": "🇪🇺 Europe",
    "apac": "🌏 Asia-Pacific",
    "latam": "🌎 Latin America",
    "india": "🇮🇳 India",
    "argentina": "🇦🇷 Argentina",
}


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def category_badge(category: str) -> str:
    return CATEGORY_BADGES.get(category, GENERIC_BADGE)


def custody_label(custody: str) -> str:
    return CUSTODY_LABELS.get(custody, custody)


def region_labels(regions) -> str:
    """Join region tags into their display labels."""
    return ", ".join(REGION_LABELS.get(region, region) for region in regions)
