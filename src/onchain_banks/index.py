"""Cross-cutting views over the normalized bank list."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .catalog import CHAINS, NON_CUSTODIAL, ChainInfo
from .models import Bank

logger = logging.getLogger(__name__)

RELATED_LIMIT = 6


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def chain_members(banks: Iterable[Bank], chain: ChainInfo) -> tuple[Bank, ...]:
    return tuple(bank for bank in banks if chain.matches(bank.chain))


@dataclass(frozen=True)
class SiteIndex:
    banks: tuple[Bank, ...]
    by_slug: dict[str, Bank]
    chains: dict[str, tuple[Bank, ...]]
    chain_info: dict[str, ChainInfo]

    @property
    def bank_count(self) -> int:
        return len(self.banks)

    @property
    def non_custodial_count(self) -> int:
        return sum(1 for bank in self.banks if bank.custody == NON_CUSTODIAL)

    @property
    def custodial_count(self) -> int:
        return self.bank_count - self.non_custodial_count

    @property
    def non_custodial_percent(self) -> int:
        if not self.banks:
            return 0
        return round_half_up(self.non_custodial_count / self.bank_count * 100)

    @property
    def custodial_percent(self) -> int:
        return 100 - self.non_custodial_percent

    @property
    def unique_chain_count(self) -> int:
        return len({bank.chain for bank in self.banks})

    def get(self, slug: str) -> Bank | None:
        return self.by_slug.get(slug)

    def resolve(self, slugs: Iterable[str]) -> list[Bank]:
        """Look up slugs in order, dropping the ones that match no bank."""
        return [self.by_slug[slug] for slug in slugs if slug in self.by_slug]

    def nonempty_chains(self) -> Iterator[tuple[ChainInfo, tuple[Bank, ...]]]:
        for key, members in self.chains.items():
            if members:
                yield self.chain_info[key], members

    def related(self, bank: Bank, limit: int = RELATED_LIMIT) -> list[Bank]:
        """Other banks on the same chain or in the same category, in list order."""
        related = [
            other
            for other in self.banks
            if other.slug != bank.slug
            and (other.chain == bank.chain or other.category == bank.category)
        ]
        return related[:limit]


def build_index(banks: Sequence[Bank], chains: Sequence[ChainInfo] = CHAINS) -> SiteIndex:
    by_slug: dict[str, Bank] = {}
    for bank in banks:
        if bank.slug in by_slug:
            # The later bank's profile page overwrites the earlier one.
            logger.warning(
                "Slug collision: %r and %r both map to %r",
                by_slug[bank.slug].name,
                bank.name,
                bank.slug,
            )
            continue
        by_slug[bank.slug] = bank

    return SiteIndex(
        banks=tuple(banks),
        by_slug=by_slug,
        chains={chain.key: chain_members(banks, chain) for chain in chains},
        chain_info={chain.key: chain for chain in chains},
    )
