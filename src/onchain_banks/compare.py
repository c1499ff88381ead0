"""Head-to-head winner rules for comparison pages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from .catalog import NON_CUSTODIAL, ZERO_FEE
from .models import Bank, FaqEntry

Side = Literal["a", "b", "tie"]

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def cashback_value(text: str) -> float:
    """Leading number of a cashback string; ``0.0`` when there is none.

    "5%" -> 5.0, "3.5% in BTC" -> 3.5, "Up to 8%" -> 0.0
    """
    match = _LEADING_NUMBER.match(str(text))
    if not match:
        return 0.0
    return float(match.group())


def _sentinel_winner(sentinel: str, a_value: str, b_value: str) -> Side:
    if a_value == sentinel and b_value != sentinel:
        return "a"
    if b_value == sentinel and a_value != sentinel:
        return "b"
    return "tie"


def field_winner(field: str, a_value: str, b_value: str) -> Side:
    if field == "cashback":
        num_a = cashback_value(a_value)
        num_b = cashback_value(b_value)
        if num_a > num_b:
            return "a"
        if num_b > num_a:
            return "b"
        return "tie"
    if field == "fee":
        return _sentinel_winner(ZERO_FEE, a_value, b_value)
    if field == "custody":
        return _sentinel_winner(NON_CUSTODIAL, a_value, b_value)
    return "tie"


@dataclass(frozen=True)
class Comparison:
    a: Bank
    b: Bank
    cashback: Side
    fee: Side
    custody: Side

    @property
    def slug(self) -> str:
        return f"{self.a.slug}-vs-{self.b.slug}"

    @property
    def a_wins(self) -> int:
        return [self.cashback, self.fee, self.custody].count("a")

    @property
    def b_wins(self) -> int:
        return [self.cashback, self.fee, self.custody].count("b")

    @property
    def overall(self) -> Side:
        if self.a_wins > self.b_wins:
            return "a"
        if self.b_wins > self.a_wins:
            return "b"
        return "tie"

    @property
    def winner(self) -> Bank | None:
        return {"a": self.a, "b": self.b}.get(self.overall)

    @property
    def verdict_title(self) -> str:
        return self.winner.name if self.winner else "Both are strong choices"

    @property
    def verdict_text(self) -> str:
        if self.winner:
            return f"{self.winner.name} edges ahead with better specs overall."
        return "Both cards are competitive — your choice depends on your priorities."

    def faqs(self) -> list[FaqEntry]:
        a, b = self.a, self.b
        if self.cashback == "a":
            cashback = f"{a.name} offers {a.cashback} vs {b.name}'s {b.cashback}."
        elif self.cashback == "b":
            cashback = f"{b.name} offers {b.cashback} vs {a.name}'s {a.cashback}."
        else:
            cashback = "Both offer comparable cashback rates."
        return [
            FaqEntry(f"Which has better cashback: {a.name} or {b.name}?", cashback),
            FaqEntry(
                f"Is {a.name} or {b.name} self-custody?",
                f"{a.name} is {a.custody}, while {b.name} is {b.custody}.",
            ),
            FaqEntry(
                "Which card has lower fees?",
                f"{a.name} charges {a.annual_fee} annually, while {b.name} charges {b.annual_fee}.",
            ),
        ]


def compare_banks(a: Bank, b: Bank) -> Comparison:
    return Comparison(
        a=a,
        b=b,
        cashback=field_winner("cashback", a.cashback, b.cashback),
        fee=field_winner("fee", a.annual_fee, b.annual_fee),
        custody=field_winner("custody", a.custody, b.custody),
    )
