from dataclasses import dataclass, asdict
from datetime import date, datetime
from functools import total_ordering
from typing import NamedTuple

from .exceptions import CurrencyMismatch


@total_ordering
@dataclass(frozen=True, eq=False)
class Price:
    """Amount with its currency. Compared and hashed by `value` only."""
    value: float
    currency_code: str = ""
    currency_symbol: str = ""

    def __add__(self, other: "Price") -> "Price":
        if not isinstance(other, Price):
            return NotImplemented

        if self.currency_code and other.currency_code \
                and self.currency_code != other.currency_code:
            raise CurrencyMismatch(self.currency_code, other.currency_code)

        # Currency fields come from the left operand, or from the right one where the left is empty
        return Price(
            value=self.value + other.value,
            currency_code=self.currency_code or other.currency_code,
            currency_symbol=self.currency_symbol or other.currency_symbol
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: "Price") -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"{self.currency_symbol}{self.value:.2f}"


@dataclass(eq=True, frozen=True)
class FareQuote:
    origin: str
    destination: str
    origin_name: str
    destination_name: str
    departure_date: datetime
    arrival_date: datetime
    price: Price
    flight_key: str
    flight_number: str = ""     # e.g., "FR1453"

    def to_dict(self):
        return asdict(self)


class DatePair(NamedTuple):
    outbound_date: date
    return_date: date


@dataclass(eq=True, frozen=True)
class RoundTripCandidate:
    outbound: FareQuote
    inbound: FareQuote
    total_price: Price

    @property
    def currency(self) -> str:
        return self.total_price.currency_code

    def to_dict(self):
        return asdict(self)
