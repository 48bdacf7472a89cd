from itertools import product
from typing import Iterable, List, Sequence

from .types import FareQuote, RoundTripCandidate


def pair_fares(
        outbound_fares: Sequence[FareQuote],
        inbound_fares: Sequence[FareQuote]
    ) -> List[RoundTripCandidate]:
    """Combines every outbound fare with every inbound fare.

    Returns an empty list when either side is empty.

    Raises:
        CurrencyMismatch: If an outbound and an inbound fare are quoted in different currencies.
    """
    return [
        RoundTripCandidate(
            outbound=outbound,
            inbound=inbound,
            total_price=outbound.price + inbound.price
        ) for outbound, inbound in product(outbound_fares, inbound_fares)
    ]


def rank_round_trips(candidates: Iterable[RoundTripCandidate]) -> List[RoundTripCandidate]:
    """Sorts candidates by ascending total price, keeping the input order of equal prices."""
    return sorted(candidates, key=lambda candidate: candidate.total_price.value)
