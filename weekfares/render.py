from typing import Iterable, List

from .types import FareQuote, RoundTripCandidate

NO_FARES_MESSAGE = "Sorry. No fares are available."


def format_leg(fare: FareQuote, verb: str = "Fly") -> str:
    return (
        f"{verb} from {fare.origin_name or fare.origin} to {fare.destination_name or fare.destination}\n"
        f"Fly out: {fare.departure_date.isoformat()}\n"
        f"Arrive: {fare.arrival_date.isoformat()}\n"
        f"for {fare.price}"
    )


def format_one_way_fares(fares: Iterable[FareQuote]) -> str:
    blocks = [format_leg(fare) for fare in fares]
    if not blocks:
        return NO_FARES_MESSAGE
    return "\n\n".join(blocks)


def format_round_trips(candidates: Iterable[RoundTripCandidate]) -> str:
    blocks: List[str] = []
    for n, candidate in enumerate(candidates, start=1):
        blocks.append(
            f"{n}.\n"
            f"{format_leg(candidate.outbound)}\n\n"
            f"{format_leg(candidate.inbound, verb='Fly back')}\n\n"
            f"For the total price of {candidate.total_price}"
        )
    if not blocks:
        return NO_FARES_MESSAGE
    return "\n\n".join(blocks)
