from dataclasses import dataclass, asdict
from datetime import date


@dataclass
class OneWayFaresPayload:
    departureAirportIataCode: str
    arrivalAirportIataCode: str
    outboundDepartureDateFrom: date
    outboundDepartureDateTo: date
    market: str

    def to_dict(self):
        return asdict(self)


def get_one_way_fares_payload(
        origin: str,
        destination: str,
        departure_date: date,
        market: str
    ) -> OneWayFaresPayload:
    """Query for the fares of a single departure day."""
    return OneWayFaresPayload(
        departureAirportIataCode=origin,
        arrivalAirportIataCode=destination,
        outboundDepartureDateFrom=departure_date,
        outboundDepartureDateTo=departure_date,
        market=market
    )
