"""Pytest configuration and fixtures."""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Ensure the package is importable when running tests without installing it
root = Path(__file__).resolve().parent.parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from weekfares.types import FareQuote, Price  # noqa: E402


@pytest.fixture
def make_fare():
    """Factory for FareQuote objects with sensible defaults."""

    def _make_fare(
        value: float = 20.0,
        origin: str = "DUB",
        destination: str = "STN",
        departure: datetime = datetime(2024, 4, 15, 6, 30),
        currency_code: str = "EUR",
        flight_number: str = "FR202",
    ) -> FareQuote:
        return FareQuote(
            origin=origin,
            destination=destination,
            origin_name=f"{origin} Airport",
            destination_name=f"{destination} Airport",
            departure_date=departure,
            arrival_date=departure + timedelta(hours=1, minutes=20),
            price=Price(value, currency_code, "€" if currency_code == "EUR" else "$"),
            flight_key=f"FR~{flight_number[2:]}~ ~~{origin}~{departure:%m/%d/%Y %H:%M}~{destination}",
            flight_number=flight_number,
        )

    return _make_fare
