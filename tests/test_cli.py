"""Tests for the command-line interface."""

import json
from datetime import datetime

import pytest

from weekfares import cli
from weekfares.fares import pair_fares, rank_round_trips
from weekfares.weekfares import FareClient


class TestCli:
    def test_invalid_weekday_exits_with_error(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["weekdays", "DUB", "STN", "2024-04-15", "2024-05-15", "moonday", "sunday"])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_date_exits_with_error(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["one-way", "DUB", "STN", "18/04/2024"])

        assert exc_info.value.code == 1
        assert "18/04/2024" in capsys.readouterr().err

    def test_weekdays_json_output(self, capsys, monkeypatch, make_fare) -> None:
        trips = rank_round_trips(pair_fares(
            [make_fare(value=30.0), make_fare(value=10.0, flight_number="FR204")],
            [make_fare(value=5.0, origin="STN", destination="DUB", departure=datetime(2024, 4, 21, 18, 0))],
        ))
        calls = []

        class StubClient(FareClient):
            async def search_cheapest_round_trips(self, *args, **kwargs):
                calls.append((args, kwargs))
                return trips

        monkeypatch.setattr(cli, "FareClient", StubClient)

        cli.main([
            "--json", "weekdays", "DUB", "STN", "2024-04-15", "2024-05-15", "monday", "sunday",
            "--concurrency", "3", "--limit", "1",
        ])

        output = json.loads(capsys.readouterr().out)
        assert len(output) == 1
        assert output[0]["total_price"]["value"] == 15.0
        assert output[0]["key"] == FareClient.get_trip_key(trips[0])
        assert calls[0][1] == {"concurrency_limit": 3}

    def test_weekdays_empty_result(self, capsys, monkeypatch) -> None:
        class StubClient(FareClient):
            async def search_cheapest_round_trips(self, *args, **kwargs):
                return []

        monkeypatch.setattr(cli, "FareClient", StubClient)

        cli.main(["weekdays", "DUB", "STN", "2024-04-15", "2024-05-15", "monday", "sunday"])

        assert capsys.readouterr().out.strip() == "Sorry. No fares are available."

    def test_return_with_mixed_currencies_exits_with_error(self, capsys, monkeypatch, make_fare) -> None:
        """Legs quoted in different currencies cannot be priced together."""
        class StubClient(FareClient):
            async def get_return_fares(self, *args, **kwargs):
                return (
                    [make_fare(currency_code="EUR")],
                    [make_fare(currency_code="GBP", origin="STN", destination="DUB")],
                )

        monkeypatch.setattr(cli, "FareClient", StubClient)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["return", "DUB", "STN", "2024-04-18", "2024-04-21"])

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert "EUR" in err and "GBP" in err

    @pytest.mark.parametrize("option", ["--concurrency", "--limit"])
    @pytest.mark.parametrize("value", ["0", "-1", "two"])
    def test_non_positive_counts_are_rejected(self, capsys, monkeypatch, option, value) -> None:
        calls = []

        class StubClient(FareClient):
            async def search_cheapest_round_trips(self, *args, **kwargs):
                calls.append(kwargs)
                return []

        monkeypatch.setattr(cli, "FareClient", StubClient)

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["weekdays", "DUB", "STN", "2024-04-15", "2024-05-15", "monday", "sunday", option, value])

        assert exc_info.value.code == 2
        assert option in capsys.readouterr().err
        assert calls == []

    def test_limit_keeps_cheapest(self, capsys, monkeypatch, make_fare) -> None:
        trips = rank_round_trips(pair_fares(
            [make_fare(value=30.0), make_fare(value=10.0, flight_number="FR204")],
            [make_fare(value=5.0, origin="STN", destination="DUB")],
        ))

        class StubClient(FareClient):
            async def search_cheapest_round_trips(self, *args, **kwargs):
                return trips

        monkeypatch.setattr(cli, "FareClient", StubClient)

        cli.main(["weekdays", "DUB", "STN", "2024-04-15", "2024-05-15", "monday", "sunday", "--limit", "1"])

        out = capsys.readouterr().out
        assert out.startswith("1.\n")
        assert "For the total price of €15.00" in out
        assert "\n2.\n" not in out
