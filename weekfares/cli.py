"""Command-line interface for searching Ryanair fares."""

import argparse
import asyncio
import json
import logging
import sys

from .config import load_config
from .dates import expand_weekday_pairs, parse_date
from .exceptions import WeekFaresError
from .fares import pair_fares, rank_round_trips
from .logger import setup_logging
from .render import format_one_way_fares, format_round_trips
from .weekfares import FareClient


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="weekfares",
        description="Find the cheapest Ryanair fares between two airports"
    )
    parser.add_argument("--config", "-c", help="Path to a TOML config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)

    one_way = subparsers.add_parser("one-way", help="One-way fares on a single day")
    one_way.add_argument("origin", help="Origin IATA code (e.g. DUB)")
    one_way.add_argument("destination", help="Destination IATA code (e.g. STN)")
    one_way.add_argument("date", help="Departure date (YYYY-MM-DD)")

    return_ = subparsers.add_parser("return", help="Round trips for one outbound and one return day")
    return_.add_argument("origin")
    return_.add_argument("destination")
    return_.add_argument("outbound_date", help="Outbound date (YYYY-MM-DD)")
    return_.add_argument("return_date", help="Return date (YYYY-MM-DD)")

    weekdays = subparsers.add_parser(
        "weekdays",
        help="Cheapest round trips flying out and back on given weekdays"
    )
    weekdays.add_argument("origin")
    weekdays.add_argument("destination")
    weekdays.add_argument("from_date", help="Start of the date range (YYYY-MM-DD)")
    weekdays.add_argument("to_date", help="End of the date range, exclusive (YYYY-MM-DD)")
    weekdays.add_argument("outbound_weekday", help="e.g. friday")
    weekdays.add_argument("return_weekday", help="e.g. sunday")
    weekdays.add_argument(
        "--concurrency",
        type=positive_int,
        help="Maximum number of weeks fetched at the same time"
    )
    weekdays.add_argument("--limit", "-n", type=positive_int, help="Show only the N cheapest round trips")

    return parser.parse_args(argv)


async def run(args) -> str:
    config = load_config(args.config)

    if args.command == "weekdays":
        # Validate up front so bad input fails before any request
        expand_weekday_pairs(args.from_date, args.to_date, args.outbound_weekday, args.return_weekday)
    else:
        for value in (getattr(args, "date", None), getattr(args, "outbound_date", None),
                      getattr(args, "return_date", None)):
            if value is not None:
                parse_date(value)

    async with FareClient(config=config) as client:
        if args.command == "one-way":
            fares = await client.get_one_way_fares(args.origin, args.destination, args.date)
            if args.json:
                return json.dumps([f.to_dict() for f in fares], default=str, indent=2)
            return format_one_way_fares(fares)

        if args.command == "return":
            outbound, inbound = await client.get_return_fares(
                args.origin, args.destination, args.outbound_date, args.return_date
            )
            trips = rank_round_trips(pair_fares(outbound, inbound))
        else:
            trips = await client.search_cheapest_round_trips(
                args.origin,
                args.destination,
                args.from_date,
                args.to_date,
                args.outbound_weekday,
                args.return_weekday,
                concurrency_limit=args.concurrency
            )

    limit = getattr(args, "limit", None)
    if limit is not None:
        trips = trips[:limit]

    if args.json:
        return json.dumps(
            [dict(trip.to_dict(), key=FareClient.get_trip_key(trip)) for trip in trips],
            default=str,
            indent=2
        )
    return format_round_trips(trips)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        output = asyncio.run(run(args))
    except WeekFaresError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
