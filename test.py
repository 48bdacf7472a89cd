"""
Simple script to verify the weekfares package works against the live API.
Run this after installing the package with `pip install -e .`
"""

import asyncio
import logging
from datetime import date, timedelta
from weekfares import FareClient, setup_logging
from weekfares.render import format_one_way_fares, format_round_trips

# Configure logging
setup_logging(logging.DEBUG)
logger = logging.getLogger("weekfares.test")


# Common Search Parameters
ORIGIN = "DUB"
DEST = "STN"
DATE_FROM = date.today() + timedelta(days=7)
DATE_TO = DATE_FROM + timedelta(days=60)

# Weekday Search Parameters
OUTBOUND_WEEKDAY = "friday"
RETURN_WEEKDAY = "sunday"

# Client Config
CLIENT_TIMEOUT = 20
CLIENT_USE_USD = False
CLIENT_CONCURRENCY = 10

async def main():
    logger.info("Initializing client using async context manager...")
    async with FareClient(
        timeout=CLIENT_TIMEOUT,
        USD=CLIENT_USE_USD,
        concurrency_limit=CLIENT_CONCURRENCY
    ) as client:

        logger.info(f"Searching for one-way fares from {ORIGIN} to {DEST} on {DATE_FROM}...")
        one_way_fares = await client.get_one_way_fares(ORIGIN, DEST, DATE_FROM)
        logger.info(f"Found {len(one_way_fares)} one-way fares.")
        print(format_one_way_fares(one_way_fares))

        logger.info(
            f"Searching for {OUTBOUND_WEEKDAY}-{RETURN_WEEKDAY} round trips from {ORIGIN} to {DEST} "
            f"between {DATE_FROM} and {DATE_TO}..."
        )
        round_trips = await client.search_cheapest_round_trips(
            ORIGIN, DEST, DATE_FROM, DATE_TO, OUTBOUND_WEEKDAY, RETURN_WEEKDAY
        )
        logger.info(f"Found {len(round_trips)} round trips.")
        print(format_round_trips(round_trips[:5]))

        if round_trips:
            keys = {FareClient.get_trip_key(trip) for trip in round_trips}
            if len(keys) != len(round_trips):
                logger.warning(f"{len(round_trips) - len(keys)} round trips share a key.")

    logger.info("Client context exited (session closed).")

if __name__ == "__main__":
    asyncio.run(main())
