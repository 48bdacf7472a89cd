import asyncio
import logging

from datetime import date
from typing import Awaitable, Callable, List, Sequence

from .fares import pair_fares
from .types import DatePair, FareQuote, RoundTripCandidate

logger = logging.getLogger(__name__)

DEFAULT_CONCURRENCY_LIMIT = 25

FetchOneWayFares = Callable[[str, str, date], Awaitable[List[FareQuote]]]


async def fetch_round_trips(
        source: str,
        destination: str,
        date_pairs: Sequence[DatePair],
        fetch: FetchOneWayFares,
        concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT
    ) -> List[RoundTripCandidate]:
    """Fetches both legs of every date pair concurrently and pairs them into round trips.

    One task runs per date pair. A task holds one of `concurrency_limit`
    semaphore permits while it fetches the outbound leg and then the inbound
    leg, so no more than `concurrency_limit` pairs are in flight at once.

    A failing task is logged and contributes no candidates; it never fails
    the whole call. Returns once every task has finished. The result is in
    completion order, callers rank it afterwards.

    Raises:
        ValueError: If `concurrency_limit` is lower than 1.
    """
    if concurrency_limit < 1:
        raise ValueError(f"concurrency_limit must be at least 1, got {concurrency_limit}")

    semaphore = asyncio.Semaphore(concurrency_limit)
    lock = asyncio.Lock()
    candidates: List[RoundTripCandidate] = []

    async def fetch_date_pair(date_pair: DatePair) -> int:
        async with semaphore:
            outbound_fares = await fetch(source, destination, date_pair.outbound_date)
            inbound_fares = await fetch(destination, source, date_pair.return_date)

        round_trips = pair_fares(outbound_fares, inbound_fares)
        async with lock:
            candidates.extend(round_trips)
        return len(round_trips)

    logger.debug(f"Fetching {len(date_pairs)} date pairs for {source}-{destination} with at most {concurrency_limit} in flight...")
    results = await asyncio.gather(
        *(fetch_date_pair(date_pair) for date_pair in date_pairs),
        return_exceptions=True
    )

    error_count = 0
    for date_pair, result in zip(date_pairs, results):
        if isinstance(result, BaseException):
            error_count += 1
            logger.warning(
                f"Failed to get fares for {source}-{destination} "
                f"[{date_pair.outbound_date} -> {date_pair.return_date}]: {result!r}"
            )
        else:
            logger.debug(f"{source}-{destination} [{date_pair.outbound_date} -> {date_pair.return_date}]: {result} round trips")

    logger.debug(f"Fan-out results: {len(date_pairs) - error_count} successes, {error_count} errors, {len(candidates)} round trips.")
    return candidates
