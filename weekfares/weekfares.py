import logging
import asyncio
import aiohttp
import xxhash

from typing import Optional, Tuple, List, Dict, Union
from datetime import date, datetime

from .config import Config
from .dates import expand_weekday_pairs, parse_date
from .exceptions import FetchError
from .fanout import fetch_round_trips
from .fares import rank_round_trips
from .payload import get_one_way_fares_payload
from .session_manager import SessionManager
from .types import FareQuote, Price, RoundTripCandidate
from .utils.timer import Timer

logger = logging.getLogger("weekfares")

class FareClient:
    """Async client for the Ryanair one-way fares endpoint.

    Use as an async context manager so the underlying session gets closed::

        async with FareClient() as client:
            trips = await client.search_cheapest_round_trips(
                "DUB", "STN", "2024-04-18", "2024-08-18", "monday", "sunday"
            )
    """
    ONE_WAY_FARES_PATH = "farfnd/v4/oneWayFares"

    def __init__(
            self,
            timeout: Optional[float] = None,
            concurrency_limit: Optional[int] = None,
            USD: Optional[bool] = None,
            base_url: Optional[str] = None,
            config: Optional[Config] = None
        ) -> None:

        config = config or Config()
        self._concurrency_limit = config.concurrency_limit if concurrency_limit is None else concurrency_limit
        self._base_url = (base_url or config.base_url).rstrip("/") + "/"

        usd = config.usd if USD is None else USD
        if usd:
            self._market = "en-us"
        else:
            self._market = "it-it"

        timeout = config.timeout if timeout is None else timeout
        if self._concurrency_limit < 1:
            raise ValueError(f"concurrency_limit must be at least 1, got {self._concurrency_limit}")
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self.sm = SessionManager(timeout=timeout)

    @property
    def concurrency_limit(self) -> int:
        return self._concurrency_limit

    async def get_one_way_fares(
            self,
            origin: str,
            destination: str,
            departure_date: Union[str, date]
        ) -> List[FareQuote]:
        """Gets the one-way fares departing on a single day.

        A non-success HTTP status is logged and treated as "no fares".

        Raises:
            InvalidDateFormat: If `departure_date` is not a YYYY-MM-DD date.
            FetchError: On connection errors, timeouts, non-JSON or malformed responses.
        """
        departure_date = parse_date(departure_date)
        url = self._one_way_fares_url()
        payload = get_one_way_fares_payload(
            origin=origin,
            destination=destination,
            departure_date=departure_date,
            market=self._market
        )
        params = self._prepare_params_for_aiohttp(payload.to_dict())
        trip = f"{origin}-{destination} on {departure_date}"

        session = await self.sm.get_session()
        logger.debug(f"GET {url} with params: {params}")
        try:
            async with session.get(url, params=params, timeout=self.sm.client_timeout()) as res:
                if not res.ok:
                    logger.warning(f"One-way fares request for {trip} returned HTTP {res.status}, treating as no fares.")
                    return []
                data = await res.json()
        except aiohttp.ContentTypeError as e:
            raise FetchError(f"One-way fares response for {trip} is not JSON: {e.message}") from e
        except asyncio.TimeoutError as e:
            raise FetchError(f"One-way fares request for {trip} timed out after {self.sm.timeout}s") from e
        except aiohttp.ClientError as e:
            raise FetchError(f"One-way fares request for {trip} failed: {type(e).__name__} - {e}") from e
        except ValueError as e:
            raise FetchError(f"One-way fares response for {trip} is not valid JSON: {e}") from e

        fares = self.parse_one_way_fares(data)
        logger.debug(f"Found {len(fares)} fares for {trip}")
        return fares

    async def get_return_fares(
            self,
            origin: str,
            destination: str,
            outbound_date: Union[str, date],
            return_date: Union[str, date]
        ) -> Tuple[List[FareQuote], List[FareQuote]]:
        """Gets the outbound fares on `outbound_date` and the inbound fares on `return_date`."""
        outbound = await self.get_one_way_fares(origin, destination, outbound_date)
        inbound = await self.get_one_way_fares(destination, origin, return_date)
        return outbound, inbound

    async def search_cheapest_round_trips(
            self,
            origin: str,
            destination: str,
            from_date: Union[str, date],
            to_date: Union[str, date],
            outbound_weekday: str,
            return_weekday: str,
            concurrency_limit: Optional[int] = None
        ) -> List[RoundTripCandidate]:
        """Searches every week of the date range for round trips, cheapest first.

        Flies out on `outbound_weekday` and back on `return_weekday`. Date
        pairs whose fares cannot be fetched are logged and skipped.

        Raises:
            InvalidDateFormat: If `from_date` or `to_date` is not a YYYY-MM-DD date.
            InvalidWeekdayName: If a weekday is not an English weekday name.
        """
        date_pairs = expand_weekday_pairs(from_date, to_date, outbound_weekday, return_weekday)
        limit = self._concurrency_limit if concurrency_limit is None else concurrency_limit

        timer = Timer(start=True)
        candidates = await fetch_round_trips(
            source=origin,
            destination=destination,
            date_pairs=date_pairs,
            fetch=self.get_one_way_fares,
            concurrency_limit=limit
        )
        ranked = rank_round_trips(candidates)
        timer.stop()

        logger.info(
            f"Scraped {origin}-{destination} {outbound_weekday}/{return_weekday} round trips "
            f"over {len(date_pairs)} weeks in {timer.seconds_elapsed}s. Found {len(ranked)}."
        )
        return ranked

    @classmethod
    def parse_one_way_fares(cls, data: Dict) -> List[FareQuote]:
        """Maps a oneWayFares JSON body to `FareQuote` objects.

        Raises:
            FetchError: If the body does not have the expected structure.
        """
        try:
            return [cls._parse_outbound(fare['outbound']) for fare in data['fares']]
        except (KeyError, TypeError, ValueError) as e:
            raise FetchError(f"Malformed one-way fares response: {type(e).__name__} - {e}") from e

    @staticmethod
    def _parse_outbound(info: Dict) -> FareQuote:
        price = info['price']
        return FareQuote(
            origin=info['departureAirport']['iataCode'],
            destination=info['arrivalAirport']['iataCode'],
            origin_name=info['departureAirport'].get('name', ""),
            destination_name=info['arrivalAirport'].get('name', ""),
            departure_date=datetime.fromisoformat(info['departureDate']),
            arrival_date=datetime.fromisoformat(info['arrivalDate']),
            price=Price(
                value=float(price['value']),
                currency_code=price.get('currencyCode', ""),
                currency_symbol=price.get('currencySymbol', "")
            ),
            flight_key=info.get('flightKey', ""),
            flight_number=info.get('flightNumber', "")
        )

    @staticmethod
    def _prepare_params_for_aiohttp(params_dict: Dict) -> Dict[str, str]:
        """Converts parameter values to strings suitable for aiohttp query params."""
        params_str = {}
        for k, v in params_dict.items():
            if isinstance(v, date):
                params_str[k] = v.isoformat()
            else:
                params_str[k] = str(v)
        return params_str

    @staticmethod
    def get_flight_key(fare: FareQuote) -> str:
        if fare.flight_key:
            return fare.flight_key
        return f"{fare.origin}({fare.departure_date}):{fare.destination}({fare.arrival_date})"

    @classmethod
    def get_trip_key(cls, candidate: RoundTripCandidate) -> str:
        """Short stable identifier of a round trip, derived from both legs."""
        key = f"{cls.get_flight_key(candidate.outbound)}|{cls.get_flight_key(candidate.inbound)}"
        return xxhash.xxh64(key.encode("utf-8")).hexdigest()

    def _one_way_fares_url(self) -> str:
        return self._base_url + self.ONE_WAY_FARES_PATH

    async def __aenter__(self):
        await self.sm.get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Closes the underlying session on exiting the async context."""
        await self.sm.close_session()
