from .logger import *

from .weekfares import FareClient
from .config import Config, load_config
from .dates import expand_weekday_pairs
from .exceptions import (
    WeekFaresError, InvalidDateFormat, InvalidWeekdayName, FetchError, CurrencyMismatch, ConfigError
)
from .fanout import fetch_round_trips, DEFAULT_CONCURRENCY_LIMIT
from .fares import pair_fares, rank_round_trips
from .types import DatePair, FareQuote, Price, RoundTripCandidate

__version__ = "0.1.0"
