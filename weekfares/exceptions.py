class WeekFaresError(Exception):
    """Base class for every error raised by the weekfares package."""


class InvalidDateFormat(WeekFaresError, ValueError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD")


class InvalidWeekdayName(WeekFaresError, ValueError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"Invalid weekday name {value!r}, expected monday ... sunday")


class FetchError(WeekFaresError):
    """A one-way fares lookup failed (network, timeout, non-JSON or malformed body)."""


class CurrencyMismatch(WeekFaresError, ValueError):
    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot add prices in {left} and {right}")


class ConfigError(WeekFaresError):
    pass
