import aiohttp
import asyncio
import logging
from typing import Optional

logger = logging.getLogger(__name__)

class SessionManager:
    SESSION_HEADERS = {
        "User-Agent":
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) " +
            "AppleWebKit/537.36 (KHTML, like Gecko) " +
            "Chrome/132.0.0.0 Safari/537.36",
        "Accept": "application/json"
    }

    def __init__(self, timeout: float):
        self._session: Optional[aiohttp.ClientSession] = None
        self._timeout = timeout
        self._lock = asyncio.Lock()

    async def get_session(self) -> aiohttp.ClientSession:
        """Gets the current aiohttp session, creating one if necessary."""
        async with self._lock:
            if self._session is None or self._session.closed:
                logger.debug("Creating new aiohttp ClientSession.")
                self._session = aiohttp.ClientSession(headers=self.SESSION_HEADERS)
            return self._session

    @property
    def timeout(self) -> float:
        return self._timeout

    def client_timeout(self) -> aiohttp.ClientTimeout:
        """Per-request timeout; a hung upstream call fails instead of blocking its task."""
        return aiohttp.ClientTimeout(total=self._timeout)

    async def close_session(self):
        """Closes the aiohttp session if it exists."""
        async with self._lock:
            if self._session and not self._session.closed:
                await self._session.close()
                self._session = None
                logger.debug("aiohttp ClientSession closed.")
