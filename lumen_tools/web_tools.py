import asyncio
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import aiohttp
from loguru import logger


@dataclass
class WebResponse:
    status: int
    data: Union[Dict[str, Any], str]  # JSON body or text
    headers: Optional[Dict[str, str]] = None
    elapsed_time: Optional[float] = None  # seconds


class HTTPSessionManager:
    """One aiohttp session, recreated after ``max_session_duration`` seconds."""

    def __init__(self, max_session_duration: int = 3600):
        self.session: Optional[aiohttp.ClientSession] = None
        self.session_start_time: float = 0.0
        self.max_session_duration = max_session_duration
        self._lock = asyncio.Lock()

    async def get_session(self) -> aiohttp.ClientSession:
        async with self._lock:
            current_time = time.monotonic()
            if (
                    self.session is None
                    or self.session.closed
                    or current_time - self.session_start_time > self.max_session_duration
            ):
                if self.session and not self.session.closed:
                    await self.session.close()
                self.session = aiohttp.ClientSession()
                self.session_start_time = current_time
                logger.debug("http session created")
            return self.session

    async def close(self):
        async with self._lock:
            if self.session and not self.session.closed:
                await self.session.close()
                logger.debug("http session closed")

    async def get_web_request(
            self,
            method: str,
            url: str,
            params: Optional[Dict[str, str]] = None,
            return_type: Optional[str] = None,
    ) -> WebResponse:
        """
        Perform an HTTP request on the shared session.

        :param method: HTTP method.
        :param url: Request URL.
        :param params: Query string parameters.
        :param return_type: 'json' to force JSON decoding.
        :return: WebResponse.
        :raises aiohttp.ClientError: on connection failure.
        """
        session = await self.get_session()
        start_time = time.monotonic()

        async with session.request(method.upper(), url, params=params) as response:
            content_type = response.headers.get("Content-Type", "")
            elapsed_time = time.monotonic() - start_time

            # Friendbot and Horizon answer problem+json on errors
            if "json" in content_type or return_type == "json":
                data = await response.json(content_type=None)
            else:
                data = await response.text()

            return WebResponse(
                status=response.status,
                data=data,
                headers=dict(response.headers),
                elapsed_time=elapsed_time,
            )
