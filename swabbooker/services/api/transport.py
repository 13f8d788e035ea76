"""HTTP transport for the booking API - one aiohttp session, JSON in and out."""

import json
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import aiohttp
from loguru import logger

from ...core.exceptions import HttpStatusError, ResponseParseError


def build_query(params: Mapping[str, Any]) -> str:
    """
    Build a percent-encoded query string, keeping key order.

    Example: {"a": "1", "b": "2 3"} -> "a=1&b=2+3"
    """
    return urlencode(params)


class ApiTransport:
    """
    Issues GET/POST requests against a fixed base URL.

    Every response body is parsed as JSON regardless of status; a body that
    does not parse raises ResponseParseError, a status >= 300 raises
    HttpStatusError. There is no retry.
    """

    def __init__(self, base_url: str, user_agent: str, timeout: Optional[float] = None):
        """
        Initialize API transport.

        Args:
            base_url: API root, paths are appended verbatim
            user_agent: Identifying header sent with every request
            timeout: Total request timeout in seconds (None waits forever)
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._http_session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "ApiTransport":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def open(self) -> None:
        """Initialize HTTP session."""
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession(
                headers={"accept": "application/json", "user-agent": self.user_agent},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
            logger.debug(f"HTTP session opened for {self.base_url}")

    async def close(self) -> None:
        """Close HTTP session."""
        if self._http_session:
            await self._http_session.close()
            self._http_session = None

    @property
    def _session(self) -> aiohttp.ClientSession:
        if self._http_session is None:
            raise RuntimeError("HTTP session not initialized. Call open() first.")
        return self._http_session

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, body)

    async def request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send one request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path below base_url, may carry a query string
            body: Optional JSON-serializable body

        Returns:
            Parsed JSON response

        Raises:
            ResponseParseError: If the body is not valid UTF-8 JSON
            HttpStatusError: If the status is 300 or above
        """
        logger.debug(f"{method} {path} {body if body is not None else ''}".rstrip())

        headers: Dict[str, str] = {}
        data: Optional[bytes] = None
        if body is not None:
            headers["content-type"] = "application/json"
            data = json.dumps(body).encode("utf-8")

        async with self._session.request(
            method, f"{self.base_url}{path}", headers=headers, data=data
        ) as response:
            status = response.status
            raw = await response.read()

        try:
            payload = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            raise ResponseParseError(path, str(e), status=status) from e

        logger.debug(f"Received: {status} {payload}")

        if status >= 300:
            raise HttpStatusError(status, path, payload)

        return payload
