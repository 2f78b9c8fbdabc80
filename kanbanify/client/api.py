"""HTTP client for the Kanbanify API."""

import logging
from typing import Any, Dict, Optional

import httpx

from kanbanify.config import settings

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"


class ApiError(Exception):
    """A non-2xx response, carrying the server's ``error`` message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ApiClient:
    """Thin JSON wrapper around :class:`httpx.AsyncClient`.

    Every failure response is turned into an :class:`ApiError` whose message
    is the ``error`` field of the server's envelope.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            transport=transport,
            timeout=timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS,
            headers={"Content-Type": "application/json"},
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        response = await self._client.request(method, path, json=json, params=params, headers=headers)

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            message = payload.get("error") if isinstance(payload, dict) else None
            logger.debug("%s %s failed with %s: %s", method, path, response.status_code, message)
            raise ApiError(message or DEFAULT_ERROR_MESSAGE, response.status_code)

        return response.json()

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
