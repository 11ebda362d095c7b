from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

import httpx

from veryhttp.config import ClientConfig
from veryhttp.error import ClientError, TimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseView:
    """Read-only view of a received HTTP response."""

    http_version: str
    status_code: int
    headers: Tuple[Tuple[str, str], ...]
    content_type: Optional[str]
    text: str

    @classmethod
    def from_response(cls, response: httpx.Response) -> ResponseView:
        """Build a view from a response whose body was already read."""
        return cls(
            http_version=response.http_version,
            status_code=response.status_code,
            headers=tuple(response.headers.multi_items()),
            content_type=parse_content_type(response.headers.get("content-type")),
            text=response.text,
        )


def parse_content_type(value: Optional[str]) -> Optional[str]:
    """Returns a Content-Type header value normalized for comparison, or None
    if the value is missing or is not a media type.

    The media type is lowercased and whitespace around the type and its
    parameters is removed. Parameters are kept, so
    "Application/JSON ;charset=UTF-8" becomes "application/json; charset=utf-8"
    and does not compare equal to "application/json".
    """
    if value is None:
        return None
    parts = [part.strip().lower() for part in value.split(";")]
    type_, sep, subtype = parts[0].partition("/")
    if not sep or not type_.strip() or not subtype.strip():
        return None
    parts[0] = f"{type_.strip()}/{subtype.strip()}"
    return "; ".join(part for part in parts if part)


class Client:
    """HTTP client issuing requests with a fixed set of default headers."""

    __slots__ = ("config", "_client")

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Create a new client.

        Args:
            config: Configuration of the client. Uses ClientConfig() by
                default.

            transport: Transport to send requests through, tests use it to
                plug an httpx.MockTransport. Uses the httpx default transport
                when omitted.
        """
        if config is None:
            config = ClientConfig()
        self.config = config
        self._client = httpx.AsyncClient(
            headers=config.headers,
            timeout=config.timeout,
            follow_redirects=config.follow_redirects,
            max_redirects=config.max_redirects,
            transport=transport,
        )

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def get(self, url: str) -> ResponseView:
        """Issue a GET request without a body."""
        request = self._client.build_request("GET", url)
        return await self._send(request)

    async def post(self, url: str, body: Mapping[str, str]) -> ResponseView:
        """Issue a POST request with body serialized as a JSON object."""
        request = self._client.build_request("POST", url, json=dict(body))
        return await self._send(request)

    async def _send(self, request: httpx.Request) -> ResponseView:
        logger.debug("sending %s request to %s", request.method, request.url)
        try:
            response = await self._client.send(request, stream=True)
            try:
                await response.aread()
            finally:
                await response.aclose()
        except httpx.TimeoutException as e:
            raise TimeoutError(f"{request.method} {request.url}: timed out") from e
        except httpx.RequestError as e:
            reason = str(e) or type(e).__name__
            raise ClientError(f"{request.method} {request.url}: {reason}") from e

        logger.debug(
            "received response %s %d with %d byte(s) of body",
            response.http_version,
            response.status_code,
            len(response.content),
        )
        return ResponseView.from_response(response)
