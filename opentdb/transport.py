# opentdb/transport.py
import asyncio
import logging
import re
from typing import Optional, Protocol

import aiohttp

from opentdb.errors import TransportError

log = logging.getLogger(__name__)

ACCEPT_JSON = {"Accept": "application/json"}

_TOKEN_PARAM = re.compile(r"(token=)[^&]*")


def redact(url: str) -> str:
    return _TOKEN_PARAM.sub(r"\1***", url)


class Transport(Protocol):
    async def send(self, url: str) -> str:
        """GET ``url`` and return the response body."""
        ...


class AiohttpTransport:
    """Default transport on top of an aiohttp ClientSession.

    A session passed in stays owned by the caller. Without one, a session is
    opened on first use and closed by ``close()`` / leaving the ``async with``
    block.

    Error statuses with a JSON body are passed through, since the service
    reports failures (rate limiting included) through ``response_code``.
    Any other status of 400 or above is a TransportError.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=ACCEPT_JSON)
            self._owns_session = True
        return self._session

    async def send(self, url: str) -> str:
        session = await self._get_session()
        log.debug("GET %s", redact(url))
        try:
            async with session.get(url, headers=ACCEPT_JSON) as r:
                body = await r.text(errors="replace")
                log.debug("GET %s -> HTTP %s (%d bytes)", redact(url), r.status, len(body))
                # JSON error bodies carry a response_code (429 comes with code 5)
                if r.status >= 400 and r.content_type != "application/json":
                    raise TransportError(f"HTTP {r.status}", url=url)
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"HTTP request failed: {e}", url=url) from e

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
