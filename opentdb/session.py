# opentdb/session.py
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Union

from opentdb.decoding import decode_token
from opentdb.errors import TokenNotFoundError, TokenUsageError
from opentdb.links import OTDB_BASE, token_request_link, token_reset_link
from opentdb.models import SessionToken
from opentdb.transport import Transport

log = logging.getLogger(__name__)


class Unset:
    """No token has been requested yet."""

    def __repr__(self) -> str:
        return "Unset()"


UNSET = Unset()


@dataclass(frozen=True)
class Active:
    token: SessionToken


TokenState = Union[Unset, Active]


class SessionTokenManager:
    """Owns the session token of one client.

    The service uses the token to avoid handing out the same question twice
    (for up to 6 hours of inactivity). When a question request fails with
    code 3 (token not found) or 4 (token empty) the caller should call
    ``reset()``; nothing here resets on its own.
    """

    def __init__(self, transport: Transport, base_url: str = OTDB_BASE):
        self._transport = transport
        self._base_url = base_url
        self._state: TokenState = UNSET
        self._lock = asyncio.Lock()

    @property
    def state(self) -> TokenState:
        return self._state

    @property
    def token(self) -> Optional[str]:
        if isinstance(self._state, Active):
            return self._state.token.value
        return None

    async def initialize(self) -> None:
        async with self._lock:
            if isinstance(self._state, Active):
                return
            self._state = Active(await self._request())
            log.info("Session token initialized")

    async def reset(self) -> None:
        async with self._lock:
            state = self._state
            if not isinstance(state, Active):
                raise TokenUsageError("You cannot reset a token that was never set.")
            try:
                body = await self._transport.send(token_reset_link(state.token.value, self._base_url))
                new_token = decode_token(body)
            except TokenNotFoundError:
                log.info("Session token no longer exists on the server, requesting a new one")
                new_token = await self._request()
            self._state = Active(new_token)
            log.info("Session token reset")

    async def _request(self) -> SessionToken:
        body = await self._transport.send(token_request_link(self._base_url))
        return decode_token(body)
