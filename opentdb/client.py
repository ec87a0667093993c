# opentdb/client.py
import logging
from typing import List, Optional

from opentdb.config import Settings
from opentdb.decoding import (
    decode_categories,
    decode_category_count,
    decode_global_count,
    decode_question_text,
    decode_questions,
)
from opentdb.errors import InputValidationError
from opentdb.links import (
    OTDB_BASE,
    build_link,
    category_count_link,
    category_list_link,
    global_count_link,
)
from opentdb.models import ApiCategory, CategoryCount, GlobalCount, Question
from opentdb.params import Category, Difficulty, Encoding, QuestionType, category_id
from opentdb.session import SessionTokenManager, TokenState
from opentdb.transport import AiohttpTransport, Transport

log = logging.getLogger(__name__)


class OpenTDBClient:
    """Async client for https://opentdb.com.

    Usage::

        async with OpenTDBClient() as client:
            await client.initialize_token()
            questions = await client.get_questions(10, Category.COMPUTERS)

    The service allows one request per IP every 5 seconds and answers faster
    callers with response code 5 (RateLimitError). Nothing here waits or
    retries; every failure is raised to the caller.
    """

    def __init__(self, transport: Optional[Transport] = None, base_url: str = OTDB_BASE):
        self._owned_transport: Optional[AiohttpTransport] = None
        if transport is None:
            transport = self._owned_transport = AiohttpTransport()
        self._transport = transport
        self.base_url = base_url.rstrip("/")
        self._tokens = SessionTokenManager(transport, self.base_url)

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[Transport] = None) -> "OpenTDBClient":
        return cls(transport=transport, base_url=settings.base_url)

    async def close(self) -> None:
        if self._owned_transport is not None:
            await self._owned_transport.close()

    async def __aenter__(self) -> "OpenTDBClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    # session token

    @property
    def token(self) -> Optional[str]:
        return self._tokens.token

    @property
    def token_state(self) -> TokenState:
        return self._tokens.state

    async def initialize_token(self) -> None:
        """Request a session token unless one is already held."""
        await self._tokens.initialize()

    async def reset_token(self) -> None:
        """Reset the held token. Call this after TokenNotFoundError or TokenEmptyError."""
        await self._tokens.reset()

    # questions

    def build_link(
        self,
        count: int,
        category: Category = Category.ANY,
        difficulty: Difficulty = Difficulty.ANY,
        question_type: QuestionType = QuestionType.ANY,
        encoding: Encoding = Encoding.HTML,
    ) -> str:
        return build_link(count, category, difficulty, question_type, encoding, self._tokens.token, self.base_url)

    async def get_questions(
        self,
        count: int,
        category: Category = Category.ANY,
        difficulty: Difficulty = Difficulty.ANY,
        question_type: QuestionType = QuestionType.ANY,
    ) -> List[Question]:
        """Fetch questions as plain text.

        The request always asks for base64 so the text survives any special
        characters, and the answer is decoded before returning.
        """
        questions = await self.get_questions_with_encoding(count, category, difficulty, question_type, Encoding.BASE64)
        return [decode_question_text(q) for q in questions]

    async def get_questions_with_encoding(
        self,
        count: int,
        category: Category = Category.ANY,
        difficulty: Difficulty = Difficulty.ANY,
        question_type: QuestionType = QuestionType.ANY,
        encoding: Encoding = Encoding.HTML,
    ) -> List[Question]:
        """Fetch questions with their text left in the requested encoding."""
        url = self.build_link(count, category, difficulty, question_type, encoding)
        questions = decode_questions(await self._transport.send(url))
        log.debug("Fetched %d questions", len(questions))
        return questions

    # counts

    async def get_category_question_totals(self, category: Category) -> CategoryCount:
        cid = category_id(category)
        if cid is None:
            raise InputValidationError("A specific category is required for question totals.")
        return await self.get_category_question_totals_by_id(cid)

    async def get_category_question_totals_by_id(self, cid: int) -> CategoryCount:
        url = category_count_link(cid, self.base_url)
        return decode_category_count(await self._transport.send(url))

    async def get_global_question_totals(self) -> GlobalCount:
        return decode_global_count(await self._transport.send(global_count_link(self.base_url)))

    async def get_categories(self) -> List[ApiCategory]:
        return decode_categories(await self._transport.send(category_list_link(self.base_url)))
