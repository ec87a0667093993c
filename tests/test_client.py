"""Tests for the OpenTDBClient facade against a fake transport."""

import asyncio
import base64

import pytest

from opentdb.client import OpenTDBClient
from opentdb.config import Settings
from opentdb.errors import (
    DecodeError,
    InputValidationError,
    NoResultsError,
    TokenEmptyError,
    TokenUsageError,
    TransportError,
)
from opentdb.models import ApiCategory
from opentdb.params import Category, Difficulty, Encoding, QuestionType
from opentdb.session import Active

from tests.conftest import FakeTransport


def _b64(s: str) -> str:
    return base64.b64encode(s.encode("utf-8")).decode("ascii")


def _b64_item(**fields) -> dict:
    item = {
        "type": "boolean",
        "difficulty": "easy",
        "category": "Science & Nature",
        "question": "Water boils at 100°C at sea level.",
        "correct_answer": "True",
        "incorrect_answers": ["False"],
    }
    item.update(fields)
    encoded = {k: _b64(v) for k, v in item.items() if k != "incorrect_answers"}
    encoded["incorrect_answers"] = [_b64(v) for v in item["incorrect_answers"]]
    return encoded


class TestTokenScenarios:
    def test_initialize_then_link_has_token(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue({"response_code": 0, "token": "abc"})
        asyncio.run(client.initialize_token())
        assert isinstance(client.token_state, Active)
        assert client.token == "abc"
        assert client.build_link(10).endswith("&token=abc")

    def test_reset_without_initialize(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        with pytest.raises(TokenUsageError):
            asyncio.run(client.reset_token())
        assert transport.urls == []

    def test_exhausted_token_then_reset(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue({"response_code": 0, "token": "abc"})
        transport.queue({"response_code": 4, "results": []})
        transport.queue({"response_code": 0, "token": "abc"})

        async def scenario() -> None:
            await client.initialize_token()
            with pytest.raises(TokenEmptyError):
                await client.get_questions_with_encoding(5)
            await client.reset_token()

        asyncio.run(scenario())
        assert transport.urls[1] == "https://opentdb.com/api.php?amount=5&token=abc"
        assert transport.urls[2] == "https://opentdb.com/api_token.php?command=reset&token=abc"
        assert client.token == "abc"


class TestQuestions:
    def test_get_questions_requests_base64_and_decodes(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue({"response_code": 0, "results": [_b64_item(), _b64_item(question="Ça va? ✓")]})
        questions = asyncio.run(client.get_questions(2, Category.NATURE, Difficulty.EASY, QuestionType.TRUE_FALSE))
        assert transport.urls == [
            "https://opentdb.com/api.php?amount=2&category=17&difficulty=easy&type=boolean&encode=base64"
        ]
        assert [q.question for q in questions] == ["Water boils at 100°C at sea level.", "Ça va? ✓"]
        assert questions[0].incorrect_answers == ("False",)
        assert questions[0].category == "Science & Nature"

    def test_get_questions_with_encoding_leaves_text(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        item = {
            "type": "multiple",
            "difficulty": "hard",
            "category": "History",
            "question": "Who said &quot;I came, I saw&quot;?",
            "correct_answer": "Julius Caesar",
            "incorrect_answers": ["Nero", "Augustus", "Cicero"],
        }
        transport.queue({"response_code": 0, "results": [item]})
        questions = asyncio.run(client.get_questions_with_encoding(1, Category.HISTORY))
        assert transport.urls == ["https://opentdb.com/api.php?amount=1&category=23"]
        assert questions[0].question == "Who said &quot;I came, I saw&quot;?"

    def test_with_encoding_url3986(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue({"response_code": 0, "results": []})
        assert asyncio.run(client.get_questions_with_encoding(3, encoding=Encoding.URL)) == []
        assert transport.urls == ["https://opentdb.com/api.php?amount=3&encode=url3986"]

    @pytest.mark.parametrize("count", [0, 51])
    def test_invalid_count_makes_no_request(self, client: OpenTDBClient, transport: FakeTransport, count: int) -> None:
        with pytest.raises(InputValidationError):
            asyncio.run(client.get_questions(count))
        assert transport.urls == []

    def test_no_results(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue({"response_code": 1, "results": []})
        with pytest.raises(NoResultsError):
            asyncio.run(client.get_questions(50, Category.POLITICS))

    def test_bad_base64_fails_whole_call(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        good = _b64_item()
        bad = dict(_b64_item(), question="%%%")
        transport.queue({"response_code": 0, "results": [good, bad]})
        with pytest.raises(DecodeError):
            asyncio.run(client.get_questions(2))

    def test_transport_error_propagates(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue(TransportError("connection refused", url="x"))
        with pytest.raises(TransportError):
            asyncio.run(client.get_questions(1))


class TestCounts:
    CATEGORY_BODY = {
        "category_id": 18,
        "category_question_count": {
            "total_question_count": 250,
            "total_easy_question_count": 60,
            "total_medium_question_count": 110,
            "total_hard_question_count": 80,
        },
    }

    def test_category_totals_by_enum(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue(self.CATEGORY_BODY)
        count = asyncio.run(client.get_category_question_totals(Category.COMPUTERS))
        assert transport.urls == ["https://opentdb.com/api_count.php?category=18"]
        assert count.category_id == 18
        assert count.total_medium == 110

    def test_category_totals_any_rejected(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        with pytest.raises(InputValidationError):
            asyncio.run(client.get_category_question_totals(Category.ANY))
        assert transport.urls == []

    def test_category_totals_by_id(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue(self.CATEGORY_BODY)
        count = asyncio.run(client.get_category_question_totals_by_id(18))
        assert count.total_questions == 250

    @pytest.mark.parametrize("cid", [8, 33])
    def test_category_totals_by_id_out_of_range(
        self, client: OpenTDBClient, transport: FakeTransport, cid: int
    ) -> None:
        with pytest.raises(InputValidationError):
            asyncio.run(client.get_category_question_totals_by_id(cid))
        assert transport.urls == []

    def test_global_totals(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        entry = {
            "total_num_of_questions": 100,
            "total_num_of_pending_questions": 1,
            "total_num_of_verified_questions": 98,
            "total_num_of_rejected_questions": 1,
        }
        transport.queue({"overall": entry, "categories": {"9": entry, "17": entry}})
        totals = asyncio.run(client.get_global_question_totals())
        assert transport.urls == ["https://opentdb.com/api_count_global.php"]
        assert totals.total_questions == 100
        assert set(totals.categories) == {9, 17}

    def test_categories(self, client: OpenTDBClient, transport: FakeTransport) -> None:
        transport.queue({"trivia_categories": [{"id": 9, "name": "General Knowledge"}]})
        assert asyncio.run(client.get_categories()) == [ApiCategory(9, "General Knowledge")]


class TestConstruction:
    def test_from_settings(self) -> None:
        transport = FakeTransport({"response_code": 0, "results": []})
        client = OpenTDBClient.from_settings(Settings(base_url="http://localhost:1234"), transport=transport)
        asyncio.run(client.get_questions_with_encoding(1))
        assert transport.urls == ["http://localhost:1234/api.php?amount=1"]

    def test_trailing_slash_stripped(self) -> None:
        client = OpenTDBClient(transport=FakeTransport(), base_url="https://opentdb.com/")
        assert client.build_link(1) == "https://opentdb.com/api.php?amount=1"

    def test_close_leaves_external_transport_alone(self) -> None:
        transport = FakeTransport()

        async def scenario() -> None:
            async with OpenTDBClient(transport=transport) as c:
                assert c.token is None

        asyncio.run(scenario())
