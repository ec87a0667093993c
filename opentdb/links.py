# opentdb/links.py
from typing import List, Optional

from opentdb.errors import InputValidationError
from opentdb.params import (
    Category,
    Difficulty,
    Encoding,
    QuestionType,
    category_id,
    difficulty_token,
    encoding_token,
    question_type_token,
    validate_category_id,
)

OTDB_BASE = "https://opentdb.com"
OTDB_AMOUNT_MIN = 1
OTDB_AMOUNT_MAX = 50


def validate_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InputValidationError(f"Question count must be an integer, got {count!r}.")
    if not OTDB_AMOUNT_MIN <= count <= OTDB_AMOUNT_MAX:
        raise InputValidationError(
            f"Question count must be between {OTDB_AMOUNT_MIN} and {OTDB_AMOUNT_MAX} (inclusive), got {count}."
        )
    return count


def build_link(
    count: int,
    category: Category = Category.ANY,
    difficulty: Difficulty = Difficulty.ANY,
    question_type: QuestionType = QuestionType.ANY,
    encoding: Encoding = Encoding.HTML,
    token: Optional[str] = None,
    base_url: str = OTDB_BASE,
) -> str:
    """Compose the api.php URL for a question request.

    Parameters left at their wildcard value are omitted. The order of the
    query components is fixed: amount, category, difficulty, type, encode,
    token.
    """
    validate_count(count)
    parts: List[str] = [f"amount={count}"]
    cid = category_id(category)
    if cid is not None:
        parts.append(f"category={cid}")
    diff = difficulty_token(difficulty)
    if diff is not None:
        parts.append(f"difficulty={diff}")
    qtype = question_type_token(question_type)
    if qtype is not None:
        parts.append(f"type={qtype}")
    enc = encoding_token(encoding)
    if enc is not None:
        parts.append(f"encode={enc}")
    if token:
        parts.append(f"token={token}")
    return f"{base_url}/api.php?" + "&".join(parts)


def token_request_link(base_url: str = OTDB_BASE) -> str:
    return f"{base_url}/api_token.php?command=request"


def token_reset_link(token: str, base_url: str = OTDB_BASE) -> str:
    return f"{base_url}/api_token.php?command=reset&token={token}"


def category_count_link(cid: int, base_url: str = OTDB_BASE) -> str:
    validate_category_id(cid)
    return f"{base_url}/api_count.php?category={cid}"


def global_count_link(base_url: str = OTDB_BASE) -> str:
    return f"{base_url}/api_count_global.php"


def category_list_link(base_url: str = OTDB_BASE) -> str:
    return f"{base_url}/api_category.php"
