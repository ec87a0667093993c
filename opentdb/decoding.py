# opentdb/decoding.py
import base64
import binascii
import json
import logging
from typing import Any, Dict, List, Mapping

from opentdb.errors import DecodeError, response_code_error
from opentdb.models import ApiCategory, CategoryCount, GlobalCategoryCount, GlobalCount, Question, SessionToken

log = logging.getLogger(__name__)

QUESTION_TEXT_FIELDS = ("type", "difficulty", "category", "question", "correct_answer")

GLOBAL_TOTAL_FIELDS = (
    "total_num_of_questions",
    "total_num_of_pending_questions",
    "total_num_of_verified_questions",
    "total_num_of_rejected_questions",
)


def parse_json(body: str) -> Dict[str, Any]:
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"JSON parsing failed: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}.")
    return data


def check_response_code(data: Mapping[str, Any]) -> None:
    if "response_code" not in data:
        raise DecodeError("Invalid response format. Response code is missing.")
    code = data["response_code"]
    if isinstance(code, bool) or not isinstance(code, int):
        raise DecodeError(f"Invalid response format. Response code {code!r} is not an integer.")
    if code != 0:
        err = response_code_error(code)
        log.warning("OpenTDB returned %s", err)
        raise err


def _object(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise DecodeError(f"Invalid response format. '{key}' must be an object.")
    return value


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"Invalid response format. '{key}' must be a string.")
    return value


def _count(data: Mapping[str, Any], key: str) -> int:
    # The count endpoints send numbers, older ones sent numeric strings.
    if key not in data:
        raise DecodeError(f"Invalid response format. '{key}' is missing.")
    value = data[key]
    if isinstance(value, bool):
        raise DecodeError(f"Invalid response format. '{key}' is not numeric: {value!r}")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        try:
            number = int(value)
        except ValueError:
            raise DecodeError(f"Invalid response format. '{key}' is not numeric: {value!r}") from None
    else:
        raise DecodeError(f"Invalid response format. '{key}' is not numeric: {value!r}")
    if number < 0:
        raise DecodeError(f"Invalid response format. '{key}' is negative: {number}")
    return number


def _question(item: Any) -> Question:
    if not isinstance(item, dict):
        raise DecodeError("Invalid response format. Question entry must be an object.")
    incorrect = item.get("incorrect_answers")
    if not isinstance(incorrect, list) or not all(isinstance(s, str) for s in incorrect):
        raise DecodeError("Invalid response format. 'incorrect_answers' must be a list of strings.")
    return Question(
        type=_text(item, "type"),
        difficulty=_text(item, "difficulty"),
        category=_text(item, "category"),
        question=_text(item, "question"),
        correct_answer=_text(item, "correct_answer"),
        incorrect_answers=tuple(incorrect),
    )


def decode_questions(body: str) -> List[Question]:
    data = parse_json(body)
    check_response_code(data)
    results = data.get("results")
    if not isinstance(results, list):
        raise DecodeError("Invalid response format. 'results' must be a list.")
    return [_question(item) for item in results]


def decode_token(body: str) -> SessionToken:
    data = parse_json(body)
    check_response_code(data)
    return SessionToken(_text(data, "token"))


def decode_category_count(body: str) -> CategoryCount:
    data = parse_json(body)
    counts = _object(data, "category_question_count")
    return CategoryCount(
        category_id=_count(data, "category_id"),
        total_questions=_count(counts, "total_question_count"),
        total_easy=_count(counts, "total_easy_question_count"),
        total_medium=_count(counts, "total_medium_question_count"),
        total_hard=_count(counts, "total_hard_question_count"),
    )


def _category_key(key: str) -> int:
    try:
        return int(key)
    except ValueError:
        raise DecodeError(f"Invalid response format. Category key {key!r} is not an integer.") from None


def decode_global_count(body: str) -> GlobalCount:
    data = parse_json(body)
    overall = _object(data, "overall")
    total, pending, verified, rejected = (_count(overall, k) for k in GLOBAL_TOTAL_FIELDS)

    categories: Dict[int, GlobalCategoryCount] = {}
    for key, entry in _object(data, "categories").items():
        cid = _category_key(key)
        if not isinstance(entry, dict):
            raise DecodeError(f"Invalid response format. Category {key} must be an object.")
        c_total, c_pending, c_verified, c_rejected = (_count(entry, k) for k in GLOBAL_TOTAL_FIELDS)
        categories[cid] = GlobalCategoryCount(
            category_id=cid,
            total_questions=c_total,
            pending=c_pending,
            verified=c_verified,
            rejected=c_rejected,
        )

    return GlobalCount(
        total_questions=total,
        total_pending=pending,
        total_verified=verified,
        total_rejected=rejected,
        categories=categories,
    )


def decode_categories(body: str) -> List[ApiCategory]:
    data = parse_json(body)
    cats = data.get("trivia_categories")
    if not isinstance(cats, list):
        raise DecodeError("Invalid response format. 'trivia_categories' must be a list.")
    out = []
    for c in cats:
        if not isinstance(c, dict):
            raise DecodeError("Invalid response format. Category entry must be an object.")
        out.append(ApiCategory(id=_count(c, "id"), name=_text(c, "name")))
    return out


def _b64decode(s: str) -> str:
    try:
        return base64.b64decode(s, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodeError(f"Base64 decoding failed for {s!r}: {e}") from e


def decode_question_text(q: Question) -> Question:
    """Reverse the base64 encoding on every text field of ``q``.

    Either every field decodes and a new Question is returned, or DecodeError
    is raised and ``q`` is left as it was.
    """
    fields = {name: _b64decode(getattr(q, name)) for name in QUESTION_TEXT_FIELDS}
    return Question(incorrect_answers=tuple(_b64decode(s) for s in q.incorrect_answers), **fields)
