# opentdb/__init__.py
import logging

from opentdb.client import OpenTDBClient
from opentdb.errors import (
    DecodeError,
    InputValidationError,
    InvalidParameterError,
    NoResultsError,
    OpenTDBError,
    RateLimitError,
    ResponseCodeError,
    TokenEmptyError,
    TokenNotFoundError,
    TokenUsageError,
    TransportError,
    UnknownResponseCodeError,
)
from opentdb.models import ApiCategory, CategoryCount, GlobalCategoryCount, GlobalCount, Question, SessionToken
from opentdb.params import Category, Difficulty, Encoding, QuestionType

# Library code only logs; handlers are installed by applications.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiCategory",
    "Category",
    "CategoryCount",
    "DecodeError",
    "Difficulty",
    "Encoding",
    "GlobalCategoryCount",
    "GlobalCount",
    "InputValidationError",
    "InvalidParameterError",
    "NoResultsError",
    "OpenTDBClient",
    "OpenTDBError",
    "Question",
    "QuestionType",
    "RateLimitError",
    "ResponseCodeError",
    "SessionToken",
    "TokenEmptyError",
    "TokenNotFoundError",
    "TokenUsageError",
    "TransportError",
    "UnknownResponseCodeError",
]
