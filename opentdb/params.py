# opentdb/params.py
from enum import Enum
from typing import Dict, Optional

from opentdb.errors import InputValidationError

CATEGORY_ID_MIN = 9
CATEGORY_ID_MAX = 32


class Category(Enum):
    ANY = "any"
    GENERAL_KNOWLEDGE = "general_knowledge"
    BOOKS = "books"
    FILM = "film"
    MUSIC = "music"
    MUSICALS_THEATRES = "musicals_theatres"
    TELEVISION = "television"
    VIDEO_GAMES = "video_games"
    BOARD_GAMES = "board_games"
    NATURE = "nature"
    COMPUTERS = "computers"
    MATHEMATICS = "mathematics"
    MYTHOLOGY = "mythology"
    SPORTS = "sports"
    GEOGRAPHY = "geography"
    HISTORY = "history"
    POLITICS = "politics"
    ART = "art"
    CELEBRITIES = "celebrities"
    ANIMALS = "animals"
    VEHICLES = "vehicles"
    COMICS = "comics"
    GADGETS = "gadgets"
    ANIME_MANGA = "anime_manga"
    CARTOONS_ANIMATIONS = "cartoons_animations"

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]

    @classmethod
    def from_id(cls, category_id: int) -> "Category":
        validate_category_id(category_id)
        return _CATEGORY_BY_ID[category_id]


class Difficulty(Enum):
    ANY = "any"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionType(Enum):
    ANY = "any"
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"


class Encoding(Enum):
    HTML = "html"
    LEGACY_URL = "legacy_url"
    URL = "url"
    BASE64 = "base64"


# Wire tables. None means "leave the parameter out of the query".
_CATEGORY_IDS: Dict[Category, Optional[int]] = {
    Category.ANY: None,
    Category.GENERAL_KNOWLEDGE: 9,
    Category.BOOKS: 10,
    Category.FILM: 11,
    Category.MUSIC: 12,
    Category.MUSICALS_THEATRES: 13,
    Category.TELEVISION: 14,
    Category.VIDEO_GAMES: 15,
    Category.BOARD_GAMES: 16,
    Category.NATURE: 17,
    Category.COMPUTERS: 18,
    Category.MATHEMATICS: 19,
    Category.MYTHOLOGY: 20,
    Category.SPORTS: 21,
    Category.GEOGRAPHY: 22,
    Category.HISTORY: 23,
    Category.POLITICS: 24,
    Category.ART: 25,
    Category.CELEBRITIES: 26,
    Category.ANIMALS: 27,
    Category.VEHICLES: 28,
    Category.COMICS: 29,
    Category.GADGETS: 30,
    Category.ANIME_MANGA: 31,
    Category.CARTOONS_ANIMATIONS: 32,
}

_CATEGORY_NAMES: Dict[Category, str] = {
    Category.ANY: "Any Category",
    Category.GENERAL_KNOWLEDGE: "General Knowledge",
    Category.BOOKS: "Entertainment: Books",
    Category.FILM: "Entertainment: Film",
    Category.MUSIC: "Entertainment: Music",
    Category.MUSICALS_THEATRES: "Entertainment: Musicals & Theatres",
    Category.TELEVISION: "Entertainment: Television",
    Category.VIDEO_GAMES: "Entertainment: Video Games",
    Category.BOARD_GAMES: "Entertainment: Board Games",
    Category.NATURE: "Science & Nature",
    Category.COMPUTERS: "Science: Computers",
    Category.MATHEMATICS: "Science: Mathematics",
    Category.MYTHOLOGY: "Mythology",
    Category.SPORTS: "Sports",
    Category.GEOGRAPHY: "Geography",
    Category.HISTORY: "History",
    Category.POLITICS: "Politics",
    Category.ART: "Art",
    Category.CELEBRITIES: "Celebrities",
    Category.ANIMALS: "Animals",
    Category.VEHICLES: "Vehicles",
    Category.COMICS: "Entertainment: Comics",
    Category.GADGETS: "Science: Gadgets",
    Category.ANIME_MANGA: "Entertainment: Japanese Anime & Manga",
    Category.CARTOONS_ANIMATIONS: "Entertainment: Cartoon & Animations",
}

_DIFFICULTY_TOKENS: Dict[Difficulty, Optional[str]] = {
    Difficulty.ANY: None,
    Difficulty.EASY: "easy",
    Difficulty.MEDIUM: "medium",
    Difficulty.HARD: "hard",
}

_QUESTION_TYPE_TOKENS: Dict[QuestionType, Optional[str]] = {
    QuestionType.ANY: None,
    QuestionType.MULTIPLE_CHOICE: "multiple",
    QuestionType.TRUE_FALSE: "boolean",
}

_ENCODING_TOKENS: Dict[Encoding, Optional[str]] = {
    Encoding.HTML: None,
    Encoding.LEGACY_URL: "urlLegacy",
    Encoding.URL: "url3986",
    Encoding.BASE64: "base64",
}


def _require_exhaustive(enum_cls, table: Dict) -> None:
    missing = [member.name for member in enum_cls if member not in table]
    if missing:
        raise TypeError(f"{enum_cls.__name__} has no wire mapping for: {', '.join(missing)}")


for _enum_cls, _table in (
    (Category, _CATEGORY_IDS),
    (Category, _CATEGORY_NAMES),
    (Difficulty, _DIFFICULTY_TOKENS),
    (QuestionType, _QUESTION_TYPE_TOKENS),
    (Encoding, _ENCODING_TOKENS),
):
    _require_exhaustive(_enum_cls, _table)

_CATEGORY_BY_ID: Dict[int, Category] = {cid: c for c, cid in _CATEGORY_IDS.items() if cid is not None}
_CATEGORY_BY_NAME: Dict[str, Category] = {name.lower(): c for c, name in _CATEGORY_NAMES.items()}

ANY_CATEGORY_ALIASES = ("any", "any category", "all", "random")


def category_id(category: Category) -> Optional[int]:
    return _CATEGORY_IDS[category]


def difficulty_token(difficulty: Difficulty) -> Optional[str]:
    return _DIFFICULTY_TOKENS[difficulty]


def question_type_token(question_type: QuestionType) -> Optional[str]:
    return _QUESTION_TYPE_TOKENS[question_type]


def encoding_token(encoding: Encoding) -> Optional[str]:
    return _ENCODING_TOKENS[encoding]


def validate_category_id(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InputValidationError(f"Category ID must be an integer, got {value!r}.")
    if not CATEGORY_ID_MIN <= value <= CATEGORY_ID_MAX:
        raise InputValidationError(
            f"Category ID must be between {CATEGORY_ID_MIN} and {CATEGORY_ID_MAX} (inclusive), got {value}."
        )
    return value


def resolve_category(name_or_id: Optional[str]) -> Category:
    """Turn user input (a category name or numeric ID) into a Category.

    Empty input and the usual "any" spellings give Category.ANY. Names match
    the service's category names case-insensitively, with or without the
    "Entertainment: " / "Science: " prefix.
    """
    if not name_or_id:
        return Category.ANY
    s = name_or_id.strip()
    if not s or s.lower() in ANY_CATEGORY_ALIASES:
        return Category.ANY
    if s.isdecimal():
        return Category.from_id(int(s))
    key = s.lower()
    if key in _CATEGORY_BY_NAME:
        return _CATEGORY_BY_NAME[key]
    for full_name, category in _CATEGORY_BY_NAME.items():
        if full_name.split(": ", 1)[-1] == key:
            return category
    try:
        return Category(key.replace(" ", "_").replace("-", "_"))
    except ValueError:
        raise InputValidationError(f"Unknown category: {name_or_id!r}") from None
