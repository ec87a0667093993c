# opentdb/models.py
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Question:
    type: str
    difficulty: str
    category: str
    question: str
    correct_answer: str
    incorrect_answers: Tuple[str, ...] = ()

    def shuffled_choices(self, rng: Optional[random.Random] = None) -> Tuple[List[str], int]:
        """Return all answers in random order and the index of the correct one."""
        choices = list(self.incorrect_answers) + [self.correct_answer]
        (rng or random).shuffle(choices)
        return choices, choices.index(self.correct_answer)


@dataclass(frozen=True)
class SessionToken:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CategoryCount:
    category_id: int
    total_questions: int
    total_easy: int
    total_medium: int
    total_hard: int


@dataclass(frozen=True)
class GlobalCategoryCount:
    category_id: int
    total_questions: int
    pending: int
    verified: int
    rejected: int


@dataclass(frozen=True)
class GlobalCount:
    total_questions: int
    total_pending: int
    total_verified: int
    total_rejected: int
    categories: Dict[int, GlobalCategoryCount] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiCategory:
    id: int
    name: str
