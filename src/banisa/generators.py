import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .exceptions import EmptyCorpusError, NoQuestionsError
from .models import ClueRecord, GameQuestion, is_playable_word

logger = logging.getLogger(__name__)


def candidate_words(corpus: Sequence[ClueRecord]) -> List[str]:
    """Distinct A-Z words the corpus can clue, in sorted order."""
    return sorted({record.word for record in corpus if is_playable_word(record.word)})


def select_word(corpus: Sequence[ClueRecord], rng=random) -> str:
    candidates = candidate_words(corpus)
    if not candidates:
        raise EmptyCorpusError("No eligible word in the corpus.")
    return rng.choice(candidates)


# --- Strategy Pattern: Question Generators ---
class QuestionGenerator(ABC):
    """Abstract Base Class for ordering the clues of the hidden word."""

    @abstractmethod
    def order(self, records: List[ClueRecord], rng) -> List[ClueRecord]:
        pass

    def generate(
        self,
        word: str,
        corpus: Sequence[ClueRecord],
        rng=random,
        limit: Optional[int] = None,
    ) -> List[GameQuestion]:
        target = word.strip().upper()
        matches = [record for record in corpus if record.word == target]
        if not matches:
            raise NoQuestionsError(f"No clues associated with {target!r}.")

        ordered = self.order(matches, rng)
        if limit:
            ordered = ordered[:limit]
        return [GameQuestion.from_record(record) for record in ordered]


class ShuffledQuestionGenerator(QuestionGenerator):
    """Default mode: one random permutation fixed at generation time."""

    def order(self, records: List[ClueRecord], rng) -> List[ClueRecord]:
        return rng.sample(records, len(records))


class OrderedQuestionGenerator(QuestionGenerator):
    """Keeps the clues in corpus order."""

    def order(self, records: List[ClueRecord], rng) -> List[ClueRecord]:
        return list(records)


class QuestionGeneratorFactory:
    """Factory to select the appropriate generator."""

    _generators = {
        "shuffled": ShuffledQuestionGenerator,
        "ordered": OrderedQuestionGenerator,
    }

    @classmethod
    def create(cls, mode: str) -> QuestionGenerator:
        key = (mode or "").strip().lower()
        if key not in cls._generators:
            logger.warning(f"Unknown question mode {mode!r}, using shuffled")
            key = "shuffled"
        return cls._generators[key]()


def generate_questions(
    word: str,
    corpus: Sequence[ClueRecord],
    rng=random,
    mode: str = "shuffled",
    limit: Optional[int] = None,
) -> List[GameQuestion]:
    return QuestionGeneratorFactory.create(mode).generate(word, corpus, rng, limit)
