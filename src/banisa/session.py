"""
Game session state machine.

A session is Active from construction until ``is_over`` is set, which
happens on a winning letter, on the countdown reaching zero, or on
``force_end``. Over is terminal: every later mutating call is a no-op.

Time is never scheduled here. Callers deliver ``tick()`` once per second
(see ``banisa.clock``) and re-render after each call.
"""

import logging
import random
import threading
from typing import List, Optional, Sequence

from .config import settings
from .exceptions import IndexOutOfRangeError, NoQuestionsError
from .models import ClueRecord, GameQuestion, SessionState, is_playable_word

logger = logging.getLogger(__name__)

SUCCESS_MESSAGES = (
    "Blockbuster! You cracked the hidden word!",
    "Industry hit! Brilliant guessing!",
    "Mass entry! The word is all yours!",
    "Record-breaking performance! Well played!",
    "Housefull! You solved the puzzle!",
    "Superhit! Even the climax couldn't stop you!",
    "Box office champion! Take a bow!",
    "Hundred days run! What a finish!",
)


def get_random_success_message(rng=random) -> str:
    return rng.choice(SUCCESS_MESSAGES)


def format_time(seconds: int) -> str:
    """Render a second count as ``mm:ss``, e.g. 65 -> ``01:05``."""
    if seconds < 0:
        raise ValueError("seconds must be non-negative")
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class GameSession:
    """Mutable state of one playthrough for a single hidden word."""

    def __init__(
        self,
        word: str,
        questions: Sequence[GameQuestion],
        time_limit: int = settings.TIME_LIMIT_SECONDS,
        rng=random,
    ):
        word = word.strip().upper()
        if not is_playable_word(word):
            raise ValueError(f"Hidden word must be non-empty A-Z letters, got {word!r}")
        if not questions:
            raise NoQuestionsError(f"No questions for {word!r}.")
        if time_limit <= 0:
            raise ValueError("time_limit must be positive")

        self._word = word
        self._questions = list(questions)
        self._rng = rng
        self._lock = threading.RLock()
        self._state = SessionState(
            remaining_seconds=time_limit,
            user_letters=[""] * len(word),
        )

    # --- Read accessors ---
    @property
    def word(self) -> str:
        return self._word

    @property
    def questions(self) -> List[GameQuestion]:
        return list(self._questions)

    @property
    def state(self) -> SessionState:
        """A detached copy; the live state only changes through the mutators."""
        return self.snapshot()

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def user_letters(self) -> List[str]:
        return list(self._state.user_letters)

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    @property
    def is_success(self) -> bool:
        return self._state.is_success

    @property
    def success_message(self) -> Optional[str]:
        return self._state.success_message

    def snapshot(self) -> SessionState:
        with self._lock:
            return self._state.model_copy(deep=True)

    # --- Mutations ---
    def tick(self) -> None:
        with self._lock:
            if self._state.is_over:
                return
            self._state.remaining_seconds = max(0, self._state.remaining_seconds - 1)
            if self._state.remaining_seconds == 0:
                logger.info(f"Time is up for {self._word}")
                self._finish(success=False)

    def set_letter(self, index: int, raw_value: Optional[str]) -> bool:
        """Store one upper-cased character in slot ``index``.

        Returns True when the caller should move input to the next slot:
        a non-empty value was written and ``index`` is not the last slot.
        """
        with self._lock:
            if self._state.is_over:
                return False
            self._check_index(index)

            value = (raw_value or "").upper()[:1]
            self._state.user_letters[index] = value

            if self._is_solved():
                self._finish(success=True)

            return bool(value) and index < len(self._word) - 1

    def force_end(self) -> None:
        with self._lock:
            if self._state.is_over:
                return
            logger.info(f"Game ended by the player for {self._word}")
            self._finish(success=self._is_solved())

    # --- Queries ---
    def is_letter_correct(self, index: int) -> bool:
        self._check_index(index)
        letter = self._state.user_letters[index]
        return letter != "" and letter.upper() == self._word[index]

    def is_letter_incorrect(self, index: int) -> bool:
        self._check_index(index)
        letter = self._state.user_letters[index]
        return letter != "" and letter.upper() != self._word[index]

    def display_letters(self) -> List[str]:
        """Letters for the board: the player's slots, or the answer once over."""
        if self._state.is_over:
            return list(self._word)
        return self.user_letters

    def revealed_questions(self) -> List[ClueRecord]:
        """Full clue records, available only after the game is over."""
        if not self._state.is_over:
            return []
        return [question.original_record for question in self._questions]

    # --- Internals ---
    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._word):
            raise IndexOutOfRangeError(
                f"Letter index {index} outside 0..{len(self._word) - 1}"
            )

    def _is_solved(self) -> bool:
        return all(
            letter != "" and letter.upper() == target
            for letter, target in zip(self._state.user_letters, self._word)
        )

    def _finish(self, success: bool) -> None:
        self._state.is_over = True
        self._state.is_success = success
        if success:
            self._state.success_message = get_random_success_message(self._rng)
        logger.info(
            f"Game over for {self._word}: success={success}, "
            f"remaining={format_time(self._state.remaining_seconds)}"
        )
