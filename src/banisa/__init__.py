"""
TFI Banisa puzzle engine.

Exports the session setup entry points, the session state machine and its
clock drivers, and the error taxonomy.
"""

from .app import GameManager, setup_game, setup_logging
from .clock import CountdownTimer, ManualClock
from .corpus import CorpusManager, load_records
from .exceptions import (
    BanisaError,
    EmptyCorpusError,
    GameSetupError,
    IndexOutOfRangeError,
    NoQuestionsError,
)
from .generators import generate_questions, select_word
from .models import ClueRecord, GameQuestion, SessionState
from .session import GameSession, format_time, get_random_success_message

__all__ = [
    "GameManager",
    "setup_game",
    "setup_logging",
    "CountdownTimer",
    "ManualClock",
    "CorpusManager",
    "load_records",
    "BanisaError",
    "EmptyCorpusError",
    "GameSetupError",
    "IndexOutOfRangeError",
    "NoQuestionsError",
    "generate_questions",
    "select_word",
    "ClueRecord",
    "GameQuestion",
    "SessionState",
    "GameSession",
    "format_time",
    "get_random_success_message",
]
