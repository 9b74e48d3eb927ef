import logging
import os
import random
from logging.handlers import RotatingFileHandler
from typing import Callable, List, Optional, Sequence

from .clock import CountdownTimer
from .config import settings
from .corpus import CorpusManager
from .exceptions import GameSetupError
from .generators import generate_questions, select_word
from .models import ClueRecord
from .session import GameSession

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load game data. Please try again."
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
STOP_TIMEOUT_SECONDS = 2.0


# --- Logging Setup ---
def setup_logging() -> RotatingFileHandler:
    """Attach the rotating game log to the ``banisa`` logger, once per log path."""
    package_logger = logging.getLogger("banisa")
    package_logger.setLevel(logging.INFO)

    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.abspath(os.path.join(settings.LOG_DIR, settings.LOG_FILE))
    for handler in package_logger.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == log_path:
            return handler

    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(file_handler)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    return file_handler


# --- Session Setup ---
def setup_game(
    corpus: Sequence[ClueRecord],
    rng=random,
    mode: str = settings.QUESTION_MODE,
    limit: Optional[int] = settings.MAX_QUESTIONS or None,
    time_limit: int = settings.TIME_LIMIT_SECONDS,
) -> GameSession:
    """Build an Active session, or raise GameSetupError with nothing created."""
    word = select_word(corpus, rng)
    questions = generate_questions(word, corpus, rng, mode=mode, limit=limit)
    session = GameSession(word, questions, time_limit=time_limit, rng=rng)
    logger.info(f"New session: {len(word)} letters, {len(questions)} questions [Mode: {mode}]")
    return session


class GameManager:
    """Owns the current session and its countdown for one player."""

    def __init__(
        self,
        corpus_manager: Optional[CorpusManager] = None,
        rng=random,
        tick_interval: float = settings.TICK_INTERVAL_SECONDS,
        on_tick: Optional[Callable[[GameSession], None]] = None,
    ):
        self.corpus_manager = corpus_manager or CorpusManager(settings.CORPUS_FILE)
        self.rng = rng
        self.tick_interval = tick_interval
        self.on_tick = on_tick
        self.session: Optional[GameSession] = None
        self.timer: Optional[CountdownTimer] = None
        self.last_error: Optional[str] = None

    def start(self) -> Optional[GameSession]:
        """Start a fresh session, discarding the previous one.

        Returns None, with ``last_error`` set for the user, when setup fails.
        """
        self.leave()
        try:
            corpus: List[ClueRecord] = self.corpus_manager.get_records()
            session = setup_game(corpus, rng=self.rng)
        except GameSetupError:
            logger.exception("Error setting up game")
            self.last_error = LOAD_FAILED_MESSAGE
            return None

        self.last_error = None
        self.session = session
        self.timer = CountdownTimer(session, interval=self.tick_interval, on_tick=self.on_tick)
        self.timer.start()
        return session

    def end_game(self) -> None:
        if self.session is None:
            return
        self.session.force_end()
        self._stop_timer()

    def leave(self) -> None:
        """Stop the countdown and drop the session (back to the entry screen)."""
        self._stop_timer()
        self.session = None

    def _stop_timer(self) -> None:
        if self.timer is not None:
            self.timer.stop()
            # no tick from the old countdown may land after this returns
            self.timer.join(timeout=STOP_TIMEOUT_SECONDS)
            self.timer = None
