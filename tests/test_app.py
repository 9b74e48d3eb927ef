import logging
import random
import time
from pathlib import Path

import pytest

from banisa.app import LOAD_FAILED_MESSAGE, GameManager, setup_game, setup_logging
from banisa.config import settings
from banisa.corpus import CorpusManager
from banisa.exceptions import EmptyCorpusError

SAMPLE_CORPUS = Path(__file__).resolve().parent.parent / "data" / "quiz_data.csv"


def test_setup_game_builds_active_session(corpus):
    session = setup_game(corpus, rng=random.Random(3))
    assert session.word in {"RAJA", "ARYA"}
    assert not session.is_over
    assert session.remaining_seconds == 300
    assert len(session.user_letters) == len(session.word)
    assert {q.original_record.word for q in session.questions} == {session.word}


def test_setup_game_respects_limit_and_time(corpus):
    session = setup_game(corpus, rng=random.Random(3), limit=1, time_limit=60)
    assert len(session.questions) == 1
    assert session.remaining_seconds == 60


def test_setup_game_empty_corpus():
    with pytest.raises(EmptyCorpusError):
        setup_game([])


def test_manager_reports_load_failure(tmp_path: Path):
    manager = GameManager(CorpusManager(str(tmp_path / "missing.csv")))
    assert manager.start() is None
    assert manager.session is None
    assert manager.timer is None
    assert manager.last_error == LOAD_FAILED_MESSAGE


def test_manager_session_lifecycle():
    manager = GameManager(CorpusManager(str(SAMPLE_CORPUS)), rng=random.Random(5), tick_interval=30)
    session = manager.start()
    try:
        assert session is manager.session
        assert manager.timer.running
        assert manager.last_error is None

        manager.end_game()
        assert session.is_over
        assert manager.timer is None
        assert manager.session is session

        manager.leave()
        assert manager.session is None
    finally:
        manager.leave()


def test_manager_start_discards_previous_session():
    manager = GameManager(CorpusManager(str(SAMPLE_CORPUS)), tick_interval=30)
    first = manager.start()
    first_timer = manager.timer
    try:
        second = manager.start()
        first_timer.join(timeout=5)
        assert second is not first
        assert not first_timer.running
        assert first.remaining_seconds == 300
    finally:
        manager.leave()


def test_setup_logging_writes_to_log_dir(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    handler = setup_logging()
    try:
        logging.getLogger("banisa.app").info("hello")
        handler.flush()
        assert "hello" in (tmp_path / "log" / settings.LOG_FILE).read_text(encoding="utf-8")
    finally:
        logging.getLogger("banisa").removeHandler(handler)
        handler.close()


def test_manager_reports_unreadable_corpus(tmp_path: Path):
    manager = GameManager(CorpusManager(str(tmp_path)))
    assert manager.start() is None
    assert manager.session is None
    assert manager.last_error == LOAD_FAILED_MESSAGE


def test_leave_waits_for_countdown_to_stop():
    ticked = []
    manager = GameManager(
        CorpusManager(str(SAMPLE_CORPUS)),
        tick_interval=0.001,
        on_tick=lambda s: ticked.append(s),
    )
    first = manager.start()
    timer = manager.timer
    manager.leave()

    assert not timer.running
    count = len(ticked)
    remaining = first.remaining_seconds
    time.sleep(0.05)
    assert len(ticked) == count
    assert first.remaining_seconds == remaining


def test_setup_logging_attaches_one_handler(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    package_logger = logging.getLogger("banisa")
    handler = setup_logging()
    try:
        assert setup_logging() is handler
        assert package_logger.handlers.count(handler) == 1
    finally:
        package_logger.removeHandler(handler)
        handler.close()
