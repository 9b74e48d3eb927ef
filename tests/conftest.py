import random

import pytest

from banisa.generators import generate_questions
from banisa.models import ClueRecord
from banisa.session import GameSession


def _record(word, question, answer="Answer", movie="Movie", song=None):
    return ClueRecord(question=question, answer=answer, song=song, movie=movie, word=word)


@pytest.fixture
def corpus():
    return [
        _record("RAJA", "Which film has the song 'Raja Raja'?", song="Raja Raja"),
        _record("RAJA", "Who plays the lead in Raja?"),
        _record("ARYA", "Which 2004 film has 'Aa Ante Amalapuram'?", song="Aa Ante Amalapuram"),
        _record("RAJA", "Raja was released in which year?", answer="1999"),
        _record("ARYA", "Who directed Arya?", answer="Sukumar"),
    ]


@pytest.fixture
def raja_session(corpus):
    questions = generate_questions("RAJA", corpus, random.Random(1), mode="ordered")
    return GameSession("RAJA", questions, time_limit=300, rng=random.Random(1))
