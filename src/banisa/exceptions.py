class BanisaError(Exception):
    """Base class for every error raised by the game engine."""


class GameSetupError(BanisaError):
    """A session could not be set up; no partial session exists."""


class EmptyCorpusError(GameSetupError):
    """The corpus yielded no usable records or no eligible word."""


class NoQuestionsError(GameSetupError):
    """A word was chosen but no clue records are associated with it."""


class IndexOutOfRangeError(BanisaError, IndexError):
    """A letter slot index outside the word's bounds (a caller bug)."""
