from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# --- Models ---
class ClueRecord(BaseModel):
    """One quiz corpus entry; ``word`` names the hidden word it clues."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    question: str = Field(min_length=1, validation_alias=AliasChoices("question", "Question"))
    answer: str = Field(min_length=1, validation_alias=AliasChoices("answer", "Answer"))
    song: Optional[str] = Field(None, validation_alias=AliasChoices("song", "Song"))
    movie: str = Field(min_length=1, validation_alias=AliasChoices("movie", "Movie"))
    word: str = Field(min_length=1, validation_alias=AliasChoices("word", "Word"))

    @field_validator("song", mode="before")
    @classmethod
    def blank_song_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("word")
    @classmethod
    def upper_case_word(cls, value: str) -> str:
        return value.upper()


class GameQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str
    original_record: ClueRecord

    @classmethod
    def from_record(cls, record: ClueRecord) -> "GameQuestion":
        return cls(prompt=record.question, original_record=record)


class SessionState(BaseModel):
    remaining_seconds: int = Field(ge=0)
    user_letters: List[str]
    is_over: bool = False
    is_success: bool = False
    success_message: Optional[str] = None


def is_playable_word(word: str) -> bool:
    """True for a non-empty word made only of the letters A-Z."""
    return bool(word) and word.isascii() and word.isalpha()
