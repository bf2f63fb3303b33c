"""
Lyric domain models and schemas.

Request/response schemas for furigana annotation and lyric translation.
Wire field names are camelCase; Python attributes are snake_case.

Dependencies: pydantic
System role: Lyrics API contracts
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class LyricLine(CamelModel):
    """One timed lyric line."""

    words: str = Field(description="Line text")
    start_time_ms: str = Field(description="Line start time in milliseconds")


class FuriganaSegment(BaseModel):
    """Portion of a line, with a hiragana reading when it is kanji."""

    text: str
    reading: str | None = None


class FuriganaRequest(CamelModel):
    """Request schema for furigana annotation."""

    lines: list[LyricLine]
    force: bool = Field(default=False, description="Bypass both cache tiers")


class TranslateLyricsRequest(CamelModel):
    """Request schema for lyric translation."""

    lines: list[LyricLine]
    target_language: str = Field(min_length=1, description="Language to translate into")
    force: bool = Field(default=False, description="Bypass both cache tiers")

    @field_validator("target_language")
    @classmethod
    def strip_language(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("targetLanguage must not be blank")
        return value
