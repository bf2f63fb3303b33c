"""
Structured-output schemas for the Gemini batch transformers.

Dependencies: pydantic
System role: Response contracts requested from the model
"""

from pydantic import BaseModel, Field

from lyrics_backend.models.lyrics import FuriganaSegment


class AiFuriganaResponse(BaseModel):
    """Furigana for a batch of lines, one segment list per input line."""

    annotated_lines: list[list[FuriganaSegment]] = Field(
        description="Segments for each input line, in input order"
    )


class AiTranslatedTexts(BaseModel):
    """Translations for a batch of lines, one string per input line."""

    translated_texts: list[str] = Field(
        description="Translated text for each input line, in input order"
    )
