"""
Gemini-backed batch transformers.

Each transform() is a single structured-output call covering a whole chunk.
Failures propagate to the chunk processor, which treats them as fatal for
the chunk.

Dependencies: langchain_google_genai, langchain_core
System role: External transformer implementations for the pipeline
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from lyrics_backend.boundary.llm.prompts import FURIGANA_SYSTEM_PROMPT, build_translation_prompt
from lyrics_backend.boundary.llm.schemas import AiFuriganaResponse, AiTranslatedTexts

logger = logging.getLogger(__name__)


def build_chat_model(
    model_id: str,
    temperature: float,
    google_api_key: str | None = None,
) -> ChatGoogleGenerativeAI:
    """
    Create a Gemini chat model.

    Args:
        model_id: Gemini model identifier
        temperature: Sampling temperature
        google_api_key: Explicit API key; GOOGLE_API_KEY is used when None

    Returns:
        ChatGoogleGenerativeAI: Configured chat model
    """
    kwargs: dict[str, Any] = {"model": model_id, "temperature": temperature}
    if google_api_key:
        kwargs["google_api_key"] = google_api_key
    return ChatGoogleGenerativeAI(**kwargs)


class GeminiFuriganaTransformer:
    """Annotates a batch of Japanese lines with furigana segments."""

    def __init__(self, chat_model: ChatGoogleGenerativeAI) -> None:
        """
        Initialize transformer.

        Args:
            chat_model: Chat model supporting with_structured_output
        """
        self._structured = chat_model.with_structured_output(AiFuriganaResponse)

    async def transform(self, contents: list[str], config: Mapping[str, Any]) -> list[Any]:
        logger.info(f"{__name__}:GeminiFuriganaTransformer - Annotating {len(contents)} lines")
        response = await self._structured.ainvoke(
            [
                SystemMessage(content=FURIGANA_SYSTEM_PROMPT),
                HumanMessage(content=json.dumps(contents, ensure_ascii=False)),
            ]
        )
        if response is None:
            raise ValueError("Model returned no structured furigana response")
        return [
            [segment.model_dump(exclude_none=True) for segment in line]
            for line in response.annotated_lines
        ]


class GeminiTranslationTransformer:
    """Translates a batch of lyric lines into config["target_language"]."""

    def __init__(self, chat_model: ChatGoogleGenerativeAI) -> None:
        """
        Initialize transformer.

        Args:
            chat_model: Chat model supporting with_structured_output
        """
        self._structured = chat_model.with_structured_output(AiTranslatedTexts)

    async def transform(self, contents: list[str], config: Mapping[str, Any]) -> list[Any]:
        target_language = config["target_language"]
        logger.info(
            f"{__name__}:GeminiTranslationTransformer - Translating {len(contents)} lines "
            f"to {target_language}"
        )
        response = await self._structured.ainvoke(
            [
                SystemMessage(content=build_translation_prompt(target_language)),
                HumanMessage(
                    content=json.dumps([{"words": text} for text in contents], ensure_ascii=False)
                ),
            ]
        )
        if response is None:
            raise ValueError("Model returned no structured translation response")
        return list(response.translated_texts)
