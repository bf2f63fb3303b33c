"""LLM batch transformers."""

from lyrics_backend.boundary.llm.gemini_transformers import (
    GeminiFuriganaTransformer,
    GeminiTranslationTransformer,
    build_chat_model,
)

__all__ = ["GeminiFuriganaTransformer", "GeminiTranslationTransformer", "build_chat_model"]
