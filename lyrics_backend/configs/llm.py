"""
LLM configuration settings.

Settings for the Gemini model used as the batch transformer.

Dependencies: pydantic_settings
System role: Upstream model configuration
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class LLMSettings(BaseSettings):
    """Google Generative AI model configuration."""

    model_id: str = Field(default="gemini-2.5-flash", description="Gemini model identifier")
    google_api_key: str | None = Field(
        default=None,
        description="Google API key (falls back to GOOGLE_API_KEY when unset)",
    )
    furigana_temperature: float = Field(default=0.1, description="Temperature for furigana calls")
    translation_temperature: float = Field(default=0.3, description="Temperature for translation calls")

    class Config:
        """Pydantic config for environment variable loading."""

        env_prefix = "LLM_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
