"""
Language service schemas.

Dependencies: pydantic
System role: Translate/TTS/language-list API contracts
"""

from pydantic import Field, field_validator

from backend.models.common import CamelModel


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class TranslateRequest(CamelModel):
    """Request schema for translating text."""

    text: str = Field(..., min_length=1)
    target_lang: str = Field(..., min_length=1, max_length=16)
    source_lang: str | None = Field(None, max_length=16, description="Omit to auto-detect")

    check_not_blank = field_validator("text", "target_lang")(_not_blank)


class TtsRequest(CamelModel):
    """Request schema for text-to-speech."""

    text: str = Field(..., min_length=1)
    language_code: str = Field(..., min_length=1, max_length=16)

    check_not_blank = field_validator("text", "language_code")(_not_blank)


class LanguageResponse(CamelModel):
    """One supported translation language."""

    language_code: str
    language_name: str
