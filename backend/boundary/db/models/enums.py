"""
Enumerations shared by ORM models and API schemas.

Dependencies: enum (stdlib)
System role: Closed vocabularies for translation provenance and bookmarks
"""

import enum


class InputType(str, enum.Enum):
    """
    How a translation's source text was produced.

    TEXT: Typed by the user
    SPEECH: Transcribed from recorded audio
    IMAGE: Extracted from a photo via OCR
    HANDWRITING: Handwritten input
    """

    TEXT = "TEXT"
    SPEECH = "SPEECH"
    IMAGE = "IMAGE"
    HANDWRITING = "HANDWRITING"


class SavedItemCategory(str, enum.Enum):
    """Category tag a user assigns when bookmarking a translation."""

    PHRASE = "PHRASE"
    WORD = "WORD"
    SENTENCE = "SENTENCE"
    PARAGRAPH = "PARAGRAPH"
    TRANSCRIPT = "TRANSCRIPT"
