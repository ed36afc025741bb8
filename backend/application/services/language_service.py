"""
Language service orchestrator.

Delegates translation, text-to-speech, OCR and speech-to-text to the
AWS boundary clients. boto3 is blocking, so every call runs in a worker
thread to keep the event loop free.

Dependencies: backend.boundary.aws
System role: Cloud AI use case orchestration (no persistence)
"""

import asyncio
import base64
import logging

from backend.boundary.aws import PollyClient, TextractClient, TranscribeClient, TranslateClient
from backend.observability.log_utils import log_with_context, safe_log_value

logger = logging.getLogger(__name__)


class LanguageService:
    """Cloud language features: translate, speak, read and transcribe."""

    def __init__(
        self,
        translate_client: TranslateClient,
        polly_client: PollyClient,
        textract_client: TextractClient,
        transcribe_client: TranscribeClient,
    ) -> None:
        self.translate_client = translate_client
        self.polly_client = polly_client
        self.textract_client = textract_client
        self.transcribe_client = transcribe_client
        self._languages: list[dict[str, str]] | None = None

    async def translate(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> dict:
        """
        Translate text.

        Args:
            text: Text to translate
            target_lang: Target language code
            source_lang: Source language code, None to auto-detect

        Returns:
            dict: translated_text and source_lang (detected when not given)

        Raises:
            CloudServiceError: If the translation call fails
        """
        translated, detected = await asyncio.to_thread(
            self.translate_client.translate_text, text, target_lang, source_lang
        )
        logger.info(
            "Text translated",
            extra={
                "source_lang": detected,
                "target_lang": target_lang,
                "text_preview": safe_log_value(text, max_length=40),
            },
        )
        return {"translated_text": translated, "source_lang": detected}

    async def synthesize_speech(self, text: str, language_code: str) -> str:
        """
        Synthesize speech and return it base64-encoded.

        Raises:
            UnsupportedVoiceError: If no voice exists for language_code
            CloudServiceError: If synthesis fails
        """
        audio = await asyncio.to_thread(self.polly_client.synthesize, text, language_code)
        return base64.b64encode(audio).decode("ascii")

    async def extract_text(self, image: bytes) -> str:
        """Run OCR on an image and return the detected lines."""
        text = await asyncio.to_thread(self.textract_client.detect_text, image)
        logger.info(
            "OCR completed",
            extra={"image_bytes": len(image), "detected_chars": len(text)},
        )
        return text

    async def transcribe(
        self,
        audio: bytes,
        language_code: str,
        content_type: str | None = None,
    ) -> str:
        """
        Transcribe recorded audio.

        Args:
            audio: Encoded audio bytes
            language_code: Spoken language locale (e.g. "en-US")
            content_type: MIME type of the upload

        Returns:
            str: Transcript, empty when nothing was recognized
        """
        transcript = await asyncio.to_thread(
            self.transcribe_client.transcribe, audio, language_code, content_type
        )
        log_with_context(
            logger,
            logging.INFO,
            "Speech transcribed",
            language_code=language_code,
            audio=audio,
            transcript=transcript,
        )
        return transcript

    async def list_languages(self) -> list[dict[str, str]]:
        """List supported translation languages; fetched once, then cached."""
        if self._languages is None:
            self._languages = await asyncio.to_thread(self.translate_client.list_languages)
        return self._languages
