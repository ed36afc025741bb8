"""
Amazon Polly client.

Picks a voice for a language code and synthesizes speech with it.
Language codes may be full locales ("en-US") or bare languages ("en");
a bare language matches any locale of that language.

Dependencies: boto3
System role: Text-to-speech audio generation
"""

import logging

import boto3

from backend.boundary.aws.errors import AWS_ERRORS, error_code, to_cloud_error
from backend.core.exceptions import UnsupportedVoiceError

logger = logging.getLogger(__name__)

# Polly error codes meaning "no voice for this language/engine"
UNSUPPORTED_VOICE_CODES = frozenset({
    "InvalidParameterValue",
    "ValidationException",
    "LanguageNotSupportedException",
    "EngineNotSupportedException",
})


class PollyClient:
    """boto3 Polly wrapper with voice selection."""

    def __init__(
        self,
        region: str = "us-east-1",
        output_format: str = "mp3",
        prefer_neural: bool = True,
    ) -> None:
        """
        Initialize Polly client.

        Args:
            region: AWS region
            output_format: Audio format returned by synthesize (mp3, ogg_vorbis, pcm)
            prefer_neural: Pick a neural-engine voice when the language has one
        """
        self._client = boto3.client("polly", region_name=region)
        self._output_format = output_format
        self._prefer_neural = prefer_neural

    def _describe_voices(self, language_code: str) -> list[dict]:
        params = {}
        if "-" in language_code:
            params["LanguageCode"] = language_code

        voices: list[dict] = []
        try:
            while True:
                response = self._client.describe_voices(**params)
                voices.extend(response.get("Voices", []))
                next_token = response.get("NextToken")
                if not next_token:
                    break
                params["NextToken"] = next_token
        except AWS_ERRORS as e:
            if error_code(e) in UNSUPPORTED_VOICE_CODES:
                raise UnsupportedVoiceError(language_code, reason=str(e)) from e
            raise to_cloud_error(e, "polly", "describe_voices") from e

        if "LanguageCode" in params:
            return voices

        wanted = language_code.lower()
        return [
            voice for voice in voices
            if voice.get("LanguageCode", "").split("-")[0].lower() == wanted
        ]

    def select_voice(self, language_code: str) -> tuple[str, str]:
        """
        Choose a voice for language_code.

        Returns:
            tuple[str, str]: (voice_id, engine)

        Raises:
            UnsupportedVoiceError: If Polly has no voice for the language
            CloudServiceError: If the Polly call fails
        """
        voices = self._describe_voices(language_code)
        if not voices:
            raise UnsupportedVoiceError(language_code, reason="no voices listed")

        if self._prefer_neural:
            for voice in voices:
                if "neural" in voice.get("SupportedEngines", []):
                    return voice["Id"], "neural"

        voice = voices[0]
        engines = voice.get("SupportedEngines") or ["standard"]
        engine = "standard" if "standard" in engines else engines[0]
        return voice["Id"], engine

    def synthesize(self, text: str, language_code: str) -> bytes:
        """
        Synthesize text to audio in the configured output format.

        Args:
            text: Text to speak
            language_code: Language or locale code

        Returns:
            bytes: Encoded audio

        Raises:
            UnsupportedVoiceError: If no voice can speak the language
            CloudServiceError: If synthesis fails for any other reason
        """
        voice_id, engine = self.select_voice(language_code)

        try:
            response = self._client.synthesize_speech(
                Text=text,
                OutputFormat=self._output_format,
                VoiceId=voice_id,
                Engine=engine,
            )
            audio = response["AudioStream"].read()
        except AWS_ERRORS as e:
            if error_code(e) in UNSUPPORTED_VOICE_CODES:
                raise UnsupportedVoiceError(language_code, reason=str(e)) from e
            raise to_cloud_error(e, "polly", "synthesize_speech") from e

        logger.info(
            "Synthesized speech",
            extra={"voice_id": voice_id, "engine": engine, "audio_bytes": len(audio)},
        )
        return audio
