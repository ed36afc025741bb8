"""
Amazon Transcribe client.

Runs a batch transcription for one audio upload:
    1. Stage audio in S3
    2. Start a transcription job writing its output to the same bucket
    3. Poll until the job completes, fails or times out
    4. Read the transcript JSON, then delete every staged object

Dependencies: boto3, backend.boundary.aws.s3_client
System role: Speech-to-text for recorded audio
"""

import logging
import time
import uuid
from typing import Any, Callable

import boto3

from backend.boundary.aws.errors import AWS_ERRORS, to_cloud_error
from backend.boundary.aws.s3_client import S3StagingClient
from backend.core.exceptions import CloudServiceError

logger = logging.getLogger(__name__)

FALLBACK_MEDIA_FORMAT = "wav"

# Content type (without parameters) -> Transcribe MediaFormat
MEDIA_FORMATS: dict[str, str] = {
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/wave": "wav",
    "audio/vnd.wave": "wav",
    "audio/vnd.wav": "wav",
    "audio/l16": "wav",
    "audio/amr": "amr",
    "audio/awb": "amr",
    "audio/amr-wb": "amr",
    "audio/amr_wb": "amr",
    "audio/mpeg": "mp3",
    "audio/mp3": "mp3",
    "audio/mp4": "mp4",
    "audio/m4a": "mp4",
    "audio/x-m4a": "mp4",
    "audio/aac": "mp4",
    "audio/flac": "flac",
    "audio/x-flac": "flac",
    "audio/ogg": "ogg",
    "audio/webm": "webm",
}

# Formats that carry no reliable header, so the sample rate must be given
EXPLICIT_RATE_TYPES = frozenset({"audio/l16"})


def resolve_media_format(
    content_type: str | None,
    default_sample_rate: int = 16000,
) -> tuple[str, int | None]:
    """
    Map an upload's content type to a Transcribe media format.

    Args:
        content_type: MIME type sent by the client, possibly with parameters
        default_sample_rate: Rate used when the format needs an explicit one

    Returns:
        tuple[str, int | None]: (media_format, sample_rate_hz). sample_rate_hz
        is None when Transcribe should read it from the file header.
    """
    normalized = (content_type or "").split(";")[0].strip().lower()

    media_format = MEDIA_FORMATS.get(normalized)
    if media_format is None:
        logger.warning(
            "Unknown audio content type, falling back to wav",
            extra={"content_type": content_type, "sample_rate": default_sample_rate},
        )
        return FALLBACK_MEDIA_FORMAT, default_sample_rate

    if normalized in EXPLICIT_RATE_TYPES:
        return media_format, default_sample_rate
    return media_format, None


def extract_transcript(payload: dict[str, Any]) -> str:
    """Join the transcripts of a Transcribe output document, empty if none."""
    transcripts = payload.get("results", {}).get("transcripts", [])
    return " ".join(
        t["transcript"].strip() for t in transcripts if t.get("transcript", "").strip()
    )


class TranscribeClient:
    """Batch speech-to-text through Amazon Transcribe and an S3 staging bucket."""

    def __init__(
        self,
        staging: S3StagingClient,
        region: str = "us-east-1",
        key_prefix: str = "speech",
        poll_interval: float = 1.0,
        timeout: float = 120.0,
        default_sample_rate: int = 16000,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize Transcribe client.

        Args:
            staging: S3 client for the bucket holding audio and output
            region: AWS region
            key_prefix: Key prefix for staged objects
            poll_interval: Seconds between job status checks
            timeout: Maximum seconds to wait for a job
            default_sample_rate: Sample rate for headerless or unknown audio
            sleep: Sleep function used between polls
        """
        self._client = boto3.client("transcribe", region_name=region)
        self._staging = staging
        self._key_prefix = key_prefix.strip("/")
        self._poll_interval = poll_interval
        self._timeout = timeout
        self._default_sample_rate = default_sample_rate
        self._sleep = sleep

    def transcribe(
        self,
        audio: bytes,
        language_code: str,
        content_type: str | None = None,
    ) -> str:
        """
        Transcribe an audio clip.

        Args:
            audio: Encoded audio bytes
            language_code: Spoken language locale (e.g. "en-US")
            content_type: MIME type of the upload

        Returns:
            str: Transcript, empty when nothing was recognized

        Raises:
            CloudServiceError: If staging, the job, or result retrieval fails
        """
        media_format, sample_rate = resolve_media_format(
            content_type, self._default_sample_rate
        )

        job_name = f"rosetta-{uuid.uuid4().hex}"
        audio_key = f"{self._key_prefix}/{job_name}.{media_format}"
        output_key = f"{self._key_prefix}/{job_name}.json"

        self._staging.upload_bytes(audio_key, audio, content_type or "application/octet-stream")
        try:
            self._start_job(job_name, language_code, media_format, sample_rate, audio_key, output_key)
            self._wait_for_job(job_name)
            payload = self._staging.read_json(output_key)
        finally:
            self._cleanup(job_name, audio_key, output_key)

        transcript = extract_transcript(payload)
        if not transcript:
            logger.info("Transcription returned no results", extra={"job_name": job_name})
        return transcript

    def _start_job(
        self,
        job_name: str,
        language_code: str,
        media_format: str,
        sample_rate: int | None,
        audio_key: str,
        output_key: str,
    ) -> None:
        params: dict[str, Any] = {
            "TranscriptionJobName": job_name,
            "LanguageCode": language_code,
            "MediaFormat": media_format,
            "Media": {"MediaFileUri": self._staging.uri(audio_key)},
            "OutputBucketName": self._staging.bucket,
            "OutputKey": output_key,
        }
        if sample_rate is not None:
            params["MediaSampleRateHertz"] = sample_rate

        logger.info(
            "Starting transcription job",
            extra={
                "job_name": job_name,
                "language_code": language_code,
                "media_format": media_format,
                "sample_rate": sample_rate,
            },
        )
        try:
            self._client.start_transcription_job(**params)
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "transcribe", "start_transcription_job") from e

    def _wait_for_job(self, job_name: str) -> None:
        deadline = time.monotonic() + self._timeout

        while True:
            try:
                response = self._client.get_transcription_job(TranscriptionJobName=job_name)
            except AWS_ERRORS as e:
                raise to_cloud_error(e, "transcribe", "get_transcription_job") from e

            job = response["TranscriptionJob"]
            status = job["TranscriptionJobStatus"]

            if status == "COMPLETED":
                return
            if status == "FAILED":
                raise CloudServiceError(
                    f"Transcription job failed: {job.get('FailureReason', 'unknown reason')}",
                    service="transcribe",
                    operation="get_transcription_job",
                    details={"job_name": job_name},
                )
            if time.monotonic() >= deadline:
                raise CloudServiceError(
                    f"Transcription job did not finish within {self._timeout:g} seconds",
                    service="transcribe",
                    operation="get_transcription_job",
                    details={"job_name": job_name, "last_status": status},
                )

            self._sleep(self._poll_interval)

    def _cleanup(self, job_name: str, *s3_keys: str) -> None:
        # Cleanup failures must not mask the transcription outcome
        try:
            self._staging.delete_keys(*s3_keys)
        except CloudServiceError as e:
            logger.warning(
                "Failed to delete staged audio",
                extra={"job_name": job_name, "error_msg": str(e)},
            )

        try:
            self._client.delete_transcription_job(TranscriptionJobName=job_name)
        except AWS_ERRORS as e:
            logger.warning(
                "Failed to delete transcription job",
                extra={"job_name": job_name, "error_msg": str(e)},
            )
