"""
Tests for TranscribeClient job orchestration and media format mapping.
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from backend.boundary.aws.transcribe_client import (
    TranscribeClient,
    extract_transcript,
    resolve_media_format,
)
from backend.core.exceptions import CloudServiceError


class TestResolveMediaFormat:
    """Test suite for resolve_media_format()."""

    @pytest.mark.parametrize(
        "content_type, expected",
        [
            ("audio/wav", "wav"),
            ("audio/vnd.wave", "wav"),
            ("audio/amr_wb", "amr"),
            ("audio/awb", "amr"),
            ("audio/mpeg", "mp3"),
            ("audio/m4a", "mp4"),
            ("audio/aac", "mp4"),
            ("audio/flac", "flac"),
            ("audio/ogg; codecs=opus", "ogg"),
            ("AUDIO/WEBM", "webm"),
        ],
    )
    def test_known_types(self, content_type, expected) -> None:
        media_format, sample_rate = resolve_media_format(content_type)

        assert media_format == expected
        assert sample_rate is None

    def test_l16_needs_explicit_rate(self) -> None:
        assert resolve_media_format("audio/l16", 16000) == ("wav", 16000)

    @pytest.mark.parametrize("content_type", ["application/octet-stream", None, ""])
    def test_unknown_falls_back_to_wav_16k(self, content_type) -> None:
        assert resolve_media_format(content_type) == ("wav", 16000)


class TestExtractTranscript:
    """Test suite for extract_transcript()."""

    def test_joins_transcripts(self) -> None:
        payload = {"results": {"transcripts": [{"transcript": "hello"}, {"transcript": "world "}]}}

        assert extract_transcript(payload) == "hello world"

    def test_no_results_is_empty(self) -> None:
        assert extract_transcript({"results": {"transcripts": []}}) == ""
        assert extract_transcript({}) == ""


@pytest.fixture
def boto_client():
    with patch("boto3.client") as factory:
        client = MagicMock()
        factory.return_value = client
        yield client


@pytest.fixture
def staging() -> MagicMock:
    staging = MagicMock()
    staging.bucket = "staging-bucket"
    staging.uri.side_effect = lambda key: f"s3://staging-bucket/{key}"
    staging.read_json.return_value = {"results": {"transcripts": [{"transcript": "good morning"}]}}
    return staging


def job_status(status: str, **extra) -> dict:
    return {"TranscriptionJob": {"TranscriptionJobStatus": status, **extra}}


class TestTranscribeClient:
    """Test suite for TranscribeClient.transcribe()."""

    def test_polls_until_completed_and_cleans_up(self, boto_client, staging) -> None:
        # Arrange
        boto_client.get_transcription_job.side_effect = [
            job_status("QUEUED"),
            job_status("IN_PROGRESS"),
            job_status("COMPLETED"),
        ]
        sleep = MagicMock()
        client = TranscribeClient(staging, key_prefix="speech", poll_interval=0.5, sleep=sleep)

        # Act
        transcript = client.transcribe(b"audio", "en-US", "audio/mpeg")

        # Assert
        assert transcript == "good morning"
        assert sleep.call_count == 2
        sleep.assert_called_with(0.5)

        params = boto_client.start_transcription_job.call_args.kwargs
        assert params["LanguageCode"] == "en-US"
        assert params["MediaFormat"] == "mp3"
        assert params["OutputBucketName"] == "staging-bucket"
        assert params["Media"]["MediaFileUri"].startswith("s3://staging-bucket/speech/")
        assert "MediaSampleRateHertz" not in params

        audio_key = staging.upload_bytes.call_args.args[0]
        staging.delete_keys.assert_called_once_with(audio_key, params["OutputKey"])
        boto_client.delete_transcription_job.assert_called_once()

    def test_unknown_type_sends_fallback_rate(self, boto_client, staging) -> None:
        boto_client.get_transcription_job.return_value = job_status("COMPLETED")

        TranscribeClient(staging, sleep=MagicMock()).transcribe(b"audio", "en-US", "audio/x-custom")

        params = boto_client.start_transcription_job.call_args.kwargs
        assert params["MediaFormat"] == "wav"
        assert params["MediaSampleRateHertz"] == 16000

    def test_failed_job_raises_and_still_cleans_up(self, boto_client, staging) -> None:
        boto_client.get_transcription_job.return_value = job_status(
            "FAILED", FailureReason="Unsupported audio"
        )

        with pytest.raises(CloudServiceError, match="Unsupported audio"):
            TranscribeClient(staging, sleep=MagicMock()).transcribe(b"audio", "en-US", "audio/wav")

        staging.delete_keys.assert_called_once()
        staging.read_json.assert_not_called()

    def test_timeout_raises(self, boto_client, staging) -> None:
        boto_client.get_transcription_job.return_value = job_status("IN_PROGRESS")

        client = TranscribeClient(staging, timeout=0.0, sleep=MagicMock())

        with pytest.raises(CloudServiceError, match="did not finish"):
            client.transcribe(b"audio", "en-US", "audio/wav")

    def test_start_error_becomes_cloud_error(self, boto_client, staging) -> None:
        boto_client.start_transcription_job.side_effect = ClientError(
            {"Error": {"Code": "BadRequestException", "Message": "bad language"}},
            "StartTranscriptionJob",
        )

        with pytest.raises(CloudServiceError) as exc_info:
            TranscribeClient(staging, sleep=MagicMock()).transcribe(b"audio", "xx-XX", "audio/wav")

        assert exc_info.value.details["aws_error_code"] == "BadRequestException"
        staging.delete_keys.assert_called_once()

    def test_cleanup_failure_does_not_mask_result(self, boto_client, staging) -> None:
        boto_client.get_transcription_job.return_value = job_status("COMPLETED")
        staging.delete_keys.side_effect = CloudServiceError("delete failed")

        transcript = TranscribeClient(staging, sleep=MagicMock()).transcribe(b"a", "en-US", "audio/wav")

        assert transcript == "good morning"

    def test_unreadable_transcript_is_cloud_error(self, boto_client, staging) -> None:
        boto_client.get_transcription_job.return_value = job_status("COMPLETED")
        staging.read_json.side_effect = CloudServiceError("Object is not valid JSON", service="s3")

        with pytest.raises(CloudServiceError, match="not valid JSON"):
            TranscribeClient(staging, sleep=MagicMock()).transcribe(b"a", "en-US", "audio/wav")

        staging.delete_keys.assert_called_once()
