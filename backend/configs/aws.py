"""
AWS language services configuration.

Settings for Translate, Polly, Textract and Transcribe, plus the S3 bucket
used to stage audio for batch transcription.

Dependencies: pydantic_settings
System role: Cloud AI platform configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    """Settings for AWS language service clients."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AWS_",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(default="us-east-1", description="AWS region for all language services")

    polly_output_format: str = Field(default="mp3", description="Polly audio output format")
    polly_prefer_neural: bool = Field(
        default=True,
        description="Prefer neural-engine voices when the language has one",
    )

    transcribe_bucket: str = Field(
        default="rosetta-dev-transcribe-staging",
        description="S3 bucket for staging audio and transcript output",
    )
    transcribe_prefix: str = Field(default="speech", description="Key prefix for staged audio")
    transcribe_poll_interval: float = Field(
        default=1.0,
        description="Seconds between transcription job status checks",
    )
    transcribe_timeout: float = Field(
        default=120.0,
        description="Maximum seconds to wait for a transcription job",
    )
    default_sample_rate: int = Field(
        default=16000,
        description="Sample rate assumed for raw/unknown audio uploads",
    )
