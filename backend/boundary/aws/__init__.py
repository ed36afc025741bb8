"""
AWS boundary modules.

Exports: TranslateClient, PollyClient, TextractClient, TranscribeClient, S3StagingClient
"""

from .polly_client import PollyClient
from .s3_client import S3StagingClient
from .textract_client import TextractClient
from .transcribe_client import TranscribeClient
from .translate_client import TranslateClient

__all__ = [
    "PollyClient",
    "S3StagingClient",
    "TextractClient",
    "TranscribeClient",
    "TranslateClient",
]
