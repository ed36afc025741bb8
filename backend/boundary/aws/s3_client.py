"""
S3 client for the audio staging bucket.

Batch transcription reads its input from S3 and writes its transcript
back there, so speech uploads pass through this bucket briefly.

Dependencies: boto3
System role: Short-lived object storage for transcription jobs
"""

import json
import logging
from typing import Any

import boto3

from backend.boundary.aws.errors import AWS_ERRORS, to_cloud_error
from backend.core.exceptions import CloudServiceError

logger = logging.getLogger(__name__)


class S3StagingClient:
    """S3 client for staging bucket operations."""

    def __init__(self, bucket: str, region: str = "us-east-1") -> None:
        """
        Initialize S3 client for the staging bucket.

        Args:
            bucket: S3 bucket name
            region: AWS region for the bucket
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def uri(self, s3_key: str) -> str:
        """Return the s3:// URI of a key in the staging bucket."""
        return f"s3://{self._bucket}/{s3_key}"

    def upload_bytes(
        self,
        s3_key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        """
        Store data under s3_key.

        Raises:
            CloudServiceError: If the upload fails
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=s3_key,
                Body=data,
                ContentType=content_type,
            )
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "s3", "put_object") from e

    def read_json(self, s3_key: str) -> dict[str, Any]:
        """
        Download and decode a JSON object.

        Raises:
            CloudServiceError: If the download fails or the object is not JSON
        """
        try:
            response = self._s3_client.get_object(Bucket=self._bucket, Key=s3_key)
            body = response["Body"].read()
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "s3", "get_object") from e

        try:
            return json.loads(body)
        except ValueError as e:
            raise CloudServiceError(
                f"Object is not valid JSON: {s3_key}",
                service="s3",
                operation="get_object",
                details={"s3_key": s3_key},
            ) from e

    def delete_keys(self, *s3_keys: str) -> None:
        """
        Delete staged objects.

        Raises:
            CloudServiceError: If the delete request fails
        """
        if not s3_keys:
            return
        try:
            self._s3_client.delete_objects(
                Bucket=self._bucket,
                Delete={"Objects": [{"Key": key} for key in s3_keys], "Quiet": True},
            )
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "s3", "delete_objects") from e
