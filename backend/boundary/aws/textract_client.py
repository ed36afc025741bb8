"""
Amazon Textract client.

Dependencies: boto3
System role: OCR text extraction from images
"""

import boto3

from backend.boundary.aws.errors import AWS_ERRORS, to_cloud_error


class TextractClient:
    """boto3 Textract wrapper for synchronous text detection."""

    def __init__(self, region: str = "us-east-1") -> None:
        self._client = boto3.client("textract", region_name=region)

    def detect_text(self, image: bytes) -> str:
        """
        Detect printed or handwritten text in an image.

        Args:
            image: Raw JPEG, PNG, TIFF or PDF bytes

        Returns:
            str: LINE blocks in reading order joined with newlines,
            empty string when no text is found

        Raises:
            CloudServiceError: If Textract rejects the document or fails
        """
        try:
            response = self._client.detect_document_text(Document={"Bytes": image})
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "textract", "detect_document_text") from e

        lines = [
            block["Text"]
            for block in response.get("Blocks", [])
            if block.get("BlockType") == "LINE" and block.get("Text")
        ]
        return "\n".join(lines)
