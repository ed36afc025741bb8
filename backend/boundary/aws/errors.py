"""
Conversion of botocore failures into domain errors.

Dependencies: botocore, backend.core.exceptions
System role: Keeps boto3 exception types from leaking past the boundary layer
"""

from botocore.exceptions import BotoCoreError, ClientError

from backend.core.exceptions import CloudServiceError

AWS_ERRORS = (ClientError, BotoCoreError)


def error_code(exc: Exception) -> str | None:
    """Return the AWS error code of a ClientError, None for anything else."""
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code")
    return None


def to_cloud_error(exc: Exception, service: str, operation: str) -> CloudServiceError:
    """
    Build a CloudServiceError describing a failed AWS call.

    Args:
        exc: The ClientError or BotoCoreError raised by boto3
        service: Short service name (translate, polly, textract, transcribe, s3)
        operation: API operation that failed

    Returns:
        CloudServiceError to raise from the original exception
    """
    details = {}
    code = error_code(exc)
    if code:
        details["aws_error_code"] = code
    return CloudServiceError(
        str(exc),
        service=service,
        operation=operation,
        details=details,
    )
