"""
Amazon Translate client.

Dependencies: boto3
System role: Text translation and supported-language listing
"""

import logging

import boto3

from backend.boundary.aws.errors import AWS_ERRORS, to_cloud_error

logger = logging.getLogger(__name__)

AUTO_DETECT = "auto"


class TranslateClient:
    """Thin wrapper over the boto3 translate client."""

    def __init__(self, region: str = "us-east-1") -> None:
        self._client = boto3.client("translate", region_name=region)

    def translate_text(
        self,
        text: str,
        target_lang: str,
        source_lang: str | None = None,
    ) -> tuple[str, str]:
        """
        Translate text into target_lang.

        Args:
            text: Text to translate
            target_lang: Target language code (e.g. "fr")
            source_lang: Source language code, None to auto-detect

        Returns:
            tuple[str, str]: (translated_text, source_language_code). The
            source code is the detected one when auto-detection was used.

        Raises:
            CloudServiceError: If the Translate call fails
        """
        try:
            response = self._client.translate_text(
                Text=text,
                SourceLanguageCode=source_lang or AUTO_DETECT,
                TargetLanguageCode=target_lang,
            )
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "translate", "translate_text") from e

        return response["TranslatedText"], response["SourceLanguageCode"]

    def list_languages(self, display_language: str = "en") -> list[dict[str, str]]:
        """
        List every language Amazon Translate supports.

        Returns:
            list[dict]: Items with language_code and language_name keys

        Raises:
            CloudServiceError: If the Translate call fails
        """
        languages: list[dict[str, str]] = []
        params = {"DisplayLanguageCode": display_language}

        try:
            while True:
                response = self._client.list_languages(**params)
                languages.extend(
                    {
                        "language_code": lang["LanguageCode"],
                        "language_name": lang["LanguageName"],
                    }
                    for lang in response.get("Languages", [])
                )
                next_token = response.get("NextToken")
                if not next_token:
                    break
                params["NextToken"] = next_token
        except AWS_ERRORS as e:
            raise to_cloud_error(e, "translate", "list_languages") from e

        logger.debug("Fetched supported languages", extra={"count": len(languages)})
        return languages
