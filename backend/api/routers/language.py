"""
Language service API endpoints.

Routes:
- POST /translate - Translate text
- POST /tts - Text-to-speech, base64 audio in the response
- POST /ocr - Text detection in an uploaded image
- POST /speech - Transcription of an uploaded audio clip
- GET /languages - Languages supported for translation

These endpoints persist nothing; clients save results through /translations.

Dependencies: backend.application.services.language_service, backend.models
System role: Cloud AI delegation HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from backend.api.deps.dependencies import get_current_user_id, get_language_service
from backend.api.routers.router_utils import api_error, handle_service_errors
from backend.application.services.language_service import LanguageService
from backend.core.exceptions import CloudServiceError, UnsupportedVoiceError
from backend.models.common import ApiResponse
from backend.models.language import LanguageResponse, TranslateRequest, TtsRequest
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["language"])

TTS_UNAVAILABLE_MESSAGE = "Text-to-Speech is not available for the selected language."


@router.post("/translate", response_model=ApiResponse)
async def translate_text(
    request: TranslateRequest,
    user_id: UUID = Depends(get_current_user_id),
    language_service: LanguageService = Depends(get_language_service),
) -> ApiResponse:
    """
    Translate text, auto-detecting the source language when omitted.

    Returns:
        ApiResponse: message is the translated text, data.sourceLang the
        given or detected source language

    Raises:
        HTTPException(500): Translation failed
    """
    try:
        result = await language_service.translate(
            request.text, request.target_lang, request.source_lang
        )
    except CloudServiceError as e:
        logger.error("Translation failed", extra={"user_id": str(user_id), "error": str(e)})
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Error during translation: {e.message}",
        ) from e

    return ApiResponse(
        success=True,
        message=result["translated_text"],
        data={"sourceLang": result["source_lang"]},
    )


@router.post("/tts", response_model=ApiResponse)
async def text_to_speech(
    request: TtsRequest,
    user_id: UUID = Depends(get_current_user_id),
    language_service: LanguageService = Depends(get_language_service),
) -> ApiResponse:
    """
    Synthesize speech for text.

    A language without a voice is not an error: the response is 200 with
    success=false and message TTS_UNAVAILABLE.

    Raises:
        HTTPException(500): GENERAL_TTS_ERROR for any other failure
    """
    try:
        audio = await language_service.synthesize_speech(request.text, request.language_code)
    except UnsupportedVoiceError as e:
        logger.warning(
            "TTS unavailable for language",
            extra={"language_code": request.language_code, "error": str(e)},
        )
        return ApiResponse(success=False, message="TTS_UNAVAILABLE", data=TTS_UNAVAILABLE_MESSAGE)
    except Exception as e:
        log_exception_with_context(
            logger,
            "Error during text-to-speech",
            e,
            language_code=request.language_code,
            user_id=user_id,
        )
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "GENERAL_TTS_ERROR",
            data=f"Error during text-to-speech: {e}",
        ) from e

    return ApiResponse(success=True, message="TTS_AUDIO_GENERATED", data=audio)


@router.post("/ocr", response_model=ApiResponse)
async def ocr(
    file: UploadFile = File(...),
    user_id: UUID = Depends(get_current_user_id),
    language_service: LanguageService = Depends(get_language_service),
) -> ApiResponse:
    """
    Detect text in an uploaded image.

    Raises:
        HTTPException(400): Empty file
        HTTPException(500): OCR failed
    """
    content = await file.read()
    if not content:
        raise api_error(status.HTTP_400_BAD_REQUEST, "File is empty")

    try:
        detected = await language_service.extract_text(content)
    except CloudServiceError as e:
        logger.error("OCR failed", extra={"user_id": str(user_id), "error": str(e)})
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Error during OCR processing: {e.message}",
        ) from e

    return ApiResponse(success=True, message=detected)


@router.post("/speech", response_model=ApiResponse)
async def speech_to_text(
    file: UploadFile = File(...),
    language_code: str = Form(..., alias="languageCode", min_length=1),
    user_id: UUID = Depends(get_current_user_id),
    language_service: LanguageService = Depends(get_language_service),
) -> ApiResponse:
    """
    Transcribe an uploaded audio clip.

    Raises:
        HTTPException(400): Empty file
        HTTPException(500): Transcription failed
    """
    content = await file.read()
    if not content:
        raise api_error(status.HTTP_400_BAD_REQUEST, "Audio file is empty")

    try:
        transcript = await language_service.transcribe(content, language_code, file.content_type)
    except CloudServiceError as e:
        logger.error(
            "Speech-to-text failed",
            extra={"language_code": language_code, "user_id": str(user_id), "error": str(e)},
        )
        raise api_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Error during speech-to-text processing: {e.message}",
        ) from e

    return ApiResponse(success=True, message=transcript)


@router.get("/languages", response_model=list[LanguageResponse])
@handle_service_errors
async def list_languages(
    user_id: UUID = Depends(get_current_user_id),
    language_service: LanguageService = Depends(get_language_service),
) -> list[LanguageResponse]:
    """List languages the translation backend supports."""
    languages = await language_service.list_languages()
    return [LanguageResponse.model_validate(lang) for lang in languages]
