# ABOUTME: Gemini client wrapper that turns free text into a structured prospect record.
# ABOUTME: Wraps google-generativeai and converts every failure into a typed ExtractionError.

import json
import logging
from typing import Any

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from pydantic import ValidationError

from prospect_crm.extraction.exceptions import (
    EmptyResponseError,
    ExtractionError,
    ExtractionNetworkError,
    InvalidResponseError,
    MissingCredentialError,
)
from prospect_crm.models import ExtractedRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("fullName", "email")

SYSTEM_INSTRUCTION = (
    "You are an expert recruiting assistant. Respond with a single valid JSON object only."
)

EXTRACTION_PROMPT = """Analyse the following text (CV, form or message) and extract structured \
information as JSON.

Use exactly these keys:
- fullName, jobTitle, email, phone, location, nationality, birthYear, portfolioUrl, summary: strings
- skills, certifications, interests, references: arrays of strings
- experience: array of objects with role, company, duration, description
- education: array of objects with institution, degree, year
- extractedPromoCode: the discount or promo code the person USES for this request
- extractedOwnPromoCode: the personal referral code the person offers to share with others
- extractedRequestDetails: a concise summary of what the person is asking for

If a piece of information is absent, use an empty string or an empty array.
fullName and email must always be present.

TEXT TO ANALYSE:
{raw_text}"""


class ProfileExtractor:
    """Wrapper around google-generativeai for prospect extraction."""

    def __init__(self, api_key: str | None, model_name: str = "gemini-2.0-flash") -> None:
        """Create a configured extraction client.

        Args:
            api_key: Gemini API key.
            model_name: Name of the Gemini model to call.

        Raises:
            MissingCredentialError: If no API key is provided.
        """
        if not api_key or not api_key.strip():
            raise MissingCredentialError(
                "Gemini API key is missing. Set PROSPECT_CRM_GEMINI_API_KEY "
                "or run 'prospect-crm login'."
            )

        genai.configure(api_key=api_key.strip())
        self.model_name = model_name
        self._model = genai.GenerativeModel(
            model_name=model_name,
            generation_config={
                "temperature": 0.2,
                "response_mime_type": "application/json",
            },
            system_instruction=SYSTEM_INSTRUCTION,
        )

    async def extract(self, raw_text: str) -> ExtractedRecord:
        """Extract a structured prospect record from raw text.

        No timeout is applied here; callers wrap this coroutine if they need one.

        Args:
            raw_text: CV, form content or free-form message.

        Returns:
            The validated ExtractedRecord.

        Raises:
            MissingCredentialError: If the API key is rejected.
            ExtractionNetworkError: If the service cannot be reached.
            EmptyResponseError: If the model returns no text.
            InvalidResponseError: If the model output is not a valid record.
        """
        logger.info("Extracting prospect from %d characters with %s", len(raw_text), self.model_name)

        try:
            response = await self._model.generate_content_async(
                EXTRACTION_PROMPT.format(raw_text=raw_text)
            )
        except Exception as e:
            error = self._wrap_exception(e)
            logger.warning("Extraction call failed: %s", error)
            raise error from e

        try:
            text = response.text
        except ValueError as e:
            # Raised by the library when the response has no candidate parts.
            raise EmptyResponseError("The extraction model returned an empty response.") from e

        return self._parse_response(text)

    def _parse_response(self, text: str | None) -> ExtractedRecord:
        """Validate the raw model output.

        Args:
            text: JSON text returned by the model.

        Returns:
            The validated ExtractedRecord.

        Raises:
            EmptyResponseError: If the text is empty.
            InvalidResponseError: If the text is not a JSON object with the required fields.
        """
        if not text or not text.strip():
            raise EmptyResponseError("The extraction model returned an empty response.")

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidResponseError(f"The extraction model returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise InvalidResponseError("The extraction model did not return a JSON object.")

        missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            raise InvalidResponseError(
                f"The extraction result is missing required fields: {', '.join(missing)}."
            )

        try:
            return ExtractedRecord.model_validate(data)
        except ValidationError as e:
            raise InvalidResponseError(
                f"The extraction result does not match the prospect schema: {e}"
            ) from e

    def _wrap_exception(self, exception: Exception) -> ExtractionError:
        """Convert a library exception to the appropriate ExtractionError type.

        Args:
            exception: The original exception raised during the API call.

        Returns:
            The appropriate ExtractionError subclass for the exception.
        """
        if isinstance(
            exception, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)
        ):
            return MissingCredentialError(f"The Gemini API key was rejected: {exception}")

        error_message = str(exception).lower()
        if "api key" in error_message or "api_key" in error_message:
            return MissingCredentialError(f"The Gemini API key was rejected: {exception}")

        return ExtractionNetworkError(
            f"Could not reach the extraction service. Check your connection. ({exception})"
        )
