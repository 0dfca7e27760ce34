# ABOUTME: Custom exceptions for the free-text extraction service.
# ABOUTME: One type per failure mode so callers can show a distinct message for each.

from prospect_crm.errors import ProspectCRMError


class ExtractionError(ProspectCRMError):
    """Base exception for all extraction failures."""

    pass


class MissingCredentialError(ExtractionError):
    """Exception raised when no API key is configured or the key is rejected."""

    pass


class ExtractionNetworkError(ExtractionError):
    """Exception raised when the extraction service cannot be reached."""

    pass


class EmptyResponseError(ExtractionError):
    """Exception raised when the model returns no usable text."""

    pass


class InvalidResponseError(ExtractionError):
    """Exception raised when the model output is not a valid prospect record."""

    pass
