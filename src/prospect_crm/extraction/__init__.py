# ABOUTME: Extraction package turning free text into prospect profiles.
# ABOUTME: Exports the Gemini-backed extractor, the profile mapper and the error types.

from prospect_crm.extraction.client import ProfileExtractor
from prospect_crm.extraction.exceptions import (
    EmptyResponseError,
    ExtractionError,
    ExtractionNetworkError,
    InvalidResponseError,
    MissingCredentialError,
)
from prospect_crm.extraction.mapper import is_processable, map_extraction_to_profile

__all__ = [
    "EmptyResponseError",
    "ExtractionError",
    "ExtractionNetworkError",
    "InvalidResponseError",
    "MissingCredentialError",
    "ProfileExtractor",
    "is_processable",
    "map_extraction_to_profile",
]
