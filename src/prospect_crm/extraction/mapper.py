# ABOUTME: Maps extraction results to Profile models.
# ABOUTME: Applies field defaults and attaches the initial pending request.

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from prospect_crm.models import ExtractedRecord, Profile, RequestStatus, ServiceRequest


def is_processable(raw_text: str | None) -> bool:
    """Return True when raw text holds something worth sending for extraction."""
    return bool(raw_text and raw_text.strip())


def map_extraction_to_profile(record: ExtractedRecord | Mapping[str, Any]) -> Profile:
    """Map an extraction result to a new Profile with one initial request.

    Construction is total: any field missing from the record falls back to an
    empty string or an empty list, including the full name.

    Args:
        record: ExtractedRecord, or a raw mapping using the service's camelCase keys.

    Returns:
        Profile with a fresh id, creation timestamp and a single PENDING request.
    """
    if not isinstance(record, ExtractedRecord):
        record = ExtractedRecord.model_validate(dict(record))

    created_at = datetime.now(UTC)

    initial_request = ServiceRequest(
        date=created_at,
        status=RequestStatus.PENDING,
        promo_code=record.extracted_promo_code,
        details=record.extracted_request_details,
    )

    return Profile(
        full_name=record.full_name,
        email=record.email,
        job_title=record.job_title,
        phone=record.phone,
        location=record.location,
        nationality=record.nationality,
        birth_year=record.birth_year,
        portfolio_url=record.portfolio_url,
        summary=record.summary,
        skills=list(record.skills),
        certifications=list(record.certifications),
        interests=list(record.interests),
        references=list(record.references),
        experience=list(record.experience),
        education=list(record.education),
        own_promo_code=record.extracted_own_promo_code,
        requests=[initial_request],
        created_at=created_at,
    )
