# ABOUTME: Pydantic model for the structured record returned by the extraction service.
# ABOUTME: Accepts the service's camelCase keys and tolerates missing or null fields.

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from prospect_crm.models.base import RecordModel
from prospect_crm.models.profile import Education, Experience


class ExtractedRecord(RecordModel):
    """Candidate prospect data extracted from free text.

    Field names follow the extraction wire schema through camelCase aliases
    (``fullName``, ``extractedPromoCode``...). Python names are accepted too.
    """

    model_config = ConfigDict(
        frozen=True,
        coerce_numbers_to_str=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    full_name: str = ""
    email: str = ""
    job_title: str = ""
    phone: str = ""
    location: str = ""
    nationality: str = ""
    birth_year: str = ""
    portfolio_url: str = ""
    summary: str = ""

    skills: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    references: list[str] = Field(default_factory=list)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)

    extracted_promo_code: str = ""
    extracted_own_promo_code: str = ""
    extracted_request_details: str = ""
