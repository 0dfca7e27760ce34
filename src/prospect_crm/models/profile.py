# ABOUTME: Pydantic models for prospect profiles and their structured history.
# ABOUTME: Profiles own their requests; updates produce new values via model_copy.

from datetime import UTC, datetime

from pydantic import Field

from prospect_crm.models.base import RecordModel
from prospect_crm.models.request import ServiceRequest, new_id


class Experience(RecordModel):
    """One entry of a prospect's work history."""

    role: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class Education(RecordModel):
    """One entry of a prospect's education history."""

    institution: str = ""
    degree: str = ""
    year: str = ""


class Profile(RecordModel):
    """A tracked prospect with biographical data, referral code and requests."""

    id: str = Field(default_factory=new_id)
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

    own_promo_code: str = Field(default="", description="Referral code shared with others")
    # Newest first; the front element is the latest request.
    requests: list[ServiceRequest] = Field(min_length=1)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def display_name(self) -> str:
        """Return the full name, or a placeholder when it is blank."""
        return self.full_name.strip() or "Unnamed prospect"
