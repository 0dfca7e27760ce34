# ABOUTME: Pydantic model for a single service request placed by a prospect.
# ABOUTME: Defines the closed RequestStatus vocabulary used by the request pipeline.

from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from pydantic import Field

from prospect_crm.models.base import RecordModel


class RequestStatus(str, Enum):
    """Delivery status of a service request."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"  # declared but never produced by any control
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"  # declared but never produced by any control


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid4().hex


class ServiceRequest(RecordModel):
    """One service order owned by exactly one Profile."""

    id: str = Field(default_factory=new_id)
    date: datetime = Field(default_factory=lambda: datetime.now(UTC))
    status: RequestStatus = RequestStatus.PENDING
    promo_code: str = Field(default="", description="Code cited for this request")
    details: str = Field(default="", description="What was ordered")
