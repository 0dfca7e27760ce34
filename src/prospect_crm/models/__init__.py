# ABOUTME: Models package for prospect CRM data structures.
# ABOUTME: Exports Profile, ServiceRequest, history entries and the extraction record.

from prospect_crm.models.extraction import ExtractedRecord
from prospect_crm.models.profile import Education, Experience, Profile
from prospect_crm.models.request import RequestStatus, ServiceRequest

__all__ = [
    "Education",
    "Experience",
    "ExtractedRecord",
    "Profile",
    "RequestStatus",
    "ServiceRequest",
]
