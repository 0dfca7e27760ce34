# ABOUTME: Pipeline package for request status and field updates.
# ABOUTME: Exports the copy-on-write update operations and the selectable statuses.

from prospect_crm.pipeline.requests import (
    SELECTABLE_STATUSES,
    set_own_promo_code,
    set_request_details,
    set_request_promo_code,
    set_status,
)

__all__ = [
    "SELECTABLE_STATUSES",
    "set_own_promo_code",
    "set_request_details",
    "set_request_promo_code",
    "set_status",
]
