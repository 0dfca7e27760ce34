# ABOUTME: Referral package for promo code ownership and usage queries.
# ABOUTME: Exports the pure resolver functions operating on the profile collection.

from prospect_crm.referrals.resolver import (
    count_usage,
    find_referred_requests,
    normalize_code,
    resolve_owner,
)

__all__ = ["count_usage", "find_referred_requests", "normalize_code", "resolve_owner"]
