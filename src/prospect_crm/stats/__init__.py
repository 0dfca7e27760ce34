# ABOUTME: Stats package for read-only aggregates over profiles.
# ABOUTME: Exports ProfileStats and the profile and collection aggregators.

from prospect_crm.stats.aggregator import ProfileStats, get_collection_stats, get_profile_stats

__all__ = ["ProfileStats", "get_collection_stats", "get_profile_stats"]
