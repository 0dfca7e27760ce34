# ABOUTME: Display module for Rich terminal output formatting.
# ABOUTME: Exports tables, detail views, status styling and error panels.

from prospect_crm.display.errors import display_error, display_extraction_error
from prospect_crm.display.profile import render_extraction_review, render_profile_detail
from prospect_crm.display.status import render_collection_stats, status_markup, status_style
from prospect_crm.display.tables import ProfileTable

__all__ = [
    "ProfileTable",
    "display_error",
    "display_extraction_error",
    "render_collection_stats",
    "render_extraction_review",
    "render_profile_detail",
    "status_markup",
    "status_style",
]
