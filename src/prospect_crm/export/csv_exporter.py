# ABOUTME: CSV exporter for prospect profiles.
# ABOUTME: Serializes the whole collection with JSON-embedded history fields and minimal quoting.

from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from prospect_crm.models import Education, Experience, Profile, ServiceRequest

_REQUESTS_ADAPTER = TypeAdapter(list[ServiceRequest])
_EXPERIENCE_ADAPTER = TypeAdapter(list[Experience])
_EDUCATION_ADAPTER = TypeAdapter(list[Education])

# A field is quoted when it contains any of these.
SPECIAL_CHARACTERS = ('"', ",", "\n", ";")


def escape_field(value: Any) -> str:
    """Render a single value as a CSV cell.

    Args:
        value: The value to render. None renders as an empty cell.

    Returns:
        The value as text, wrapped in double quotes with inner quotes doubled
        if it contains a quote, comma, newline or semicolon.
    """
    text = "" if value is None else str(value)
    if any(char in text for char in SPECIAL_CHARACTERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def parse_requests(cell: str) -> list[ServiceRequest]:
    """Parse the requests column of an exported row."""
    return _REQUESTS_ADAPTER.validate_json(cell)


def parse_experience(cell: str) -> list[Experience]:
    """Parse the experience column of an exported row."""
    return _EXPERIENCE_ADAPTER.validate_json(cell)


def parse_education(cell: str) -> list[Education]:
    """Parse the education column of an exported row."""
    return _EDUCATION_ADAPTER.validate_json(cell)


def default_export_filename(today: date | None = None) -> str:
    """Build the export file name with the date embedded.

    Args:
        today: Date to embed. Defaults to the current local date.

    Returns:
        File name of the form prospect_export_YYYY-MM-DD.csv.
    """
    today = today if today is not None else date.today()
    return f"prospect_export_{today.isoformat()}.csv"


class CSVExporter:
    """Exports prospect profiles to CSV format."""

    HEADERS = [
        "id",
        "full_name",
        "email",
        "phone",
        "job_title",
        "location",
        "own_promo_code",
        "created_at",
        "requests",
        "experience",
        "education",
        "summary",
    ]

    def render(self, profiles: Sequence[Profile]) -> str:
        """Render profiles as CSV text.

        Rows follow collection order. Lines are joined with a newline and the
        text has no trailing newline.

        Args:
            profiles: Profiles to export, in canonical order.

        Returns:
            The CSV document as a string.
        """
        lines = [",".join(self.HEADERS)]
        for profile in profiles:
            lines.append(",".join(escape_field(cell) for cell in self._profile_to_row(profile)))
        return "\n".join(lines)

    def export(self, profiles: Sequence[Profile], output_path: Path) -> Path:
        """Export profiles to a CSV file.

        Args:
            profiles: Profiles to export, in canonical order.
            output_path: Path to the output CSV file.

        Returns:
            Path to the created CSV file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            f.write(self.render(profiles))
        return output_path

    def _profile_to_row(self, profile: Profile) -> list[Any]:
        """Convert a Profile to a list of raw cell values.

        Args:
            profile: The Profile to convert.

        Returns:
            Cell values in HEADERS order, before escaping.
        """
        return [
            profile.id,
            profile.full_name,
            profile.email,
            profile.phone,
            profile.job_title,
            profile.location,
            profile.own_promo_code,
            profile.created_at.isoformat() if profile.created_at else "",
            _REQUESTS_ADAPTER.dump_json(profile.requests).decode("utf-8"),
            _EXPERIENCE_ADAPTER.dump_json(profile.experience).decode("utf-8"),
            _EDUCATION_ADAPTER.dump_json(profile.education).decode("utf-8"),
            profile.summary,
        ]
