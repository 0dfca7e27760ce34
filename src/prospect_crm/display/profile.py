# ABOUTME: Detail views for a single prospect and for an extraction awaiting review.
# ABOUTME: Shows contact info, referral usage, request history with code owners, and history entries.

from collections.abc import Sequence

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from prospect_crm.display.status import status_markup
from prospect_crm.models import ExtractedRecord, Profile
from prospect_crm.referrals import count_usage, resolve_owner
from prospect_crm.stats import get_profile_stats


def _or_na(value: str) -> str:
    return escape(value) if value.strip() else "[dim]N/A[/dim]"


def render_contact_panel(profile: Profile) -> Panel:
    """Render contact and biographical fields of a profile.

    Args:
        profile: The profile to display.

    Returns:
        Rich Panel with one row per field.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("ID:", profile.id)
    table.add_row("Title:", _or_na(profile.job_title))
    table.add_row("Email:", _or_na(profile.email))
    table.add_row("Phone:", _or_na(profile.phone))
    table.add_row("Location:", _or_na(profile.location))
    if profile.nationality:
        table.add_row("Nationality:", escape(profile.nationality))
    if profile.birth_year:
        table.add_row("Born:", escape(profile.birth_year))
    if profile.portfolio_url:
        table.add_row("Portfolio:", escape(profile.portfolio_url))
    table.add_row("Created:", profile.created_at.strftime("%Y-%m-%d %H:%M"))

    return Panel(
        table,
        title=f"[bold]{escape(profile.display_name)}[/bold]",
        border_style="cyan",
        padding=(1, 2),
    )


def render_referral_panel(profile: Profile, collection: Sequence[Profile]) -> Panel:
    """Render the profile's own code, its usage count and request statistics.

    Args:
        profile: The profile to display.
        collection: Full collection used to count code usage.

    Returns:
        Rich Panel with referral and request counts.
    """
    stats = get_profile_stats(profile)

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    code = escape(profile.own_promo_code) if profile.own_promo_code.strip() else "[dim]NONE[/dim]"
    table.add_row("Own code:", f"[bold magenta]{code}[/bold magenta]")
    table.add_row("Used:", f"[cyan]{count_usage(profile, collection)}[/cyan] time(s)")
    table.add_row("Requests:", f"[cyan]{stats.total_requests}[/cyan]")
    table.add_row("Delivered:", f"[green]{stats.delivered_requests}[/green]")

    return Panel(table, title="Referral", border_style="magenta", padding=(1, 2))


def render_requests_table(profile: Profile, collection: Sequence[Profile]) -> Table:
    """Render the request history, newest first, with the owner of each cited code.

    Args:
        profile: The profile whose requests are shown.
        collection: Full collection used to resolve code owners.

    Returns:
        Rich Table with one row per request.
    """
    table = Table(title="Requests", show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Details", max_width=40)
    table.add_column("Code used", style="magenta")
    table.add_column("Code owner", style="cyan")

    for request in profile.requests:
        owner = resolve_owner(request.promo_code, collection)
        if owner is not None:
            owner_text = escape(owner.display_name)
        elif request.promo_code.strip():
            owner_text = "[yellow]unknown code[/yellow]"
        else:
            owner_text = ""
        table.add_row(
            request.id[:8],
            request.date.strftime("%Y-%m-%d"),
            status_markup(request.status),
            escape(request.details) or "[dim]General request[/dim]",
            escape(request.promo_code),
            owner_text,
        )

    return table


def render_history_table(profile: Profile) -> Table | None:
    """Render experience and education entries, or None when both are empty."""
    if not profile.experience and not profile.education:
        return None

    table = Table(title="History", show_lines=False)
    table.add_column("Kind", style="dim")
    table.add_column("What")
    table.add_column("Where")
    table.add_column("When", no_wrap=True)

    for entry in profile.experience:
        table.add_row("Experience", escape(entry.role), escape(entry.company), escape(entry.duration))
    for entry in profile.education:
        table.add_row("Education", escape(entry.degree), escape(entry.institution), escape(entry.year))

    return table


def render_profile_detail(profile: Profile, collection: Sequence[Profile]) -> Group:
    """Render the full detail view of a profile.

    Args:
        profile: The profile to display.
        collection: Full collection used for referral lookups.

    Returns:
        Rich Group of panels and tables.
    """
    parts: list[Panel | Table] = [
        render_contact_panel(profile),
        render_referral_panel(profile, collection),
        render_requests_table(profile, collection),
    ]
    history = render_history_table(profile)
    if history is not None:
        parts.append(history)
    if profile.summary.strip():
        parts.append(Panel(escape(profile.summary), title="Summary", border_style="dim"))
    if profile.skills:
        parts.append(Panel(escape(", ".join(profile.skills)), title="Skills", border_style="dim"))
    return Group(*parts)


def render_extraction_review(record: ExtractedRecord) -> Panel:
    """Render an extraction result for review before it is saved.

    Args:
        record: The extracted record.

    Returns:
        Rich Panel summarizing the fields that will be stored.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("Name:", _or_na(record.full_name))
    table.add_row("Email:", _or_na(record.email))
    table.add_row("Title:", _or_na(record.job_title))
    table.add_row("Phone:", _or_na(record.phone))
    table.add_row("Location:", _or_na(record.location))
    table.add_row("Code used:", _or_na(record.extracted_promo_code))
    table.add_row("Own code:", _or_na(record.extracted_own_promo_code))
    table.add_row("Request:", _or_na(record.extracted_request_details))
    table.add_row(
        "History:",
        f"{len(record.experience)} experience, {len(record.education)} education",
    )

    return Panel(table, title="Review Extraction", border_style="cyan", padding=(1, 2))
