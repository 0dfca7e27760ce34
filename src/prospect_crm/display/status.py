# ABOUTME: Status labels and styles for request statuses and collection stats panels.
# ABOUTME: Matches exhaustively over RequestStatus so a new status cannot go unrendered.

from typing import Any, assert_never

from rich.panel import Panel
from rich.table import Table

from prospect_crm.models import RequestStatus


def status_style(status: RequestStatus) -> tuple[str, str]:
    """Return the display label and Rich color for a request status.

    Args:
        status: The request status.

    Returns:
        Tuple of (label, color).
    """
    match status:
        case RequestStatus.PENDING:
            return "Pending", "yellow"
        case RequestStatus.IN_PROGRESS:
            return "In progress", "blue"
        case RequestStatus.COMPLETED:
            return "Completed", "cyan"
        case RequestStatus.DELIVERED:
            return "Delivered", "green"
        case RequestStatus.CANCELLED:
            return "Cancelled", "red"
        case _:
            assert_never(status)


def status_markup(status: RequestStatus) -> str:
    """Return Rich markup showing a colored status label."""
    label, color = status_style(status)
    return f"[{color}]{label}[/{color}]"


def render_collection_stats(stats: dict[str, Any]) -> Panel:
    """Render collection statistics as a Rich Panel.

    Args:
        stats: Dictionary of statistics from get_collection_stats.

    Returns:
        Rich Panel containing formatted statistics.
    """
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Label", style="dim")
    table.add_column("Value")

    table.add_row("Prospects:", f"[cyan]{stats.get('total_profiles', 0)}[/cyan]")
    table.add_row("Requests:", f"[cyan]{stats.get('total_requests', 0)}[/cyan]")
    table.add_row("With referral code:", f"[cyan]{stats.get('profiles_with_code', 0)}[/cyan]")
    table.add_row("Referral uses:", f"[cyan]{stats.get('referral_uses', 0)}[/cyan]")

    distribution = stats.get("status_distribution", {})
    parts = []
    for status in RequestStatus:
        count = distribution.get(status.value, 0)
        if count:
            parts.append(f"{status_markup(status)}: {count}")
    if parts:
        table.add_row("By status:", ", ".join(parts))

    return Panel(
        table,
        title="Collection Statistics",
        border_style="blue",
        padding=(1, 2),
    )
