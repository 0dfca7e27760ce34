# ABOUTME: Rich table rendering for prospect profiles.
# ABOUTME: Provides ProfileTable for listing prospects with latest status and referral usage.

from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from prospect_crm.display.status import status_markup
from prospect_crm.models import Profile
from prospect_crm.referrals import count_usage
from prospect_crm.stats import get_profile_stats


class ProfileTable:
    """Renders Profile data as Rich tables.

    Usage counts are computed against the full collection, which may be
    larger than the list of rows being shown.
    """

    MAX_NAME_LENGTH = 30
    MAX_EMAIL_LENGTH = 30
    ID_PREFIX_LENGTH = 8

    def _truncate(self, text: str | None, max_length: int) -> str:
        """Truncate text to max length with ellipsis.

        Args:
            text: The text to truncate, or None.
            max_length: Maximum length before truncation.

        Returns:
            Truncated text with ellipsis, or empty string if None.
        """
        if text is None:
            return ""
        if len(text) <= max_length:
            return text
        return text[: max_length - 3] + "..."

    def render(
        self,
        profiles: Sequence[Profile],
        collection: Sequence[Profile],
        title: str | None = None,
    ) -> Table:
        """Render profiles as a Rich Table.

        Args:
            profiles: Profiles to display as rows.
            collection: Full collection used for referral usage counts.
            title: Optional title for the table.

        Returns:
            Rich Table with formatted prospect data.
        """
        table = Table(title=title, show_lines=False)

        table.add_column("ID", style="dim", no_wrap=True)
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Email", style="white", max_width=self.MAX_EMAIL_LENGTH)
        table.add_column("Own code", style="magenta")
        table.add_column("Latest", no_wrap=True)
        table.add_column("Requests", justify="right")
        table.add_column("Uses", justify="right", style="green")

        for profile in profiles:
            stats = get_profile_stats(profile)
            table.add_row(
                profile.id[: self.ID_PREFIX_LENGTH],
                escape(self._truncate(profile.display_name, self.MAX_NAME_LENGTH)),
                escape(self._truncate(profile.email, self.MAX_EMAIL_LENGTH)),
                escape(profile.own_promo_code) or "[dim]-[/dim]",
                status_markup(stats.latest_request.status),
                str(stats.total_requests),
                str(count_usage(profile, collection)),
            )

        return table
