# ABOUTME: Error display helpers for formatting error messages with Rich.
# ABOUTME: Provides panels for extraction failures, missing credentials and generic errors.

import traceback

from rich.panel import Panel
from rich.text import Text

from prospect_crm.extraction.exceptions import (
    ExtractionError,
    ExtractionNetworkError,
    MissingCredentialError,
)


def display_error(error: Exception, verbose: bool = False) -> Panel:
    """Format an error as a Rich Panel.

    Args:
        error: The exception to display.
        verbose: If True, include full traceback information.

    Returns:
        A Rich Panel containing formatted error information.
    """
    content = Text()
    content.append(f"{type(error).__name__}: ", style="bold red")
    content.append(str(error), style="red")

    if verbose:
        content.append("\n\n")
        content.append("Traceback:", style="dim")
        content.append("\n")
        tb_text = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        content.append(tb_text, style="dim")

    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(1, 2),
    )


def display_extraction_error(error: ExtractionError) -> Panel:
    """Display an extraction failure with a hint matching its cause.

    Args:
        error: The extraction exception.

    Returns:
        A Rich Panel explaining what failed and what to try next.
    """
    message = Text()
    message.append("Extraction failed\n\n", style="bold red")
    message.append(f"{error}\n\n", style="red")

    if isinstance(error, MissingCredentialError):
        message.append("Set PROSPECT_CRM_GEMINI_API_KEY or run ", style="dim")
        message.append("prospect-crm login", style="bold cyan")
        message.append(".", style="dim")
    elif isinstance(error, ExtractionNetworkError):
        message.append("• Check your internet connection\n", style="dim")
        message.append("• Try again in a few moments", style="dim")
    else:
        message.append("The model answer could not be used. Try again or edit the text.", style="dim")

    message.append("\n\nNo prospect was created.", style="yellow")

    return Panel(
        message,
        title="Extraction Error",
        border_style="red",
        padding=(1, 2),
    )
