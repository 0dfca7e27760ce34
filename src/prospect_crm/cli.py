# ABOUTME: Command line interface for the prospect CRM using Typer.
# ABOUTME: Provides add, list, show, request update, export, status, login and logout commands.

import asyncio
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from sqlalchemy.exc import SQLAlchemyError

from prospect_crm.auth import ApiKeyManager, resolve_api_key
from prospect_crm.config import ensure_data_dir, get_settings
from prospect_crm.display import (
    ProfileTable,
    display_error,
    display_extraction_error,
    render_collection_stats,
    render_extraction_review,
    render_profile_detail,
    status_markup,
)
from prospect_crm.errors import ProfileNotFoundError
from prospect_crm.export import CSVExporter, default_export_filename
from prospect_crm.extraction import (
    ExtractionError,
    ExtractionNetworkError,
    ProfileExtractor,
    is_processable,
    map_extraction_to_profile,
)
from prospect_crm.logging_setup import setup_logging
from prospect_crm.models import ExtractedRecord, Profile, RequestStatus
from prospect_crm.pipeline import (
    SELECTABLE_STATUSES,
    set_own_promo_code,
    set_request_details,
    set_request_promo_code,
    set_status,
)
from prospect_crm.repository import ProfileRepository
from prospect_crm.search import filter_profiles
from prospect_crm.stats import get_collection_stats
from prospect_crm.storage import SQLiteKeyValueStore

app = typer.Typer(
    name="prospect-crm",
    help="Track prospects, their service requests and referral codes.",
    add_completion=False,
)

console = Console()
state = {"verbose": False}

StatusChoice = Enum(  # type: ignore[misc]
    "StatusChoice", {status.name: status.value for status in SELECTABLE_STATUSES}, type=str
)


def _open_repository() -> ProfileRepository:
    """Create the repository over the configured store and load the collection."""
    settings = get_settings()
    try:
        ensure_data_dir()
        store = SQLiteKeyValueStore(db_path=settings.db_path)
        store.init_db()
    except (OSError, SQLAlchemyError) as e:
        console.print(display_error(e, verbose=state["verbose"]))
        console.print(f"[dim]Check PROSPECT_CRM_DB_PATH ({settings.db_path}).[/dim]")
        raise typer.Exit(code=1) from None
    repository = ProfileRepository(store, key=settings.collection_key)
    repository.load()
    return repository


def _get_profile(repository: ProfileRepository, reference: str) -> Profile:
    """Look up a profile, exiting with an error message if it cannot be found."""
    try:
        return repository.get(reference)
    except ProfileNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("[dim]Run 'prospect-crm list' to see profile ids.[/dim]")
        raise typer.Exit(code=1) from None


def _resolve_request_id(profile: Profile, reference: str) -> str:
    """Expand a request id prefix to a full id.

    Args:
        profile: The profile owning the request.
        reference: Full request id or a unique prefix of one.

    Returns:
        The full id, or the reference unchanged if it matches nothing.
    """
    reference = reference.strip()
    matches = [r.id for r in profile.requests if reference and r.id.startswith(reference)]
    if reference in matches:
        return reference
    return matches[0] if len(matches) == 1 else reference


def _apply_request_update(
    repository: ProfileRepository, profile: Profile, request_id: str, updated: Profile
) -> None:
    """Store an updated profile, or report that the request reference matched nothing."""
    if not any(r.id == request_id for r in profile.requests):
        console.print(
            f"[yellow]No request matches '{escape(request_id)}'; nothing changed.[/yellow]"
        )
        return
    repository.replace(updated)
    console.print("[green]Request updated.[/green]")


def _read_raw_text(file: Path | None, text: str | None) -> str:
    """Collect the raw text to process from a file, an option, stdin or a prompt."""
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            console.print(f"[red]Error: {escape(str(file))} is not a UTF-8 text file.[/red]")
            raise typer.Exit(code=1) from None
    if text is not None:
        return text
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return Prompt.ask("[bold]Paste the prospect text[/bold]")


async def _extract_with_timeout(
    extractor: ProfileExtractor, raw_text: str, timeout: float
) -> ExtractedRecord:
    """Run one extraction call with a caller-side timeout."""
    try:
        return await asyncio.wait_for(extractor.extract(raw_text), timeout=timeout)
    except TimeoutError as e:
        raise ExtractionNetworkError(
            f"The extraction service did not answer within {timeout:g} seconds."
        ) from e


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Prospect CRM command line tool.

    Extract prospects from free text, follow their requests and
    track who uses whose referral code.
    """
    state["verbose"] = verbose
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_file)

    if ctx.invoked_subcommand is None:
        console.print("[dim]Use --help to see available commands.[/dim]")


@app.command()
def add(
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read the prospect text from a file.",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ] = None,
    text: Annotated[
        str | None,
        typer.Option("--text", "-t", help="Prospect text given inline."),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Override the extracted full name."),
    ] = None,
    email: Annotated[
        str | None,
        typer.Option("--email", help="Override the extracted email."),
    ] = None,
    job_title: Annotated[
        str | None,
        typer.Option("--job-title", help="Override the extracted job title."),
    ] = None,
    phone: Annotated[
        str | None,
        typer.Option("--phone", help="Override the extracted phone number."),
    ] = None,
    promo_code: Annotated[
        str | None,
        typer.Option("--promo-code", help="Override the promo code used for the request."),
    ] = None,
    own_code: Annotated[
        str | None,
        typer.Option("--own-code", help="Override the prospect's own referral code."),
    ] = None,
    details: Annotated[
        str | None,
        typer.Option("--details", help="Override the request details."),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Save without asking for confirmation."),
    ] = False,
) -> None:
    """Extract a prospect from free text and save it.

    The text (CV, form or message) is sent to the extraction service.
    The result, with any overrides applied, is shown for review and saved
    with one pending request.
    """
    raw_text = _read_raw_text(file, text)
    if not is_processable(raw_text):
        console.print("[yellow]Nothing to process: the text is empty.[/yellow]")
        raise typer.Exit()

    settings = get_settings()
    console.print("[dim]Extracting prospect...[/dim]")
    try:
        extractor = ProfileExtractor(resolve_api_key(settings), settings.gemini_model)
        record = asyncio.run(
            _extract_with_timeout(extractor, raw_text, settings.extraction_timeout_seconds)
        )
    except ExtractionError as e:
        console.print(display_extraction_error(e))
        raise typer.Exit(code=1) from None

    overrides = {
        "full_name": name,
        "email": email,
        "job_title": job_title,
        "phone": phone,
        "extracted_promo_code": promo_code,
        "extracted_own_promo_code": own_code,
        "extracted_request_details": details,
    }
    record = record.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    console.print(render_extraction_review(record))
    if not yes and not Confirm.ask("[bold]Save this prospect?[/bold]", default=True):
        console.print("[yellow]Discarded. No prospect was created.[/yellow]")
        raise typer.Exit()

    repository = _open_repository()
    profile = repository.add(map_extraction_to_profile(record))
    console.print(
        f"[green]Saved prospect '[bold]{escape(profile.display_name)}[/bold]' "
        f"({profile.id[:8]}).[/green]"
    )


@app.command(name="list")
def list_profiles(
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Filter by name, email or promo code used."),
    ] = None,
) -> None:
    """List prospects with their latest request status and referral usage."""
    repository = _open_repository()
    collection = repository.profiles
    profiles = filter_profiles(collection, search)

    if not profiles:
        if search:
            console.print("[yellow]No prospects match your search.[/yellow]")
        else:
            console.print("[yellow]No prospects yet. Run 'prospect-crm add' to create one.[/yellow]")
        return

    console.print(ProfileTable().render(profiles, collection, title="Prospects"))
    console.print(f"[dim]{len(profiles)} of {len(collection)} prospect(s).[/dim]")


@app.command()
def show(
    profile_ref: Annotated[str, typer.Argument(help="Profile id or id prefix.")],
) -> None:
    """Show a prospect's details, requests and referral usage."""
    repository = _open_repository()
    profile = _get_profile(repository, profile_ref)
    console.print(render_profile_detail(profile, repository.profiles))


@app.command(name="set-status")
def set_status_command(
    profile_ref: Annotated[str, typer.Argument(help="Profile id or id prefix.")],
    request_ref: Annotated[str, typer.Argument(help="Request id or id prefix.")],
    status: Annotated[
        StatusChoice,
        typer.Argument(help="New status.", case_sensitive=False),
    ],
) -> None:
    """Set the status of a request."""
    repository = _open_repository()
    profile = _get_profile(repository, profile_ref)
    new_status = RequestStatus(status.value)
    request_id = _resolve_request_id(profile, request_ref)
    current = next((r for r in profile.requests if r.id == request_id), None)
    if current is not None and current.status == new_status:
        console.print(f"[dim]Status is already {status_markup(new_status)}.[/dim]")
        return
    updated = set_status(profile, request_id, new_status)
    _apply_request_update(repository, profile, request_id, updated)


@app.command(name="set-code")
def set_code(
    profile_ref: Annotated[str, typer.Argument(help="Profile id or id prefix.")],
    code: Annotated[str, typer.Argument(help="New referral code (empty string clears it).")],
) -> None:
    """Set the referral code a prospect shares with others."""
    repository = _open_repository()
    profile = _get_profile(repository, profile_ref)
    repository.replace(set_own_promo_code(profile, code))
    if code.strip():
        console.print(f"[green]Referral code set to '[bold]{escape(code)}[/bold]'.[/green]")
    else:
        console.print("[green]Referral code cleared.[/green]")


@app.command(name="set-request-code")
def set_request_code(
    profile_ref: Annotated[str, typer.Argument(help="Profile id or id prefix.")],
    request_ref: Annotated[str, typer.Argument(help="Request id or id prefix.")],
    code: Annotated[str, typer.Argument(help="Promo code used for the request.")],
) -> None:
    """Set the promo code used on a request."""
    repository = _open_repository()
    profile = _get_profile(repository, profile_ref)
    request_id = _resolve_request_id(profile, request_ref)
    updated = set_request_promo_code(profile, request_id, code)
    _apply_request_update(repository, profile, request_id, updated)


@app.command(name="set-details")
def set_details(
    profile_ref: Annotated[str, typer.Argument(help="Profile id or id prefix.")],
    request_ref: Annotated[str, typer.Argument(help="Request id or id prefix.")],
    details: Annotated[str, typer.Argument(help="What was ordered.")],
) -> None:
    """Set the details of a request."""
    repository = _open_repository()
    profile = _get_profile(repository, profile_ref)
    request_id = _resolve_request_id(profile, request_ref)
    updated = set_request_details(profile, request_id, details)
    _apply_request_update(repository, profile, request_id, updated)


@app.command()
def export(
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path. Defaults to prospect_export_{date}.csv in the export dir.",
        ),
    ] = None,
) -> None:
    """Export all prospects to CSV.

    Requests, experience and education are embedded as JSON so they
    can be read back without loss.
    """
    settings = get_settings()
    repository = _open_repository()
    profiles = repository.profiles

    output_path = output if output is not None else settings.export_dir / default_export_filename()
    result_path = CSVExporter().export(profiles, output_path)

    if not profiles:
        console.print("[yellow]No records to export.[/yellow]")
    else:
        console.print(f"[green]Exported {len(profiles)} record(s) to:[/green]")
    console.print(f"  [cyan]{result_path}[/cyan]")


@app.command()
def status() -> None:
    """Show statistics about stored prospects and requests."""
    repository = _open_repository()
    console.print(render_collection_stats(get_collection_stats(repository.profiles)))


@app.command()
def login() -> None:
    """Store the Gemini API key in the OS keyring."""
    manager = ApiKeyManager()
    api_key = Prompt.ask("[bold]Paste your Gemini API key[/bold]", password=True)

    if not manager.validate_key_format(api_key):
        console.print("[red]Error: Invalid API key format.[/red]")
        console.print(
            f"[dim]The key should be at least {manager.MIN_KEY_LENGTH} characters "
            "with no spaces.[/dim]"
        )
        raise typer.Exit(code=1)

    manager.store_api_key(api_key)
    console.print("[green]Success! API key stored in the OS keyring.[/green]")


@app.command()
def logout() -> None:
    """Remove the Gemini API key from the OS keyring."""
    if ApiKeyManager().delete_api_key():
        console.print("[green]API key removed from the OS keyring.[/green]")
    else:
        console.print("[yellow]No API key was stored.[/yellow]")


if __name__ == "__main__":
    app()
