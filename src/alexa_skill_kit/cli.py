"""CLI for inspecting Alexa request envelopes and building responses."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .codec import dump_response_json, parse_request_json
from .config import settings
from .errors import EnvelopeDecodeError
from .models.request import RequestEnvelope
from .models.response import ResponseEnvelope
from .services.skill_handler import handle_request

app = typer.Typer(help="Alexa skill envelope tools")
console = Console()


def _load_request(path: Path) -> RequestEnvelope:
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)

    try:
        return parse_request_json(path.read_bytes())
    except EnvelopeDecodeError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _known(value) -> str:
    """Render an enum value, marking values outside the known set."""
    if value is None:
        return "-"
    if value.is_known:
        return f"[green]{value.value}[/green]"
    return f"[yellow]{value.value}[/yellow] (unrecognized)"


@app.command()
def inspect(path: Path):
    """Decode a request envelope and show its contents."""
    envelope = _load_request(path)
    locale = envelope.locale()

    console.print(f"\n[bold]Request {envelope.request.request_id}[/bold]")
    console.print(f"  Version: {envelope.version}")
    console.print(f"  Type: {_known(envelope.request_type())}")
    console.print(f"  Locale: {locale} (language {_known(locale.language)}, region {_known(locale.region)})")
    console.print(f"  Intent: {_known(envelope.intent_type())}")
    console.print(f"  New session: {envelope.is_new()}")

    intent = envelope.request.intent
    if intent is not None and intent.slots:
        table = Table(title=f"Slots ({len(intent.slots)})")
        table.add_column("Name", style="cyan")
        table.add_column("Value")
        table.add_column("Resolved", style="green")

        for name, slot in intent.slots.items():
            table.add_row(name, slot.value or "-", ", ".join(slot.resolved_values()) or "-")

        console.print(table)

    if envelope.session is not None and envelope.session.attributes:
        table = Table(title="Session Attributes")
        table.add_column("Key", style="cyan")
        table.add_column("Value")

        for key, value in envelope.session.attributes.items():
            table.add_row(key, value)

        console.print(table)


@app.command()
def simple(title: str, text: str):
    """Print a simple response envelope (plain speech + simple card)."""
    console.print_json(dump_response_json(ResponseEnvelope.simple(title, text)))


@app.command()
def respond(path: Path):
    """Run the Hello World skill on a request envelope and print the response."""
    envelope = _load_request(path)
    console.print_json(dump_response_json(handle_request(envelope)))


@app.command()
def config():
    """Show current configuration."""
    console.print("\n[bold]Configuration[/bold]")
    console.print(f"  Service: {settings.service_name}")
    console.print(f"  Environment: {settings.environment}")
    console.print(f"  Skill name: {settings.skill_name}")
    console.print(f"  Debug: {settings.debug}")
