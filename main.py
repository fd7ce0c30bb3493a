import subprocess
import sys
import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich.markup import escape

import typer

from checkdigit import ChecksumError, check, token_at_point, verify_with
from config import settings
from utils.ui_helpers import (
    set_output_mode,
    print_check_result,
    print_validation_result,
    print_error,
)
from utils.validators import ISBNValidator

logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
logger = logging.getLogger(__name__)

APP_NAME = "ISBN Check Digit CLI"

console = Console()

# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global CLI options (e.g. output mode)."""
    if output:
        set_output_mode(output)

@app.command("check")
def cli_check(
    text: str = typer.Argument(..., help="ISBN-like text, with or without separators"),
    strict: bool = typer.Option(settings.strict, "--strict/--no-strict", help="Reject a wrong trailing check digit"),
):
    """Print the ISBN-10 or ISBN-13 check digit for TEXT."""
    try:
        result = check(text, strict=strict)
    except ChecksumError as e:
        logger.info(f"check failed for {text!r}: {e}")
        print_error(str(e))
        raise typer.Exit(code=1)
    print_check_result(result)

@app.command("at-point")
def cli_at_point(
    text: str = typer.Argument(..., help="Text containing an ISBN"),
    position: int = typer.Option(..., "--position", "-p", help="Cursor position (0-based character index)"),
    strict: bool = typer.Option(settings.strict, "--strict/--no-strict", help="Reject a wrong trailing check digit"),
):
    """Print the check digit of the ISBN under the cursor position."""
    token = token_at_point(text, position)
    if not token:
        print_error(f"No ISBN at position {position}.")
        raise typer.Exit(code=1)
    try:
        result = check(token, strict=strict)
    except ChecksumError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_check_result(result, token=token)

@app.command("validate")
def cli_validate(isbn: str = typer.Argument(..., help="Complete ISBN-10 or ISBN-13")):
    """Check that a complete ISBN carries the right check digit."""
    try:
        result = ISBNValidator.validate(isbn)
    except ChecksumError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_validation_result(result)
    if not result.valid:
        raise typer.Exit(code=1)

@app.command("serve")
def cli_serve():
    """Start the HTTP API with uvicorn."""
    host = settings.api_host
    port = int(settings.api_port)
    print(f"Starting API on http://{host}:{port}/")
    args = [
        sys.executable,
        "-m", "uvicorn",
        "api:app",
        "--host", host,
        "--port", str(port),
    ]
    if settings.debug:
        args.append("--reload")
    subprocess.run(args)

# --- Interactive mode ---
def render_menu():
    console.print(Panel.fit(
        "[bold]1[/] Check digit for an ISBN\n"
        "[bold]2[/] Check digit at a cursor position\n"
        "[bold]3[/] Validate a complete ISBN\n"
        "[bold]0[/] Quit",
        title=f"🔢 {APP_NAME}",
        border_style="blue",
    ))

def show_result(message: str) -> None:
    """Display callback for verify_with; failures arrive as 'Error: ...'."""
    if message.startswith("Error:"):
        console.print(f"[red]{escape(message)}[/]")
    else:
        console.print(f"Check digit: [bold green]{escape(message)}[/]")

def interactive_check():
    text = Prompt.ask("ISBN")
    try:
        verify_with(lambda: text, show_result)
    except ChecksumError as e:
        logger.info(f"Interactive check failed for {text!r}: {e}")

def interactive_at_point():
    text = Prompt.ask("Text")
    position = IntPrompt.ask("Cursor position", default=len(text))
    token = token_at_point(text, position)
    if not token:
        console.print(f"[yellow]No ISBN at position {position}.[/]")
        return
    console.print(f"[dim]Token: {escape(token)}[/]")
    try:
        verify_with(lambda: token, show_result)
    except ChecksumError as e:
        logger.info(f"Interactive check failed for {token!r}: {e}")

def interactive_validate():
    isbn = Prompt.ask("ISBN")
    try:
        result = ISBNValidator.validate(isbn)
    except ChecksumError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        return
    if result.valid:
        console.print(f"[green]✅ {result.isbn} is a valid {result.kind}[/]")
    else:
        console.print(f"[red]❌ {result.isbn}: expected check digit {result.expected}, got {result.actual}[/]")

def run_menu():
    while True:
        render_menu()
        choice = Prompt.ask("Choose an option", choices=["1", "2", "3", "0"], default="1").strip()

        if choice == "1":
            interactive_check()
        elif choice == "2":
            interactive_at_point()
        elif choice == "3":
            interactive_validate()
        elif choice == "0":
            console.print("[green]Goodbye![/]")
            break
        print()

if __name__ == "__main__":
    if len(sys.argv) > 1:
        app()
    else:
        run_menu()
