import os
import json
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from checkdigit.dispatcher import CheckResult
from config import settings
from utils.validators import ValidationResult

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "ISBN_CHECK_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_check_result(result: CheckResult, token: Optional[str] = None) -> None:
    """Print a check digit in the current output mode.
    - plain: the check digit alone
    - json: kind, digits, check_digit (and token when extracted from text)
    - rich: Panel
    """
    mode = get_output_mode()

    if mode == "json":
        payload = result.to_dict()
        if token is not None:
            payload["token"] = token
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        lines = [f"[bold]Digits:[/] {result.digits}", f"[bold]Check digit:[/] [green]{result.display}[/]"]
        if token is not None:
            lines.insert(0, f"[bold]Token:[/] {token}")
        _console.print(Panel.fit("\n".join(lines), title=f"🔢 {result.kind}", border_style="blue"))
    else:
        print(result.display)

def print_validation_result(result: ValidationResult) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📘 {result.kind}", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Expected", style="white")
        table.add_column("Actual", style="white")
        table.add_column("Valid")
        table.add_row(result.isbn, result.expected, result.actual, "[green]yes[/]" if result.valid else "[red]no[/]")
        _console.print(table)
    elif result.valid:
        print("valid")
    else:
        print(f"invalid (expected {result.expected}, got {result.actual})")

def print_error(message: str) -> None:
    if get_output_mode() == "json":
        print(json.dumps({"error": message}, ensure_ascii=False))
    else:
        print(f"Error: {message}")
