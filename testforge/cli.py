"""
Command-Line Interface for testforge

Usage:
    python main.py run
    python main.py run --e2e -- -k google
    python main.py probe / --base-url https://www.google.com/
    python main.py install-browsers --browser chromium
    python main.py settings
"""

import subprocess
import sys
from typing import List, Optional

import pytest
import typer
from rich.console import Console
from rich.table import Table

from .config import get_settings, configure_logging
from .exceptions import TestForgeError
from .http_probe import HttpProbe

app = typer.Typer(
    name="testforge",
    help="Browser and API end-to-end test automation",
    add_completion=False
)
console = Console()


@app.command()
def run(
    pytest_args: Optional[List[str]] = typer.Argument(None, help="Extra arguments passed to pytest"),
    e2e: bool = typer.Option(False, "--e2e", help="Also run the live end-to-end tests"),
):
    """Run the test suite"""
    args = list(pytest_args or [])
    if e2e:
        # An empty marker expression clears the default "not e2e" filter
        args = ["-m", ""] + args

    console.print(f"[bold]pytest {' '.join(args)}[/bold]")
    raise typer.Exit(code=int(pytest.main(args)))


@app.command()
def probe(
    path: str = typer.Argument("/", help="Path appended to the base URL"),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="Base URL (defaults to settings)"),
):
    """Send one GET request and check for a 200 response"""
    configure_logging()

    try:
        with HttpProbe(base_url) as http_probe:
            response = http_probe.fetch(path)
    except TestForgeError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ {response.status_code}[/green] {response.url} ({len(response.content)} bytes)")


@app.command("install-browsers")
def install_browsers(
    browser: Optional[str] = typer.Option(None, "--browser", "-b", help="chromium/firefox/webkit (defaults to settings)"),
):
    """Install the Playwright browser used by the test suite"""
    name = browser or get_settings().browser
    console.print(f"Installing Playwright browser: {name}")
    try:
        subprocess.run([sys.executable, "-m", "playwright", "install", name], check=True)
    except subprocess.CalledProcessError as e:
        console.print(f"[red]✗ Playwright install failed (exit {e.returncode})[/red]")
        console.print(f"    Run manually: playwright install {name}")
        raise typer.Exit(code=e.returncode)
    console.print("[green]✓ Playwright browser installed[/green]")


@app.command()
def settings():
    """Show the effective settings"""
    current = get_settings()

    table = Table(title="testforge settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for name, value in current.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


if __name__ == "__main__":
    app()
