"""Configuration helpers for the CLI.

Centralizes how playbook, theme and seed are resolved from command
options and environment variables. Command options win over the
environment.
"""

import os

import typer
from rich.console import Console

from ..playbook import DEFAULT_PLAYBOOK, Playbook, get_playbook

# Default console for output
_console = Console()

THEMES = ("dark", "light")


def resolve_playbook(name_or_path: str | None = None, console: Console | None = None) -> Playbook:
    """Load the playbook to play.

    Args:
        name_or_path: Built-in name or YAML path; falls back to the environment
        console: Optional Rich console for output

    Returns:
        Playbook, with the cadence overridden when HEROCHAT_CADENCE_MS is set

    Raises:
        SystemExit: If the playbook cannot be loaded

    Environment variables:
        HEROCHAT_PLAYBOOK: Playbook name or YAML path (default: constraints)
        HEROCHAT_CADENCE_MS: Milliseconds per revealed character
    """
    con = console or _console
    source = name_or_path or os.getenv("HEROCHAT_PLAYBOOK", DEFAULT_PLAYBOOK)
    try:
        playbook = get_playbook(source)
    except (ValueError, FileNotFoundError) as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    cadence = os.getenv("HEROCHAT_CADENCE_MS")
    if cadence:
        try:
            playbook = playbook.with_timings(cadence_ms=float(cadence))
        except ValueError:
            con.print(f"[yellow]Warning: ignoring invalid HEROCHAT_CADENCE_MS={cadence!r}[/yellow]")
    return playbook


def resolve_dark(theme: str | None = None, console: Console | None = None) -> bool:
    """Resolve the theme flag.

    Environment variables:
        HEROCHAT_THEME: dark or light (default: dark)
    """
    con = console or _console
    value = (theme or os.getenv("HEROCHAT_THEME", "dark")).lower()
    if value not in THEMES:
        con.print(f"[red]Error: Unknown theme: {value}. Supported themes: {', '.join(THEMES)}[/red]")
        raise typer.Exit(code=1)
    return value == "dark"


def resolve_seed(seed: int | None = None, console: Console | None = None) -> int | None:
    """Resolve the random seed, None for an unseeded session.

    Environment variables:
        HEROCHAT_SEED: Integer seed for suggestion sampling and autopilot picks
    """
    if seed is not None:
        return seed
    value = os.getenv("HEROCHAT_SEED")
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        con = console or _console
        con.print(f"[yellow]Warning: ignoring invalid HEROCHAT_SEED={value!r}[/yellow]")
        return None
