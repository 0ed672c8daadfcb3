"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..playbook import BUILTIN_PLAYBOOKS, DEFAULT_PLAYBOOK
from .providers import resolve_dark, resolve_playbook, resolve_seed
from .replay import ReplayResult, replay_session

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="herochat",
    help="Scripted ChatAPC hero chat demo in the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LEVEL_STYLES = {
    "debug": "dim",
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
}


def _console_debug(level: str, component: str, message: str) -> None:
    """Route engine debug messages to the console."""
    style = LEVEL_STYLES.get(level, "white")
    console.print(Text.assemble((f"{level.upper():<7}", style), (f"[{component}] ", "bold"), message))


@app.command()
def run(
    playbook: str | None = typer.Option(
        None,
        "--playbook",
        "-p",
        help="Built-in playbook name or path to a YAML playbook"
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="Color theme: dark or light"
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed for suggestion sampling and autopilot picks"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    autopilot: bool | None = typer.Option(
        None,
        "--autopilot/--no-autopilot",
        help="Force the scripted auto-send demo on or off"
    ),
):
    """Launch the hero chat in the terminal."""
    selected = resolve_playbook(playbook, console)
    dark = resolve_dark(theme, console)
    resolved_seed = resolve_seed(seed, console)

    async def _run():
        from ..ui import run_textual_tui

        await run_textual_tui(
            playbook=selected,
            dark=dark,
            seed=resolved_seed,
            log_level=log_level,
            autopilot=autopilot,
        )

    asyncio.run(_run())


@app.command()
def replay(
    questions: list[str] = typer.Argument(
        None,
        help="Questions to ask, in order; visible suggestions are picked"
    ),
    playbook: str | None = typer.Option(
        None,
        "--playbook",
        "-p",
        help="Built-in playbook name or path to a YAML playbook"
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed for suggestion sampling"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print engine trace messages"
    ),
):
    """Play a conversation headlessly on a virtual clock and print it."""
    selected = resolve_playbook(playbook, console)
    resolved_seed = resolve_seed(seed, console)

    try:
        result = replay_session(
            selected,
            questions or [],
            seed=resolved_seed,
            debug_callback=_console_debug if verbose else None,
        )
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    _print_replay(result)


def _print_replay(result: ReplayResult) -> None:
    console.print(Panel(
        Text(result.welcome),
        title="[bold cyan]ChatAPC[/bold cyan]",
        subtitle=f"[dim]{result.playbook}[/dim]",
        border_style="cyan",
    ))
    _print_suggestions(result.starter_suggestions)

    for turn in result.turns:
        if not turn.accepted:
            console.print(f"[yellow]Ignored:[/yellow] {turn.question!r}")
            continue
        source = "suggestion" if turn.picked_suggestion else "typed"
        console.print(Panel(
            Text(turn.question),
            title="[bold green]You[/bold green]",
            subtitle=f"[dim]{source}[/dim]",
            border_style="green",
        ))
        console.print(Panel(
            Text(turn.reply or ""),
            title="[bold cyan]ChatAPC[/bold cyan]",
            subtitle=f"[dim]{turn.elapsed_ms / 1000:.1f}s[/dim]",
            border_style="cyan",
        ))
        _print_suggestions(turn.suggestions)

    console.print(f"[dim]Virtual time: {result.total_ms / 1000:.1f}s[/dim]")


def _print_suggestions(suggestions: list[str]) -> None:
    if not suggestions:
        return
    for index, suggestion in enumerate(suggestions, 1):
        console.print(f"  [cyan]{index}.[/cyan] ", Text(suggestion))
    console.print()


@app.command()
def playbooks():
    """List the built-in playbooks."""
    table = Table(title="Built-in playbooks")
    table.add_column("Name", style="bold cyan")
    table.add_column("Description")
    table.add_column("Rules", justify="right")
    table.add_column("Thinking", justify="right")
    table.add_column("Autopilot")

    for name, item in BUILTIN_PLAYBOOKS.items():
        label = f"{name} (default)" if name == DEFAULT_PLAYBOOK else name
        table.add_row(
            label,
            item.description,
            str(len(item.rules)),
            f"{item.timings.thinking_delay_ms / 1000:.1f}s",
            "on" if item.autopilot.enabled else "off",
        )

    console.print(table)


if __name__ == "__main__":
    app()
