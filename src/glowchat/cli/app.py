"""Main CLI application using Typer."""
import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..completion import start_probe, verify_endpoint
from ..log import LogLevel, configure_logging
from ..prompts import get_greeting
from ..session import SessionController
from ..ui.formatting import escape_markup
from .console_surface import ConsoleSurface
from .providers import get_client, get_settings

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="glowchat",
    help="L'Oréal beauty advisor chat client for a completion worker endpoint",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

logger = logging.getLogger(__name__)

EXIT_WORDS = ("exit", "quit", "q")

WorkerUrlOption = typer.Option(
    None,
    "--worker-url",
    "-u",
    help="Worker endpoint URL (default: $GLOWCHAT_WORKER_URL)"
)
TimeoutOption = typer.Option(
    None,
    "--timeout",
    "-t",
    help="Transport timeout in seconds (default: $GLOWCHAT_TIMEOUT or the httpx default)"
)
LogLevelOption = typer.Option(
    None,
    "--log-level",
    "-l",
    help=f"Log level: {', '.join(LogLevel.choices())} (default: $GLOWCHAT_LOG_LEVEL or warning)"
)


@app.command()
def chat(
    worker_url: str | None = WorkerUrlOption,
    timeout: float | None = TimeoutOption,
    log_level: str | None = LogLevelOption,
    probe: bool = typer.Option(
        True,
        "--probe/--no-probe",
        help="Check the worker in the background on startup"
    ),
):
    """Interactive chat in the terminal."""
    settings = get_settings(console, worker_url=worker_url, timeout=timeout, log_level=log_level)
    configure_logging(settings.log_level)

    async def _chat():
        client = get_client(settings)
        surface = ConsoleSurface(console)
        session = SessionController(client, surface)

        try:
            if probe:
                start_probe(client)

            console.print("[bold magenta]glowchat[/bold magenta]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")
            console.print(f"[bold magenta]Advisor:[/bold magenta] {escape_markup(get_greeting())}\n")

            while True:
                try:
                    user_input = await asyncio.to_thread(
                        console.input, "[bold cyan]You:[/bold cyan] "
                    )
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in EXIT_WORDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                try:
                    await session.submit(user_input)
                except Exception as e:
                    # The controller is back to idle; keep the session going.
                    logger.exception("Session cycle failed")
                    console.print(f"[red]Error: {escape_markup(str(e))}[/red]\n")

        except Exception as e:
            console.print(f"[red]Error: {escape_markup(str(e))}[/red]")
            import traceback
            console.print(f"[dim]{escape_markup(traceback.format_exc())}[/dim]")
            raise typer.Exit(code=1)
        finally:
            await client.close()

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        console.print("\n[dim]Goodbye![/dim]")


@app.command(name="tui")
def tui_command(
    worker_url: str | None = WorkerUrlOption,
    timeout: float | None = TimeoutOption,
    log_level: str | None = LogLevelOption,
    probe: bool = typer.Option(
        True,
        "--probe/--no-probe",
        help="Check the worker in the background on startup"
    ),
):
    """Launch the Textual chat interface."""
    settings = get_settings(console, worker_url=worker_url, timeout=timeout, log_level=log_level)
    configure_logging(settings.log_level, tui=True)

    async def _tui():
        from ..ui import run_textual_tui

        client = get_client(settings)
        try:
            await run_textual_tui(client, probe=probe)
        finally:
            await client.close()

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        console.print("\n[dim]Goodbye![/dim]")


@app.command()
def health(
    worker_url: str | None = WorkerUrlOption,
    timeout: float | None = TimeoutOption,
):
    """Check that the worker endpoint is reachable."""
    settings = get_settings(console, worker_url=worker_url, timeout=timeout, log_level="info")
    configure_logging(settings.log_level)

    async def _health() -> bool:
        async with get_client(settings) as client:
            return await verify_endpoint(client)

    if asyncio.run(_health()):
        console.print(f"[green]+[/green] Worker {escape_markup(settings.worker_url)}: OK")
    else:
        console.print(f"[red]x[/red] Worker {escape_markup(settings.worker_url)}: FAILED")
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
