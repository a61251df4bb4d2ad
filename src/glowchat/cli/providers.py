"""Provider factory functions for CLI.

Centralizes creation of settings and the completion client from
environment variables. Hides configuration details from command
implementations.
"""

from rich.console import Console

from ..completion import WorkerCompletionClient
from ..settings import ClientSettings, ConfigurationError
from ..ui.formatting import escape_markup

# Default console for output
_console = Console()


def get_settings(
    console: Console | None = None,
    worker_url: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
) -> ClientSettings:
    """Load settings from the environment, with CLI overrides.

    Args:
        console: Optional Rich console for output
        worker_url: Overrides GLOWCHAT_WORKER_URL
        timeout: Overrides GLOWCHAT_TIMEOUT
        log_level: Overrides GLOWCHAT_LOG_LEVEL

    Returns:
        Validated settings

    Raises:
        SystemExit: If settings are missing or invalid
    """
    import typer

    con = console or _console
    try:
        return ClientSettings.from_env(
            worker_url=worker_url,
            timeout=timeout,
            log_level=log_level,
        )
    except ConfigurationError as e:
        con.print(f"[red]Error: {escape_markup(str(e))}[/red]")
        raise typer.Exit(code=1)


def get_client(settings: ClientSettings) -> WorkerCompletionClient:
    """Create the completion client for the configured worker."""
    return WorkerCompletionClient(url=settings.worker_url, timeout=settings.timeout)
