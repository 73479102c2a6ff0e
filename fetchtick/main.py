from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Optional, TypeVar

import typer

from fetchtick.client.fetch import fetch_json, fetch_model
from fetchtick.config import get_settings
from fetchtick.domain.models import Todo, TodoPayload
from fetchtick.errors import ConfigError, FetchError
from fetchtick.reporter import print_todo
from fetchtick.ticker.timer import run_timer
from fetchtick.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Typed JSON fetch and periodic timer CLI.")

log = get_logger(__name__)

T = TypeVar("T")

EXIT_INTERRUPTED = 130


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _run(awaitable: Awaitable[T]) -> T:
    """
    Run a coroutine to completion, turning Ctrl-C into exit code 130.

    Typer handles KeyboardInterrupt itself once it escapes a command, with
    behaviour that differs between versions, so it is mapped here.
    """
    try:
        return asyncio.run(awaitable)  # type: ignore[arg-type]
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=EXIT_INTERRUPTED)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | url={settings.todo_url} | "
        f"interval_ms={settings.tick_interval_ms} duration_ms={settings.tick_duration_ms} | "
        f"log_level={settings.log_level} json={settings.log_json}"
    )


@app.command()
def fetch(
    url: Optional[str] = typer.Argument(
        None,
        help="URL of a todo item (default from TODO_URL).",
    ),
    validate: bool = typer.Option(
        True,
        "--validate/--no-validate",
        help="Validate the body against the Todo model, or trust the server as-is.",
    ),
) -> None:
    """
    Fetch one todo item and print it.
    """
    _setup_logging()
    target = url or get_settings().todo_url
    log.info("Attempting to fetch todo data...", extra={"url": target})

    item: Any
    try:
        if validate:
            item = _run(fetch_model(target, Todo))
        else:
            item = _run(fetch_json(target, TodoPayload))
    except FetchError as exc:
        log.error("Failed to retrieve todo item: %s", exc, extra={"url": target})
        raise typer.Exit(code=1)

    log.info("Fetched Todo: %s", item)
    if isinstance(item, Todo):
        log.info("Todo Title: %s", item.title)
        log.info("Is it completed? %s", item.completed)
    elif isinstance(item, dict):
        log.info("Todo Title: %s", item.get("title"))
        log.info("Is it completed? %s", item.get("completed"))
    print_todo(item, validated=validate)


@app.command()
def timer(
    interval_ms: Optional[int] = typer.Option(
        None,
        "--interval-ms",
        "-i",
        help="Milliseconds between ticks (default from TICK_INTERVAL_MS).",
    ),
    duration_ms: Optional[int] = typer.Option(
        None,
        "--duration-ms",
        "-d",
        help="Milliseconds to run before cancelling (default from TICK_DURATION_MS).",
    ),
) -> None:
    """
    Run the periodic timer, printing one line per tick, then cancel it.
    """
    _setup_logging()
    settings = get_settings()
    interval = settings.tick_interval_ms if interval_ms is None else interval_ms
    duration = settings.tick_duration_ms if duration_ms is None else duration_ms

    try:
        ticks = _run(run_timer(interval, duration))
    except ConfigError as exc:
        typer.echo(f"Invalid timer configuration: {exc}", err=True)
        raise typer.Exit(code=2)
    log.debug("Timer run finished", extra={"ticks": ticks})


def main() -> None:
    app()


if __name__ == "__main__":
    main()
