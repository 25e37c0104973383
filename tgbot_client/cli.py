from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from . import app as app_module
from .config import Settings
from .errors import ErrorCategory, TgbotClientError

logger = logging.getLogger(__name__)

app = typer.Typer(help="Telegram Bot API update utility")


@app.command()
def replay(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="File of updates"),
    max_concurrency: int | None = typer.Option(None, help="Updates processed at once"),
    fail_fast: bool = typer.Option(False, help="Stop at the first failing handler"),
    verbose: bool = typer.Option(False, help="Print effective settings"),
) -> None:
    """Replay recorded updates through a logging dispatcher."""
    overrides: dict[str, object] = {}
    if max_concurrency is not None:
        overrides["max_concurrent_updates"] = max_concurrency
    if fail_fast:
        overrides["handler_error_policy"] = "raise"
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        logger.error(
            "invalid_settings",
            extra={"event_type": "invalid_settings", "error_category": ErrorCategory.CONFIG.value},
        )
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    if verbose:
        typer.echo(settings.model_dump_json(indent=2, exclude={"bot_token"}))
    try:
        runner = asyncio.run(app_module.run(source, settings=settings))
    except TgbotClientError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"next offset: {runner.next_offset}")


@app.command()
def inspect(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="File of updates"),
) -> None:
    """Print the id and classified kind of every update in SOURCE."""
    from .handlers.dispatcher import classify, route
    from .transport.runner import parse_update
    from .transport.sources import load_updates

    try:
        updates = load_updates(source)
    except TgbotClientError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for data in updates:
        try:
            raw = parse_update(data)
        except TgbotClientError:
            typer.echo(f"{data.get('update_id', '?') if isinstance(data, dict) else '?'}\tinvalid")
            continue
        kind = classify(raw)
        if kind is None:
            typer.echo(f"{raw.update_id}\tempty")
        else:
            chain = ",".join(c.value for c in route(kind))
            typer.echo(f"{raw.update_id}\t{kind.value}\t{chain}")


@app.command("get-updates")
def get_updates(
    offset: int | None = typer.Option(None, help="First update id to request"),
) -> None:
    """Print the getUpdates request body built from the current settings."""
    request = Settings().get_updates(offset)
    typer.echo(json.dumps(request.to_wire(), indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
