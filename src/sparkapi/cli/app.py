"""Typer application for read-only inspection of a Spark account."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import typer
from pydantic import BaseModel
from requests.exceptions import RequestException

from sparkapi.client import SparkClient
from sparkapi.config import DEFAULT_PAGE_SIZE, EnvironmentSettings, build_client_config
from sparkapi.core.exceptions import PartialResultError, SparkError, SparkValidationError
from sparkapi.core.logging import LogConfig, LogEvents, UnifiedLogger
from sparkapi.schemas import PeopleListParams, RoomListParams

__all__ = ["app", "create_app", "run"]


@dataclass(frozen=True, slots=True)
class CLIState:
    """Global options shared by every command."""

    settings: EnvironmentSettings
    token: str | None = None
    page_size: int | None = None


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state was not initialised")
    return state


def _open_client(state: CLIState) -> SparkClient:
    settings = state.settings
    token = state.token
    if not token and settings.token is not None:
        token = settings.token.get_secret_value()
    if not token:
        typer.echo("Error: no API token given; pass --token or set SPARK_TOKEN", err=True)
        raise typer.Exit(code=2)
    try:
        config = build_client_config(
            token=token,
            base_url=settings.base_url,
            page_size=state.page_size or settings.page_size or DEFAULT_PAGE_SIZE,
        )
    except SparkValidationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    return SparkClient(config=config)


def _dump(record: BaseModel) -> dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True, exclude_none=True)


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _echo_records(records: Iterable[BaseModel]) -> None:
    _echo_json([_dump(record) for record in records])


def _execute(
    ctx: typer.Context,
    command: str,
    action: Callable[[SparkClient], BaseModel | list[Any]],
) -> None:
    """Run ``action`` against a fresh client and print its result as JSON."""

    log = UnifiedLogger.get(__name__).bind(component="cli", command=command)
    with _open_client(_state(ctx)) as client:
        try:
            result = action(client)
        except PartialResultError as exc:
            _echo_records(exc.items)
            log.error(LogEvents.CLI_COMMAND_FAILED, error=str(exc), items=len(exc.items))
            typer.echo(f"Error: incomplete result: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        except (SparkError, RequestException) as exc:
            log.error(LogEvents.CLI_COMMAND_FAILED, error=str(exc))
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    if isinstance(result, BaseModel):
        _echo_json(_dump(result))
    else:
        _echo_records(result)


def create_app() -> typer.Typer:
    """Create the Typer application with all inspection commands registered."""

    app = typer.Typer(
        name="sparkapi",
        help="Inspect people, rooms, messages and webhooks through the Spark REST API.",
        add_completion=False,
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        token: str | None = typer.Option(
            None,
            "--token",
            "-t",
            help="API access token. Defaults to SPARK_TOKEN.",
        ),
        page_size: int | None = typer.Option(
            None,
            "--page-size",
            help="Items requested per page. Defaults to SPARK_PAGE_SIZE or 50.",
            min=1,
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level. Defaults to SPARK_LOG_LEVEL or WARNING.",
        ),
    ) -> None:
        """Global options applied before any command runs."""

        settings = EnvironmentSettings()
        level = (log_level or settings.log_level).upper()
        try:
            UnifiedLogger.configure(LogConfig(level=level))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        ctx.obj = CLIState(settings=settings, token=token, page_size=page_size)

    @app.command(name="whoami")
    def whoami(ctx: typer.Context) -> None:
        """Show the person the token belongs to."""

        _execute(ctx, "whoami", lambda client: client.get_myself())

    @app.command(name="people")
    def people(
        ctx: typer.Context,
        max_items: int = typer.Option(0, "--max", "-n", min=0, help="Maximum people to list (0 = all)."),
        email: str | None = typer.Option(None, "--email", help="Only the person with this address."),
        display_name: str | None = typer.Option(
            None, "--display-name", help="Only people whose name starts with this."
        ),
    ) -> None:
        """List people visible to the token."""

        params = PeopleListParams(email=email, display_name=display_name)
        _execute(ctx, "people", lambda client: client.list_people(max_items, params))

    @app.command(name="rooms")
    def rooms(
        ctx: typer.Context,
        max_items: int = typer.Option(0, "--max", "-n", min=0, help="Maximum rooms to list (0 = all)."),
        team_id: str | None = typer.Option(None, "--team-id", help="Only rooms of this team."),
        room_type: str | None = typer.Option(None, "--type", help="Only 'direct' or 'group' rooms."),
    ) -> None:
        """List rooms the token's owner belongs to."""

        params = RoomListParams(team_id=team_id, type=room_type)
        _execute(ctx, "rooms", lambda client: client.list_rooms(max_items, params))

    @app.command(name="messages")
    def messages(
        ctx: typer.Context,
        room_id: str = typer.Argument(..., help="Room to read messages from."),
        max_items: int = typer.Option(0, "--max", "-n", min=0, help="Maximum messages to list (0 = all)."),
    ) -> None:
        """List messages posted in a room."""

        _execute(ctx, "messages", lambda client: client.list_messages(max_items, room_id))

    @app.command(name="webhooks")
    def webhooks(
        ctx: typer.Context,
        max_items: int = typer.Option(0, "--max", "-n", min=0, help="Maximum webhooks to list (0 = all)."),
    ) -> None:
        """List registered webhooks."""

        _execute(ctx, "webhooks", lambda client: client.list_webhooks(max_items))

    return app


app = create_app()


def run() -> None:
    """Entry point for the ``sparkapi`` console script."""

    app()


if __name__ == "__main__":
    run()
