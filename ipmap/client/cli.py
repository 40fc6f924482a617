import asyncio
import logging
from typing import List, Optional

import typer

from common.logging import configure_logging
from ipmap.client.auth_client import AuthClient
from ipmap.client.errors import ClientError
from ipmap.client.geo_client import GeoLookupClient
from ipmap.client.session import ClientSession
from ipmap.client.storage import JsonFileStorage
from ipmap.config import Settings
from ipmap.schemas.geo import GeoLocation

logger = logging.getLogger(__name__)

app = typer.Typer(help="IP Map Navigator: look up where an IP address is", no_args_is_help=True)


def build_session(settings: Settings, state_path: Optional[str] = None) -> ClientSession:
    """Create and hydrate the client session for ``settings``."""
    storage = JsonFileStorage(state_path or settings.CLIENT_STATE_PATH)
    session = ClientSession(
        storage=storage,
        auth_client=AuthClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT_SECONDS),
        geo_client=GeoLookupClient(settings.GEO_PROVIDER_URL, timeout=settings.GEO_TIMEOUT_SECONDS),
        notice_seconds=settings.NOTICE_DISMISS_SECONDS,
    )
    return session.hydrate()


def _session(ctx: typer.Context) -> ClientSession:
    return ctx.obj["session"]


def _fail(session: ClientSession, error: ClientError) -> None:
    typer.secho(session.notices.current or error.notice, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _authenticated(ctx: typer.Context) -> ClientSession:
    session = _session(ctx)
    if not session.is_authenticated:
        typer.secho("Not logged in. Run 'ipmap login' first.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return session


def _echo_location(location: GeoLocation) -> None:
    typer.echo(location.describe())
    lat, lng = location.lat_lng
    typer.echo(f"Map center: {lat}, {lng}")


@app.callback()
def main(
    ctx: typer.Context,
    state_file: Optional[str] = typer.Option(None, "--state-file", help="Client state JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    settings = Settings()
    configure_logging("DEBUG" if verbose else "WARNING")
    ctx.obj = {"session": build_session(settings, state_file)}


@app.command()
def login(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", "-e", prompt=True),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
):
    """Log in and store the session."""
    session = _session(ctx)
    try:
        response = asyncio.run(session.login(email, password))
    except ClientError as e:
        _fail(session, e)
    typer.echo(f"Logged in as {response.user.name} <{response.user.email}>")


@app.command()
def logout(ctx: typer.Context):
    """Forget the stored session. History is kept."""
    _session(ctx).end_session()
    typer.echo("Logged out.")


@app.command()
def whoami(ctx: typer.Context):
    """Show the logged-in account."""
    user = _authenticated(ctx).user
    typer.echo(f"Name:  {user.name}")
    typer.echo(f"Email: {user.email}")


@app.command()
def where(ctx: typer.Context):
    """Show the location of this machine's public address."""
    session = _authenticated(ctx)
    try:
        location = asyncio.run(session.lookup.load_current_location())
    except ClientError as e:
        _fail(session, e)
    _echo_location(location)


@app.command()
def lookup(ctx: typer.Context, ip: str = typer.Argument(..., help="IPv4 address, e.g. 8.8.8.8")):
    """Look up an address and add it to history."""
    session = _authenticated(ctx)
    try:
        location = asyncio.run(session.lookup.search(ip))
    except ClientError as e:
        _fail(session, e)
    _echo_location(location)


@app.command()
def show(ctx: typer.Context, ip: str = typer.Argument(..., help="An address from history")):
    """Look up a history entry again without changing history."""
    session = _authenticated(ctx)
    try:
        location = asyncio.run(session.lookup.show_history_entry(ip))
    except ClientError as e:
        _fail(session, e)
    _echo_location(location)


@app.command()
def history(ctx: typer.Context):
    """List past lookups, oldest first."""
    entries = _authenticated(ctx).history.list()
    if not entries:
        typer.echo("No history yet.")
        return
    for index, ip in enumerate(entries, start=1):
        typer.echo(f"{index:>3}. {ip}")


@app.command()
def delete(
    ctx: typer.Context,
    ips: List[str] = typer.Argument(..., help="History entries to delete"),
):
    """Delete the given entries from history."""
    session = _authenticated(ctx)
    session.selection.enter_delete_mode()
    for ip in dict.fromkeys(ips):
        if not session.selection.toggle(ip):
            typer.secho(f"Not in history: {ip}", fg=typer.colors.YELLOW, err=True)

    count = len(session.selection)
    if count == 0:
        session.selection.exit_delete_mode()
        typer.echo("Nothing to delete.")
        return

    remaining = session.delete_selected()
    typer.echo(f"Deleted {count} entr{'y' if count == 1 else 'ies'}; {len(remaining)} left.")


if __name__ == "__main__":
    app()
