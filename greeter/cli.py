from __future__ import annotations

import asyncio

import typer

from greeter.config import Settings, load_settings
from greeter.domain import Greeting
from greeter.greeter import Greeter
from greeter.logging_setup import setup_logging
from greeter.names import constant

app = typer.Typer(help="Greeter - say hello and goodbye")


def _build_greeter(settings: Settings, name: str | None) -> Greeter:
    if name is None:
        return Greeter(settings=settings)
    if not name.strip():
        raise typer.BadParameter("Name must not be empty.", param_hint="--name")
    return Greeter(name_source=constant(name), settings=settings)


def _emit(greeting: Greeting, as_json: bool) -> None:
    if as_json:
        typer.echo(greeting.model_dump_json(indent=2))
    else:
        typer.echo(greeting.message)


@app.callback()
def main(json_logs: bool = typer.Option(False, "--json-logs", help="Enable JSON logs")):
    settings = load_settings()
    setup_logging(json_logs=json_logs or settings.LOG_JSON, level=settings.LOG_LEVEL)


@app.command()
def name():
    """Print the name the greeter would use."""
    greeter = Greeter()
    typer.echo(greeter.resolve_name())


@app.command()
def hello(
    name: str | None = typer.Option(None, "--name", help="Greet this name instead of the default"),
    as_json: bool = typer.Option(False, "--json", help="Print the greeting as JSON"),
):
    greeter = _build_greeter(load_settings(), name)
    _emit(greeter.greet(), as_json)


@app.command()
def goodbye(
    name: str | None = typer.Option(None, "--name", help="Say goodbye to this name instead of the default"),
    as_json: bool = typer.Option(False, "--json", help="Print the farewell as JSON"),
):
    """Wait for the configured delay, then say goodbye."""
    greeter = _build_greeter(load_settings(), name)
    _emit(asyncio.run(greeter.farewell()), as_json)
