import json
import logging
from typing import Tuple

import click

from . import config
from .adapter import command_for_key, render
from .machine import apply
from .state import DEFAULT_STATE

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=config.LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
def main(log_level: str) -> None:
    """Browser calculator."""
    logging.basicConfig(level=log_level.upper(), format=config.LOG_FORMAT)


@main.command()
@click.option("--host", default=config.HOST, show_default=True, help="Host to bind to")
@click.option("--port", default=config.PORT, show_default=True, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=config.DEBUG, show_default=True, help="Flask debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Run the calculator web server."""
    from .webapp import run_server

    click.echo(f"Access at: http://{host}:{port}")
    run_server(host=host, port=port, debug=debug)


@main.command()
@click.argument("keys", nargs=-1, required=True)
@click.option("--as-json", is_flag=True, default=False, help="Print the displays as JSON")
def keys(keys: Tuple[str, ...], as_json: bool) -> None:
    """Replay KEYS (KeyboardEvent names such as 7, +, Enter, Escape) and print the displays."""
    state = DEFAULT_STATE
    for key in keys:
        command = command_for_key(key)
        if command is None:
            click.echo(f"Ignoring unbound key: {key}", err=True)
            continue
        state = apply(command, state)

    view = render(state)
    if as_json:
        click.echo(json.dumps(view.to_dict()))
    else:
        if view.secondary:
            click.echo(view.secondary)
        click.echo(view.screen)


if __name__ == "__main__":  # pragma: no cover
    main()
