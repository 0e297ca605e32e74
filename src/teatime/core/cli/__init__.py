"""Teatime CLI — entry point that starts the interactive journal."""

import asyncio

import click

from teatime import __version__
from teatime.core.exceptions import TeatimeError


@click.command()
@click.version_option(version=__version__, package_name="teatime")
def main() -> None:
    """teatime — a terminal journal of daily notes and the summaries built from them."""
    from .common import configure_logging, create_app, load_config

    try:
        config = load_config()
        configure_logging(config)
        app = create_app(config)
    except TeatimeError as e:
        raise click.ClickException(str(e)) from e

    asyncio.run(app.start())
