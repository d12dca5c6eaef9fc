"""certctl CLI entry point."""

import click

from certctl import __version__
from certctl.commands import inspect, setup
from certctl.lib.logging_config import set_verbosity


@click.group()
@click.version_option(version=__version__, prog_name="certctl")
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v, -vv).")
def cli(verbose: int) -> None:
    """certctl - Vault PKI backends and bootstrap tokens for clusters."""
    set_verbosity(verbose)


cli.add_command(setup)
cli.add_command(inspect)


if __name__ == "__main__":
    cli()
