import logging

import click

from . import commands


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log queue and undo operations.")
def cli(verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


cli.add_command(commands.init)
cli.add_command(commands.show)
cli.add_command(commands.pop)
cli.add_command(commands.demo)

if __name__ == "__main__":
    cli()
