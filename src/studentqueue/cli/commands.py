from pathlib import Path

import click

from studentqueue import utils
from studentqueue.demo import run_demo
from studentqueue.strategies import STRATEGIES, get_strategy
from studentqueue.utils import ROSTER, _get_roster, format_priority_order, format_with_score

strategy_option = click.option(
    "--strategy",
    type=click.Choice(list(STRATEGIES)),
    default=None,
    help="Ordering to use instead of the one configured in the roster.",
)


def _load_queue(path, strategy):
    roster = _get_roster(Path(path))
    return roster.build_queue(get_strategy(strategy) if strategy else None)


@click.command()
@click.argument(
    "path",
    type=click.Path(exists=False, file_okay=False, dir_okay=True),
)
def init(path):
    """Initialize a directory with an example roster file."""
    path = Path(path)
    path.mkdir(exist_ok=True)

    roster = path / ROSTER

    if roster.exists():
        raise FileExistsError(
            f"File '{roster}' already exist. Please remove it or choose another directory."
        )

    roster.write_text(utils.get_example_roster())

    click.echo(f"Created '{roster.name}' at {path}.")


@click.command()
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, readable=True),
)
@strategy_option
def show(path, strategy):
    """Print the roster in priority order without removing anyone."""
    queue = _load_queue(path, strategy)
    click.echo(f"Top: {queue.peek()}")
    click.echo(format_priority_order(queue))


@click.command()
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, readable=True),
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Number of students to pop. Pops everyone by default.",
)
@strategy_option
def pop(path, count, strategy):
    """Pop students off the queue, highest priority first, with their scores."""
    queue = _load_queue(path, strategy)
    if count is None:
        count = queue.size()
    for _ in range(count):
        student = queue.extract_max()
        if student is None:
            break
        click.echo(format_with_score(student))


@click.command()
def demo():
    """Walk through every feature of the queue."""
    run_demo()
