"""
Command Line Interface for Tasklist.
"""

import datetime as dt
import sys

import click

from .config import load_settings
from .logs import get_logger, setup_logging
from .recovery import TasklistError
from .render import AnsiCellStyle, PlainCellStyle
from .session import TasklistSession
from .store import TaskStore
from .version import VERSION

log = get_logger("cli")


@click.command()
@click.version_option(version=VERSION, prog_name="tasklist")
@click.option('-f', '--file', 'data_file', type=click.Path(dir_okay=False), default=None,
              help='Task list file (default: tasklist.json in the current directory)')
@click.option('--color/--plain', default=None,
              help='Paint priority and due cells with ANSI colors, or print their letter codes')
@click.option('--today', type=click.DateTime(formats=['%Y-%m-%d']), default=None,
              help='Reference date for due tags (default: current UTC date)')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False), default=None,
              help='Configuration file (YAML)')
def main(data_file, color, today, config_file):
    """
    Tasklist - an interactive task list.

    Reads actions (add, print, edit, delete, end) from standard input and
    saves the list when 'end' is entered.
    """
    try:
        settings = load_settings(config_file)
    except TasklistError as e:
        click.echo(f"❌ Error reading configuration: {e}", err=True)
        sys.exit(1)

    setup_logging(settings.log_level)

    if data_file is not None:
        settings.data_file = data_file
    if color is not None:
        settings.color = color
    reference_date = today.date() if today else dt.datetime.now(dt.timezone.utc).date()

    try:
        store = TaskStore.load(settings.data_file, reference_date)
    except TasklistError as e:
        log.critical(f"Cannot start: {e}")
        click.echo(f"❌ Error loading task list: {e}", err=True)
        sys.exit(1)

    style = AnsiCellStyle() if settings.color else PlainCellStyle()
    session = TasklistSession(store, style=style)

    try:
        status = session.run()
    except TasklistError as e:
        log.error(f"Task list not saved: {e}")
        click.echo(f"❌ Error saving task list: {e}", err=True)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
