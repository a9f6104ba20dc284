"""
football-cli Command Line Interface

USE: Entry point for the `football` command
HOW IT WORKS:
  - Loads settings, then resolves the free-form tokens
    (e.g. `football standings --comp bl`)
  - Loads or prompts for the API token
  - Falls back to the numbered menu when no report keyword was given
  - Renders exactly one report and exits

Examples:
    football upcoming
    football standings --comp bl
    football fixtures -C sa
    football --list-competitions
"""

import functools
import logging
from typing import Optional, Sequence

import click
from tabulate import tabulate

from . import __version__
from .commands import CommandSelection, prompt_for_report, resolve_command
from .data.competitions import COMPETITION_IDS, aliases_for
from .data.credentials import bootstrap_credential
from .data.gateway import FootballDataClient
from .errors import ConfigurationError, UnknownCompetitionError
from .output.renderers import ReportRenderer
from .settings import load_settings

logger = logging.getLogger(__name__)


def competitions_table() -> str:
    table_data = [
        [name, competition_id, ', '.join(aliases_for(name))]
        for name, competition_id in COMPETITION_IDS.items()
    ]
    headers = ['Competition', 'ID', 'Aliases']
    return tabulate(table_data, headers=headers, tablefmt='grid')


@click.command(context_settings={
    'ignore_unknown_options': True,
    'allow_extra_args': True,
    'help_option_names': ['-h', '--help'],
})
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False),
    default=None,
    help='YAML settings file (default: $FOOTBALL_CLI_CONFIG or config/football_cli.yaml)'
)
@click.option(
    '--verbose',
    is_flag=True,
    default=False,
    help='Log debug output to stderr'
)
@click.option(
    '--color/--no-color',
    default=None,
    help='Force or disable ANSI colors (default: only on a terminal)'
)
@click.option(
    '--list-competitions',
    is_flag=True,
    default=False,
    help='Show supported competitions and their aliases, then exit'
)
@click.version_option(version=__version__)
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
def main(config_path: Optional[str], verbose: bool, color: Optional[bool],
         list_competitions: bool, tokens: Sequence[str]):
    """
    Football scores, tables and scorers from football-data.org.

    \b
    Reports:      upcoming | standings | scorers | fixtures
    Competition:  --competition, --comp, -C <alias>   (default: Premier League)
    Team:         --team, -T <name>                   (accepted, not applied yet)

    With no report the interactive menu is shown.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    echo = functools.partial(click.echo, color=color)

    if list_competitions:
        echo(competitions_table())
        return

    try:
        settings = load_settings(config_path)
        selection = resolve_command(tokens, settings.default_competition)
    except UnknownCompetitionError as e:
        raise click.UsageError(str(e)) from e
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    credential = bootstrap_credential(settings, echo=echo)

    if selection is None:
        report = prompt_for_report(settings.menu_max_attempts, echo=echo)
        if report is None:
            return
        selection = CommandSelection(report=report, competition=settings.default_competition)

    logger.debug(f"Rendering {selection.report.value} for {selection.competition}")
    with FootballDataClient(settings, credential, echo=echo) as client:
        ReportRenderer(client, echo=echo).render(selection)


if __name__ == '__main__':
    main()
