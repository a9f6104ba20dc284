"""
Command Resolution Module

USE: Decides which report a run renders
HOW IT WORKS:
  - resolve_command scans the raw CLI tokens once: the last report keyword
    wins, competition flags consume the next token as an alias, team flags
    consume the next token, everything else is ignored
  - With no report keyword it returns None and the caller falls back to
    prompt_for_report, a numbered menu read from the terminal

FITS IN PROJECT:
  - Called by the CLI entry point; the resulting CommandSelection is handed
    to ReportRenderer.render
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

import click

from .data.competitions import COMPETITION_ALIASES, DEFAULT_COMPETITION, resolve_alias
from .errors import UnknownCompetitionError
from .output.formatter import clear_last_lines, emphasize

logger = logging.getLogger(__name__)

COMPETITION_FLAGS = frozenset({'--competition', '--comp', '-C'})
TEAM_FLAGS = frozenset({'--team', '-T'})

EXIT_CHOICE = '0'


class ReportKind(Enum):
    UPCOMING = 'upcoming'
    STANDINGS = 'standings'
    SCORERS = 'scorers'
    FIXTURES = 'fixtures'


REPORT_KEYWORDS = {kind.value: kind for kind in ReportKind}

MENU_CHOICES = {
    '1': ReportKind.STANDINGS,
    '2': ReportKind.FIXTURES,
    '3': ReportKind.UPCOMING,
    '4': ReportKind.SCORERS,
}


@dataclass(frozen=True)
class CommandSelection:
    report: ReportKind
    competition: str = DEFAULT_COMPETITION
    # Parsed and carried, not yet used to filter any report
    team: Optional[str] = None


def resolve_command(
    tokens: Sequence[str],
    default_competition: str = DEFAULT_COMPETITION,
) -> Optional[CommandSelection]:
    """
    Resolve CLI tokens into a CommandSelection.

    Args:
        tokens: Raw command-line tokens, in order
        default_competition: Competition used when no flag names one

    Returns:
        CommandSelection, or None when no report keyword was given

    Raises:
        UnknownCompetitionError: if a competition flag names an unknown alias
    """
    report = None
    competition = default_competition
    team = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        has_value = i + 1 < len(tokens)

        if token in REPORT_KEYWORDS:
            report = REPORT_KEYWORDS[token]
        elif token in COMPETITION_FLAGS and has_value:
            alias = tokens[i + 1]
            competition = resolve_alias(alias)
            if competition is None:
                raise UnknownCompetitionError(alias, COMPETITION_ALIASES)
            i += 1
        elif token in TEAM_FLAGS and has_value:
            team = tokens[i + 1]
            i += 1
        i += 1

    if report is None:
        logger.debug(f"No report keyword in {list(tokens)}")
        return None

    return CommandSelection(report=report, competition=competition, team=team)


def _menu_text() -> str:
    lines = [
        f"{emphasize('1', 'highlight')} Standings",
        f"{emphasize('2', 'highlight')} Fixtures",
        f"{emphasize('3', 'highlight')} Upcoming",
        f"{emphasize('4', 'highlight')} Scorers",
        f"{emphasize(EXIT_CHOICE, 'highlight')} Exit",
    ]
    return "\n".join(lines)


def prompt_for_report(
    max_attempts: int = 5,
    prompt: Callable[..., Any] = click.prompt,
    echo: Callable[..., Any] = click.echo,
) -> Optional[ReportKind]:
    """
    Ask the user which report to show.

    Invalid answers re-display the menu, up to max_attempts times.

    Returns:
        The chosen ReportKind, or None on exit or when attempts run out
    """
    for attempt in range(1, max_attempts + 1):
        echo(_menu_text())
        choice = str(prompt("", prompt_suffix="", default="", show_default=False)).strip()
        clear_last_lines(len(MENU_CHOICES) + 2)

        if choice == EXIT_CHOICE:
            return None
        if choice in MENU_CHOICES:
            return MENU_CHOICES[choice]

        logger.debug(f"Invalid menu choice {choice!r} (attempt {attempt}/{max_attempts})")

    logger.info("No report chosen, giving up")
    echo(emphasize("No report chosen.", 'muted'))
    return None
