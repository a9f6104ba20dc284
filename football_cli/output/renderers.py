"""
Report Renderers Module

USE: Prints the four terminal reports (upcoming, standings, scorers, fixtures)
WHAT IT PRINTS:
  - Upcoming: today's matches split into IN-PLAY and SCHEDULED sections
  - Standings: the league table with rank, form and goal difference emphasis
  - Scorers: top goalscorers with goals and assists
  - Fixtures: the competition's matches that have not kicked off yet

HOW IT WORKS:
  - Each report makes one gateway call
  - A FetchFailure result ends the report silently (the gateway already
    printed the error)
  - Rows are printed in provider order with fixed column widths from the
    formatter helpers

FITS IN PROJECT:
  - Driven by the CLI through render(CommandSelection)
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, List, Optional

import click

from ..commands import CommandSelection, ReportKind
from ..data.gateway import FetchFailure, FootballDataClient
from ..data.models import Match, ScorerRow, StandingsRow
from .formatter import (
    emphasize,
    emphasize_games_played,
    emphasize_goal_difference,
    emphasize_rank,
    format_fixture_date,
    format_kickoff_time,
    matchup,
    mean_games_played,
    pad_left,
    pad_right,
)

logger = logging.getLogger(__name__)

MATCHUP_WIDTH = 40
POSITION_WIDTH = 2
TEAM_WIDTH = 18
PLAYER_WIDTH = 22
SCORER_TEAM_WIDTH = 16

# (label, width) for each numeric standings column, in print order
STANDINGS_COLUMNS = [
    ('Pl', 2),
    ('W', 4),
    ('D', 2),
    ('L', 2),
    ('GF', 4),
    ('GA', 2),
    ('GD', 3),
    ('P', 4),
]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def partition_matches(matches: List[Match]):
    """
    Split matches into (in_play, scheduled).

    IN_PLAY/PAUSED go to in_play, SCHEDULED/TIMED to scheduled; every other
    status (FINISHED, POSTPONED, ...) is dropped.
    """
    in_play = [m for m in matches if m.is_in_play]
    scheduled = [m for m in matches if m.is_scheduled]
    return in_play, scheduled


def future_matches(matches: List[Match], now: datetime) -> List[Match]:
    """Matches kicking off strictly after now, in provider order."""
    return [m for m in matches if m.utc_date > now]


class ReportRenderer:
    """
    Renders reports fetched through a FootballDataClient.

    This class:
    - Fetches one endpoint per report
    - Short-circuits on gateway failures
    - Formats rows with the shared formatter helpers
    """

    def __init__(
        self,
        client: FootballDataClient,
        echo: Callable[..., Any] = click.echo,
        clock: Callable[[], datetime] = _utc_now,
        tz: Optional[tzinfo] = None,
    ):
        """
        Initialize renderer.

        Args:
            client: Data gateway
            echo: Output function (click.echo compatible)
            clock: Returns the current UTC instant, used by fixtures
            tz: Display time zone (system local zone if None)
        """
        self.client = client
        self.echo = echo
        self.clock = clock
        self.tz = tz

    def render(self, selection: CommandSelection) -> None:
        if selection.team:
            logger.debug(f"Team filter '{selection.team}' is not applied to reports")

        if selection.report is ReportKind.UPCOMING:
            self.upcoming()
        elif selection.report is ReportKind.STANDINGS:
            self.standings(selection.competition)
        elif selection.report is ReportKind.SCORERS:
            self.scorers(selection.competition)
        elif selection.report is ReportKind.FIXTURES:
            self.fixtures(selection.competition)

    def _match_line(self, match: Match, separator: str, style: str) -> str:
        time_str = emphasize(format_kickoff_time(match.utc_date, self.tz), 'muted')
        teams = matchup(
            match.home_team.display_name,
            match.away_team.display_name,
            separator,
            MATCHUP_WIDTH,
            style,
        )
        return f"{time_str} {teams} {emphasize(match.competition.name, 'muted')}"

    def upcoming(self) -> None:
        result = self.client.get_matches()
        if isinstance(result, FetchFailure):
            return

        in_play, scheduled = partition_matches(result.data)

        if in_play:
            self.echo(emphasize("IN-PLAY:", 'heading'))
            for match in in_play:
                # Live scores are not part of the payload we read
                self.echo(self._match_line(match, " 0 - 0 ", 'highlight'))

        if in_play and scheduled:
            self.echo()

        if scheduled:
            self.echo(emphasize("SCHEDULED:", 'heading'))
            for match in scheduled:
                self.echo(self._match_line(match, " vs ", 'muted'))

        if not in_play and not scheduled:
            self.echo(emphasize("No matches today.", 'muted'))

    def standings(self, competition: str) -> None:
        result = self.client.get_standings(competition)
        if isinstance(result, FetchFailure):
            return

        rows: List[StandingsRow] = result.data
        mean_played = mean_games_played(row.played_games for row in rows)

        self.echo(emphasize(f"{competition.upper()} STANDINGS:", 'heading'))

        # The first label also spans the position and team columns
        label, width = STANDINGS_COLUMNS[0]
        header = [pad_left(label, POSITION_WIDTH + 1 + TEAM_WIDTH + 1 + width)]
        header += [pad_left(label, width) for label, width in STANDINGS_COLUMNS[1:]]
        self.echo(" ".join(header))

        for row in rows:
            self.echo(" ".join([
                emphasize(pad_right(row.position, POSITION_WIDTH), 'muted'),
                emphasize_rank(row.team.display_name, row.position, TEAM_WIDTH),
                emphasize_games_played(row.played_games, mean_played, 2),
                pad_left(row.won, 4),
                pad_left(row.draw, 2),
                pad_left(row.lost, 2),
                pad_left(row.goals_for, 4),
                pad_left(row.goals_against, 2),
                emphasize_goal_difference(row.goal_difference, 3),
                emphasize(pad_left(row.points, 4), 'highlight'),
            ]))

    def scorers(self, competition: str) -> None:
        result = self.client.get_scorers(competition)
        if isinstance(result, FetchFailure):
            return

        rows: List[ScorerRow] = result.data

        self.echo(emphasize(f"{competition.upper()} TOP GOALSCORERS:", 'heading'))
        self.echo(" ".join([
            pad_left("G", PLAYER_WIDTH + 1 + SCORER_TEAM_WIDTH + 1 + 2),
            pad_left("A", 2),
        ]))

        for row in rows:
            assists = row.assists if row.assists is not None else "-"
            self.echo(" ".join([
                pad_right(row.player.name, PLAYER_WIDTH),
                emphasize(pad_right(row.team.display_name, SCORER_TEAM_WIDTH), 'muted'),
                emphasize(pad_left(row.goals, 2), 'goals'),
                emphasize(pad_left(assists, 2), 'assists'),
            ]))

    def fixtures(self, competition: str) -> None:
        result = self.client.get_competition_matches(competition)
        if isinstance(result, FetchFailure):
            return

        self.echo(emphasize(f"{competition.upper()} FIXTURES:", 'heading'))

        for match in future_matches(result.data, self.clock()):
            date_str = emphasize(format_fixture_date(match.utc_date, self.tz), 'muted')
            self.echo(
                f"{date_str}  {match.home_team.display_name} "
                f"{emphasize('vs', 'muted')} {match.away_team.display_name}"
            )
