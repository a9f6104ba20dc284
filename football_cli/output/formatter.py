"""
Terminal Formatter Module

USE: Alignment and emphasis helpers for the terminal reports
HOW IT WORKS:
  - pad_right/pad_left justify any value to a fixed width, never truncating
  - emphasize_* pick a style from the value (table position, goal
    difference sign, games played against the table mean) and wrap the
    padded text in click ANSI styling
  - Time/date helpers render UTC instants in local time with fixed patterns

FITS IN PROJECT:
  - Used by every view renderer
  - Styles are plain ANSI; click.echo strips them when the output is not a
    terminal, leaving the padded text
"""

import math
import sys
from datetime import datetime, tzinfo
from typing import Any, Dict, Iterable, Optional

import click

LEADER_POSITION = 1
QUALIFICATION_POSITIONS = range(2, 5)
RELEGATION_START = 18

KICKOFF_TIME_FORMAT = "%H:%M"
FIXTURE_DATE_FORMAT = "%d/%m %H:%M"

STYLES: Dict[str, Dict[str, Any]] = {
    'leader': {'fg': 'bright_green', 'bold': True},
    'qualification': {'fg': 'bright_blue'},
    'relegation': {'fg': 'bright_red'},
    'positive': {'fg': 'bright_green'},
    'negative': {'fg': 'bright_red'},
    'ahead': {'fg': 'bright_cyan'},
    'behind': {'fg': 'bright_magenta'},
    'heading': {'fg': 'bright_blue'},
    'muted': {'fg': 'bright_black'},
    'highlight': {'fg': 'bright_yellow'},
    'goals': {'fg': 'bright_green'},
    'assists': {'fg': 'bright_blue'},
}


def pad_right(value: Any, width: int) -> str:
    """Left-justify str(value) to width; longer values are returned whole."""
    return str(value).ljust(width)


def pad_left(value: Any, width: int) -> str:
    """Right-justify str(value) to width; longer values are returned whole."""
    return str(value).rjust(width)


def emphasize(text: str, style: Optional[str]) -> str:
    """Wrap text in the named style, or return it unchanged for None."""
    if style is None:
        return text
    return click.style(text, **STYLES[style])


def rank_tier(position: int) -> Optional[str]:
    if position == LEADER_POSITION:
        return 'leader'
    if position in QUALIFICATION_POSITIONS:
        return 'qualification'
    if position >= RELEGATION_START:
        return 'relegation'
    return None


def goal_difference_tier(value: int) -> Optional[str]:
    if value > 0:
        return 'positive'
    if value < 0:
        return 'negative'
    return None


def games_played_tier(played: int, mean_played: float) -> Optional[str]:
    """
    Compare a team's games played with the table mean.

    The mean is only rounded here: more than ceil(mean) is 'ahead', fewer
    than floor(mean) is 'behind'.
    """
    if played > math.ceil(mean_played):
        return 'ahead'
    if played < math.floor(mean_played):
        return 'behind'
    return None


def mean_games_played(played: Iterable[int]) -> float:
    """Arithmetic mean of games played; 0.0 for an empty table."""
    values = list(played)
    if not values:
        return 0.0
    return sum(values) / len(values)


def emphasize_rank(team_name: str, position: int, width: int) -> str:
    return emphasize(pad_right(team_name, width), rank_tier(position))


def emphasize_goal_difference(value: int, width: int) -> str:
    return emphasize(pad_left(value, width), goal_difference_tier(value))


def emphasize_games_played(played: int, mean_played: float, width: int) -> str:
    return emphasize(pad_left(played, width), games_played_tier(played, mean_played))


def matchup(home: str, away: str, separator: str, width: int, style: Optional[str] = None) -> str:
    """
    Join two team names around a separator and pad the line to width.

    Padding is computed on the plain text so the separator's ANSI codes do
    not shift the columns that follow.
    """
    plain = f"{home}{separator}{away}"
    padding = " " * max(width - len(plain), 0)
    return f"{home}{emphasize(separator, style)}{away}{padding}"


def format_kickoff_time(instant: datetime, tz: Optional[tzinfo] = None) -> str:
    """Kickoff as local HH:MM (tz defaults to the system local zone)."""
    return instant.astimezone(tz).strftime(KICKOFF_TIME_FORMAT)


def format_fixture_date(instant: datetime, tz: Optional[tzinfo] = None) -> str:
    """Kickoff as local DD/MM HH:MM."""
    return instant.astimezone(tz).strftime(FIXTURE_DATE_FORMAT)


def clear_last_lines(count: int) -> None:
    """Erase the previous count lines of an interactive terminal."""
    if not sys.stdout.isatty():
        return
    for _ in range(count):
        # Cursor up one line, then clear it
        click.echo("\x1b[1A\x1b[2K", nl=False)
