# Terminal Output Module
#
# USE: This package turns fetched football data into terminal reports
# HOW IT WORKS: formatter holds the padding/emphasis helpers; renderers
#   (imported directly as football_cli.output.renderers) prints each report
# FITS IN PROJECT: the user-facing side of every run

from .formatter import (
    emphasize,
    emphasize_games_played,
    emphasize_goal_difference,
    emphasize_rank,
    format_fixture_date,
    format_kickoff_time,
    mean_games_played,
    pad_left,
    pad_right,
)

__all__ = [
    'emphasize',
    'emphasize_games_played',
    'emphasize_goal_difference',
    'emphasize_rank',
    'format_fixture_date',
    'format_kickoff_time',
    'mean_games_played',
    'pad_left',
    'pad_right',
]
