# Data Module
#
# USE: This package fetches and models football-data.org data
# WHAT IS HERE: competition lookups, payload models, the HTTP gateway and
#   the API token bootstrap (football_cli.data.credentials)
# FITS IN PROJECT: everything the renderers read comes through here

from .competitions import COMPETITION_ALIASES, COMPETITION_IDS, competition_identifier, resolve_alias
from .gateway import FetchErrorKind, FetchFailure, FetchSuccess, FootballDataClient
from .models import Match, ScorerRow, StandingsRow

__all__ = [
    'COMPETITION_ALIASES',
    'COMPETITION_IDS',
    'competition_identifier',
    'resolve_alias',
    'FetchErrorKind',
    'FetchFailure',
    'FetchSuccess',
    'FootballDataClient',
    'Match',
    'ScorerRow',
    'StandingsRow',
]
