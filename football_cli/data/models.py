"""
Domain Models

USE: Typed views of the football-data.org payloads the renderers consume
HOW IT WORKS:
  - Pydantic models validate the JSON and map camelCase fields
  - parse_* helpers pull the relevant list out of each endpoint's payload
  - Validation errors propagate to the gateway, which reports them as a
    malformed-payload failure

FITS IN PROJECT:
  - Produced by the data gateway, consumed by the view renderers
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

IN_PLAY_STATUSES = frozenset({'IN_PLAY', 'PAUSED'})
SCHEDULED_STATUSES = frozenset({'SCHEDULED', 'TIMED'})


class ProviderModel(BaseModel):
    """Base model: accept camelCase aliases, ignore unused fields."""
    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)


class TeamRef(ProviderModel):
    name: Optional[str] = None
    short_name: Optional[str] = Field(default=None, alias='shortName')

    @property
    def display_name(self) -> str:
        # Knockout slots not yet decided come back with null names
        return self.short_name or self.name or 'TBD'


class CompetitionRef(ProviderModel):
    name: str = ''


class Match(ProviderModel):
    """A single fixture."""
    utc_date: datetime = Field(alias='utcDate')
    status: str
    home_team: TeamRef = Field(alias='homeTeam')
    away_team: TeamRef = Field(alias='awayTeam')
    competition: CompetitionRef = Field(default_factory=CompetitionRef)

    @field_validator('utc_date')
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def is_in_play(self) -> bool:
        return self.status in IN_PLAY_STATUSES

    @property
    def is_scheduled(self) -> bool:
        return self.status in SCHEDULED_STATUSES


class StandingsRow(ProviderModel):
    """One team's line in a league table."""
    position: int
    team: TeamRef
    played_games: int = Field(alias='playedGames')
    won: int
    draw: int
    lost: int
    points: int
    goals_for: int = Field(alias='goalsFor')
    goals_against: int = Field(alias='goalsAgainst')
    goal_difference: int = Field(alias='goalDifference')


class StandingsGroup(ProviderModel):
    """One table of a standings payload (TOTAL, HOME or AWAY)."""
    type: Optional[str] = None
    table: List[StandingsRow]


class PlayerRef(ProviderModel):
    name: str


class ScorerRow(ProviderModel):
    """A player's goal and assist totals."""
    player: PlayerRef
    team: TeamRef
    goals: int
    assists: Optional[int] = None


def parse_matches(payload: Dict[str, Any]) -> List[Match]:
    return [Match.model_validate(item) for item in payload['matches']]


def parse_standings(payload: Dict[str, Any]) -> List[StandingsRow]:
    """
    Extract the overall table from a standings payload.

    The provider returns TOTAL, HOME and AWAY groups; the first TOTAL group
    is used, or the first group when none is typed.
    """
    groups = [StandingsGroup.model_validate(item) for item in payload['standings']]
    if not groups:
        raise ValueError("standings payload contains no tables")

    group = next((g for g in groups if g.type == 'TOTAL'), groups[0])
    return group.table


def parse_scorers(payload: Dict[str, Any]) -> List[ScorerRow]:
    return [ScorerRow.model_validate(item) for item in payload['scorers']]
