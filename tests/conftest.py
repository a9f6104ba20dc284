"""
Pytest Configuration and Fixtures

Provides shared fixtures for all tests including:
- Default settings and a fixed credential
- Sample football-data.org payloads (matches, standings, scorers)
- A FootballDataClient backed by a mock requests session
- An echo function that records output lines
"""

from typing import Any, Dict, List
from unittest.mock import Mock

import pytest

from football_cli.data.credentials import Credential
from football_cli.data.gateway import FootballDataClient
from football_cli.settings import DEFAULTS, Settings


def make_match(utc_date: str, status: str, home: str = "Arsenal", away: str = "Chelsea",
               competition: str = "Premier League") -> Dict[str, Any]:
    return {
        'id': 1,
        'utcDate': utc_date,
        'status': status,
        'homeTeam': {'id': 57, 'name': f"{home} FC", 'shortName': home},
        'awayTeam': {'id': 61, 'name': f"{away} FC", 'shortName': away},
        'competition': {'id': 2021, 'name': competition},
    }


def make_table_row(position: int, team: str, played: int = 10, goals_for: int = 15,
                   goals_against: int = 10, points: int = 20) -> Dict[str, Any]:
    return {
        'position': position,
        'team': {'id': position, 'name': f"{team} FC", 'shortName': team},
        'playedGames': played,
        'won': 6,
        'draw': 2,
        'lost': 2,
        'points': points,
        'goalsFor': goals_for,
        'goalsAgainst': goals_against,
        'goalDifference': goals_for - goals_against,
    }


def make_response(status_code: int = 200, payload: Any = None) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


class EchoRecorder:
    """click.echo stand-in that keeps every printed message."""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, message: Any = None, **kwargs: Any) -> None:
        self.lines.append('' if message is None else str(message))

    @property
    def plain(self) -> List[str]:
        import click
        return [click.unstyle(line) for line in self.lines]


@pytest.fixture
def settings() -> Settings:
    return Settings.from_dict(DEFAULTS)


@pytest.fixture
def credential() -> Credential:
    return Credential("test-token-123")


@pytest.fixture
def echo() -> EchoRecorder:
    return EchoRecorder()


@pytest.fixture
def session() -> Mock:
    return Mock()


@pytest.fixture
def client(settings, credential, session, echo) -> FootballDataClient:
    return FootballDataClient(settings, credential, session=session, echo=echo)


@pytest.fixture
def matches_payload() -> Dict[str, Any]:
    return {
        'matches': [
            make_match("2024-03-09T12:30:00Z", "IN_PLAY", "Man United", "Everton"),
            make_match("2024-03-09T15:00:00Z", "SCHEDULED", "Brighton", "Forest"),
            make_match("2024-03-09T15:00:00Z", "FINISHED", "Leeds", "Hull", "Championship"),
            make_match("2024-03-09T17:30:00Z", "TIMED", "Arsenal", "Chelsea"),
            make_match("2024-03-09T13:00:00Z", "PAUSED", "Milan", "Roma", "Serie A"),
            make_match("2024-03-09T20:00:00Z", "POSTPONED", "Lyon", "Nice", "Ligue 1"),
        ]
    }


@pytest.fixture
def standings_payload() -> Dict[str, Any]:
    teams = [
        "Liverpool", "Arsenal", "Man City", "Aston Villa", "Tottenham",
        "Man United", "West Ham", "Newcastle", "Brighton", "Wolves",
        "Chelsea", "Fulham", "Bournemouth", "Palace", "Brentford",
        "Everton", "Forest", "Luton", "Burnley", "Sheffield Utd",
    ]
    table = [
        make_table_row(i, name, goals_for=40 - i * 2, goals_against=19)
        for i, name in enumerate(teams, 1)
    ]
    return {
        'competition': {'id': 2021, 'name': 'Premier League'},
        'standings': [
            {'stage': 'REGULAR_SEASON', 'type': 'TOTAL', 'table': table},
            {'stage': 'REGULAR_SEASON', 'type': 'HOME', 'table': table[:1]},
        ],
    }


@pytest.fixture
def scorers_payload() -> Dict[str, Any]:
    return {
        'scorers': [
            {'player': {'name': 'Erling Haaland'}, 'team': {'shortName': 'Man City'},
             'goals': 18, 'assists': 5},
            {'player': {'name': 'Mohamed Salah'}, 'team': {'shortName': 'Liverpool'},
             'goals': 15, 'assists': 9},
            {'player': {'name': 'Ollie Watkins'}, 'team': {'shortName': 'Aston Villa'},
             'goals': 14, 'assists': None},
        ]
    }
