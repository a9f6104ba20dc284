"""
Football Data Gateway

USE: Fetches matches, standings and scorers from football-data.org
HOW IT WORKS:
  - One GET per report against the v4 base URL, token in the X-Auth-Token
    header
  - 200 responses are decoded and validated into domain models
  - HTTP 400 is an invalid-credential failure, any other non-200 status
    (or a connection error/timeout) is a generic fetch failure, and a body
    that cannot be decoded or validated is a malformed-payload failure
  - Every failure is printed once, in red, and returned as FetchFailure;
    callers check isinstance before touching the data

FITS IN PROJECT:
  - Called by the view renderers, one request per run
  - No retries or backoff
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar, Union

import click
import requests

from .competitions import competition_identifier
from .models import parse_matches, parse_scorers, parse_standings

if TYPE_CHECKING:
    from ..settings import Settings
    from .credentials import Credential

logger = logging.getLogger(__name__)

T = TypeVar('T')

INVALID_CREDENTIAL_MESSAGE = "Error: API key invalid."
FETCH_FAILED_MESSAGE = "Error: Data fetch from API failed."
MALFORMED_PAYLOAD_MESSAGE = "Error: Unexpected response from API."


class FetchErrorKind(Enum):
    INVALID_CREDENTIAL = 'invalid_credential'
    FETCH_FAILED = 'fetch_failed'
    MALFORMED_PAYLOAD = 'malformed_payload'


@dataclass(frozen=True)
class FetchSuccess(Generic[T]):
    data: T


@dataclass(frozen=True)
class FetchFailure:
    kind: FetchErrorKind
    message: str
    status_code: Optional[int] = None


FetchResult = Union[FetchSuccess, FetchFailure]


def sanitize_error_message(message: str, token: Optional[str] = None) -> str:
    """Remove API tokens from text that is about to be shown or logged."""
    sanitized = re.sub(r'X-Auth-Token[:\s]+[A-Za-z0-9._-]+', 'X-Auth-Token: ***', str(message))
    if token:
        sanitized = sanitized.replace(token, '***')
    return sanitized


class FootballDataClient:
    """
    Thin client for the football-data.org v4 API.

    The credential is fixed at construction; the client never reads the
    environment itself.
    """

    def __init__(
        self,
        settings: "Settings",
        credential: "Credential",
        session: Optional[requests.Session] = None,
        echo: Callable[..., Any] = click.echo,
    ):
        """
        Initialize client.

        Args:
            settings: Loaded Settings (base URL, header name, timeout)
            credential: API token holder
            session: Optional requests session (a new one is created if omitted)
            echo: Output function used to surface failures
        """
        self.settings = settings
        self._credential = credential
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.echo = echo

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "FootballDataClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _fail(self, kind: FetchErrorKind, text: str, status_code: Optional[int] = None) -> FetchFailure:
        self.echo(click.style(text, fg='bright_red'))
        return FetchFailure(kind=kind, message=text, status_code=status_code)

    def fetch(self, endpoint: str) -> FetchResult:
        """
        GET an endpoint and decode its JSON body.

        Args:
            endpoint: Path relative to the base URL (e.g. 'matches')

        Returns:
            FetchSuccess with the decoded JSON, or FetchFailure
        """
        url = f"{self.settings.base_url}{endpoint}"
        headers = {self.settings.token_header: self._credential.token}
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, headers=headers, timeout=self.settings.timeout)
        except requests.exceptions.RequestException as e:
            error_msg = sanitize_error_message(str(e), self._credential.token)
            logger.warning(f"Request to {endpoint} failed: {error_msg}")
            return self._fail(FetchErrorKind.FETCH_FAILED, f"{FETCH_FAILED_MESSAGE}\n{error_msg}")

        status = response.status_code
        if status == 400:
            logger.warning(f"football-data.org rejected the API key for {endpoint}")
            return self._fail(
                FetchErrorKind.INVALID_CREDENTIAL,
                f"{INVALID_CREDENTIAL_MESSAGE}\nStatus code: {status}",
                status,
            )
        if status != 200:
            logger.warning(f"football-data.org error for {endpoint}: HTTP {status}")
            return self._fail(
                FetchErrorKind.FETCH_FAILED,
                f"{FETCH_FAILED_MESSAGE}\nStatus code: {status}",
                status,
            )

        try:
            return FetchSuccess(response.json())
        except ValueError as e:
            logger.warning(f"Could not decode response from {endpoint}: {e}")
            return self._fail(FetchErrorKind.MALFORMED_PAYLOAD, MALFORMED_PAYLOAD_MESSAGE, status)

    def _fetch_parsed(self, endpoint: str, parser: Callable[[Any], T]) -> FetchResult:
        result = self.fetch(endpoint)
        if isinstance(result, FetchFailure):
            return result

        try:
            return FetchSuccess(parser(result.data))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected payload shape from {endpoint}: {e}")
            return self._fail(FetchErrorKind.MALFORMED_PAYLOAD, MALFORMED_PAYLOAD_MESSAGE, 200)

    def get_matches(self) -> FetchResult:
        """Today's matches across every competition the token can see."""
        return self._fetch_parsed("matches", parse_matches)

    def get_standings(self, competition: str) -> FetchResult:
        competition_id = competition_identifier(competition)
        return self._fetch_parsed(f"competitions/{competition_id}/standings", parse_standings)

    def get_scorers(self, competition: str) -> FetchResult:
        competition_id = competition_identifier(competition)
        return self._fetch_parsed(f"competitions/{competition_id}/scorers", parse_scorers)

    def get_competition_matches(self, competition: str) -> FetchResult:
        """Every match of the competition's current season."""
        competition_id = competition_identifier(competition)
        return self._fetch_parsed(f"competitions/{competition_id}/matches", parse_matches)

