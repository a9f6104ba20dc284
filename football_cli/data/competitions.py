"""
Competition Lookup Module

USE: Maps user shorthand to competitions, and competitions to provider ids
HOW IT WORKS:
  - COMPETITION_ALIASES: case-insensitive shorthand token -> canonical name
  - COMPETITION_IDS: canonical name -> football-data.org competition id
  - A token must resolve through both tables before it can be fetched

FITS IN PROJECT:
  - Used by the command resolver to turn --comp values into names
  - Used by the renderers to build competition endpoints
"""

import logging
from typing import Dict, List, Optional

from ..errors import UnknownCompetitionError

logger = logging.getLogger(__name__)

DEFAULT_COMPETITION = "Premier League"

COMPETITION_IDS: Dict[str, int] = {
    "Premier League": 2021,
    "Championship": 2016,
    "Champions League": 2001,
    "Ligue 1": 2015,
    "Bundesliga": 2002,
    "Serie A": 2019,
    "Primera Division": 2014,
}

COMPETITION_ALIASES: Dict[str, str] = {
    "premier-league": "Premier League",
    "premier_league": "Premier League",
    "pl": "Premier League",
    "premier": "Premier League",
    "cs": "Championship",
    "championship": "Championship",
    "efl": "Championship",
    "cl": "Champions League",
    "ucl": "Champions League",
    "champions-league": "Champions League",
    "champions_league": "Champions League",
    "l1": "Ligue 1",
    "lu": "Ligue 1",
    "ligue-1": "Ligue 1",
    "ligue_1": "Ligue 1",
    "ligue-un": "Ligue 1",
    "ligue_un": "Ligue 1",
    "bundesliga": "Bundesliga",
    "bl": "Bundesliga",
    "sa": "Serie A",
    "serie-a": "Serie A",
    "serie_a": "Serie A",
    "la-liga": "Primera Division",
    "la_liga": "Primera Division",
    "ll": "Primera Division",
}


def resolve_alias(token: str) -> Optional[str]:
    """
    Resolve a shorthand token to its canonical competition name.

    Args:
        token: User supplied alias, any case (e.g. 'BL', 'serie-a')

    Returns:
        Canonical competition name, or None if the token is not an alias
    """
    name = COMPETITION_ALIASES.get(token.strip().lower())
    if name is None:
        logger.debug(f"No competition alias matches '{token}'")
    return name


def competition_identifier(canonical_name: str) -> int:
    """
    Look up the provider id for a canonical competition name.

    Raises:
        UnknownCompetitionError: if the name is not a known competition
    """
    try:
        return COMPETITION_IDS[canonical_name]
    except KeyError:
        raise UnknownCompetitionError(canonical_name, COMPETITION_IDS) from None


def aliases_for(canonical_name: str) -> List[str]:
    """All alias tokens that resolve to the given competition, in table order."""
    return [alias for alias, name in COMPETITION_ALIASES.items() if name == canonical_name]
