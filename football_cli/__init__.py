"""Terminal client for football-data.org matches, standings and scorers."""

__version__ = "0.1.0"
