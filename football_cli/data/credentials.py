"""
Credential Bootstrap

USE: Provides the football-data.org API token for the run
HOW IT WORKS:
  - Loads the working directory's .env file with python-dotenv
  - Reads the token variable (X_AUTH_TOKEN by default)
  - If it is missing or blank, prompts until a non-blank token is entered
  - A token that was missing or blank in the environment is written to the
    .env file so later runs find it; a failed write is only logged

FITS IN PROJECT:
  - Runs once before any report; the resulting Credential is passed to the
    data gateway and never logged
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Union

import click
from dotenv import load_dotenv, set_key

from ..output.formatter import clear_last_lines

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)

SIGNUP_URL = "https://www.football-data.org/"


@dataclass(frozen=True)
class Credential:
    token: str = field(repr=False)


def save_token(env_file: Union[str, Path], variable: str, token: str) -> bool:
    """
    Persist the token as a key=value line in a dotenv file.

    Returns:
        True if the file was written, False if the write failed
    """
    path = Path(env_file)
    try:
        path.touch(exist_ok=True)
        set_key(str(path), variable, token)
    except OSError as e:
        logger.warning(f"Could not save API token to {path}: {e}")
        return False

    logger.info(f"Saved {variable} to {path}")
    return True


def bootstrap_credential(
    settings: "Settings",
    prompt: Callable[..., Any] = click.prompt,
    echo: Callable[..., Any] = click.echo,
) -> Credential:
    """
    Load the API token, prompting for it if needed.

    Args:
        settings: Loaded Settings (env file, variable name, persistence)
        prompt: Input function, click.prompt compatible
        echo: Output function

    Returns:
        Credential holding a non-blank token
    """
    env_file = Path(settings.env_file)
    load_dotenv(env_file)

    token = os.getenv(settings.token_env_var)
    prompted = False

    while token is None or token.strip() == "":
        echo(
            click.style("Account required from ", fg='bright_yellow')
            + click.style(SIGNUP_URL, fg='bright_white')
            + click.style("\nCreate a free account and enter your unique API key.", fg='bright_yellow')
        )
        token = prompt(f"Enter {settings.token_env_var}", hide_input=True)
        prompted = True
        clear_last_lines(3)

    token = token.strip()
    if prompted and settings.persist_token:
        save_token(env_file, settings.token_env_var, token)

    return Credential(token)
