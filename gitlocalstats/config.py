"""
Configuration management for gitlocalstats.

Loads the default author email and the repository list location from
environment variables.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from the current directory (or a parent)
load_dotenv()

GITLOCALSTATS_EMAIL = os.getenv("GITLOCALSTATS_EMAIL")
GITLOCALSTATS_FILE = os.getenv("GITLOCALSTATS_FILE")

DOTFILE_NAME = ".gitlocalstats"

# Six months expressed in days and whole weeks
DAYS_IN_LAST_SIX_MONTHS = 183
WEEKS_IN_LAST_SIX_MONTHS = 26

# Dependency folders never searched for repositories
SKIPPED_DIRS = {"vendor", "node_modules"}


def get_dotfile_path() -> Path:
    """
    Get the path of the file that stores the tracked repositories.

    Returns:
        GITLOCALSTATS_FILE if set, otherwise ~/.gitlocalstats

    Raises:
        ValueError: If the user's home directory cannot be resolved
    """
    if GITLOCALSTATS_FILE:
        return Path(GITLOCALSTATS_FILE).expanduser()

    try:
        home = Path.home()
    except RuntimeError as e:
        raise ValueError(f"Could not resolve the home directory: {e}") from e
    return home / DOTFILE_NAME


def validate_config(email: str | None) -> str:
    """Validate that an author email is available and return it."""
    if email is None:
        email = GITLOCALSTATS_EMAIL

    if not email or not email.strip():
        raise ValueError(
            "Missing required configuration: GITLOCALSTATS_EMAIL\n"
            "Pass --email or set GITLOCALSTATS_EMAIL in your environment or .env file."
        )
    return email.strip()
