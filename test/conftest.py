import logging
import os
from pathlib import Path

from dotenv import load_dotenv


def pytest_configure(config):
    """
    Called before PyTest collects tests.

    Load environment variables from `.env.test.local` (preferred) or fall back to `.env`,
    then set the log level of the kit from `LOG_LEVEL` (default WARNING).
    """
    project_root = Path(__file__).resolve().parent.parent
    env_test_local = project_root / ".env.test.local"
    env_default = project_root / ".env"

    if env_test_local.exists():
        load_dotenv(env_test_local)
    elif env_default.exists():
        load_dotenv(env_default)

    logging.getLogger("unit_swap_kit").setLevel(os.getenv("LOG_LEVEL", "WARNING").upper())
