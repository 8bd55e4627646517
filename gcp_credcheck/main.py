# gcp_credcheck/main.py
import logging
import os

from dotenv import load_dotenv

from .config import config_from_env
from .probes import run_smoke_tests

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def log_level_from_env() -> str:
    """Return ``LOG_LEVEL`` if it names a logging level, otherwise INFO."""
    level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def main() -> int:
    """
    Load credentials from the environment and smoke-test them.

    Returns 1 if the configuration cannot be loaded, 0 otherwise. Probe
    failures are reported but do not change the exit status.
    """
    load_dotenv()

    logging.basicConfig(
        level=log_level_from_env(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = config_from_env()
    try:
        config.load_and_validate()
    except Exception as e:
        logger.error(f"Error loading and validating config: {str(e)}")
        return 1
    print("Config successfully loaded ✅")

    run_smoke_tests(config)
    return 0
