import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .log import LOG_LEVELS

DEFAULT_LOG_LEVEL = "warning"


@dataclass
class Settings:
    """Runtime settings for the playground driver."""
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    random_seed: Optional[int] = None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read settings from the environment, after loading a .env file if there is one."""
    load_dotenv(env_file)

    log_level = os.getenv("PLAYGROUND_LOG_LEVEL", DEFAULT_LOG_LEVEL).lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    seed = os.getenv("PLAYGROUND_RANDOM_SEED")
    try:
        random_seed = int(seed) if seed else None
    except ValueError:
        raise ValueError(f"PLAYGROUND_RANDOM_SEED must be an integer, got {seed!r}")

    return Settings(
        log_level=log_level,
        log_file=os.getenv("PLAYGROUND_LOG_FILE") or None,
        random_seed=random_seed,
    )
