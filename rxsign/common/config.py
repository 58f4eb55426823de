# common/config.py
"""Runtime settings read from the environment (and a local .env file)."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in TRUTHY

def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

def env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level

@dataclass(frozen=True)
class Settings:
    key_size: int = 2048
    show_keys: bool = True
    strict_exit: bool = True
    log_level: str = "WARNING"

def load_settings() -> Settings:
    """Read RXSIGN_* variables. Raises ValueError for unparseable values."""
    return Settings(
        key_size=env_int("RXSIGN_KEY_SIZE", 2048),
        show_keys=env_flag("RXSIGN_SHOW_KEYS", True),
        strict_exit=env_flag("RXSIGN_STRICT_EXIT", True),
        log_level=env_log_level("RXSIGN_LOG_LEVEL", "WARNING"),
    )
