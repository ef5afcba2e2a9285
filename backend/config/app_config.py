"""
Runtime Configuration

Reads deployment settings from CITRONIX_* environment variables once at import
time. Everything has a default so the API starts with no environment at all
(SQLite database and log files under ~/.citronix).
"""
import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from constants import ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DATA_DIR = Path.home() / ".citronix"

_TRUE_VALUES = ('true', '1', 'yes', 'on')
_FALSE_VALUES = ('false', '0', 'no', 'off')


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}", invalid_keys=[name])


def _parse_port(name: str, raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", invalid_keys=[name])
    if not 0 < port < 65536:
        raise ConfigurationError(f"{name} out of range: {port}", invalid_keys=[name])
    return port


@dataclass(frozen=True)
class AppConfig:
    """Immutable snapshot of the runtime settings."""

    database_url: str
    log_dir: Path
    log_level: str = "INFO"
    log_to_file: bool = True
    host: str = ServerConfig.HOST
    port: int = ServerConfig.PORT
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Build an AppConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If a variable holds an unparseable value
    """
    env = os.environ if environ is None else environ

    database_url = env.get('CITRONIX_DATABASE_URL') or f"sqlite:///{DATA_DIR / 'citronix.db'}"
    log_dir = Path(env.get('CITRONIX_LOG_DIR') or DATA_DIR / "logs")

    log_level = env.get('CITRONIX_LOG_LEVEL', 'INFO').upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level: {log_level}", invalid_keys=['CITRONIX_LOG_LEVEL'])

    origins = [
        origin.strip()
        for origin in env.get('CITRONIX_CORS_ORIGINS', '*').split(',')
        if origin.strip()
    ]

    return AppConfig(
        database_url=database_url,
        log_dir=log_dir,
        log_level=log_level,
        log_to_file=_parse_bool('CITRONIX_LOG_TO_FILE', env.get('CITRONIX_LOG_TO_FILE', 'true')),
        host=env.get('CITRONIX_HOST', ServerConfig.HOST),
        port=_parse_port('CITRONIX_PORT', env.get('CITRONIX_PORT', str(ServerConfig.PORT))),
        cors_origins=origins or ["*"],
    )


# Global settings snapshot
APP_CONFIG = load_config()
