import logging
import os
from dataclasses import dataclass
from typing import Optional

# Server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8086
DEFAULT_LOG_LEVEL = "DEBUG"
ASSETS_DIRNAME = "assets"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    assets_dir: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from TODO_* environment variables, falling back to defaults"""
        if environ is None:
            environ = os.environ
        port = environ.get("TODO_PORT", str(DEFAULT_PORT))
        try:
            port = int(port)
        except ValueError:
            raise ValueError(f"TODO_PORT must be an integer, got {port!r}") from None
        return cls(
            host=environ.get("TODO_HOST", DEFAULT_HOST),
            port=port,
            log_level=environ.get("TODO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            assets_dir=os.path.abspath(
                environ.get("TODO_ASSETS_DIR") or os.path.join(os.getcwd(), ASSETS_DIRNAME)
            ),
        )


def configure_logging(level=DEFAULT_LOG_LEVEL):
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
