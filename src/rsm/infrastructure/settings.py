"""Runtime settings, read from ``RSM_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs  (tests, explicit callers)
  2. Env vars     ``RSM_DATA_DIR``, ``RSM_LOG_LEVEL``...
  3. Code defaults
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    """Settings for the repair shop CLI.

    Attributes:
        data_dir: Directory holding the JSON files (one per aggregate).
        log_level: Level for the ``rsm`` logger when ``--verbose`` is off.
        log_json: Emit JSON log lines instead of the console renderer.
    """

    model_config = SettingsConfigDict(env_prefix="RSM_", frozen=True)

    data_dir: Path = Field(default=_DEFAULT_DATA_DIR)
    log_level: str = "WARNING"
    log_json: bool = False


def get_settings(**overrides: object) -> Settings:
    """Build settings from the current environment.

    Not cached: the CLI test runner changes the environment between
    invocations.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
