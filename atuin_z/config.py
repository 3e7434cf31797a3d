"""Environment-driven settings and path resolution for the Atuin db and exclusions."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from atuin_z.errors import HomeDirError

APP_NAME = "atuin-z"
HISTORY_DB_NAME = "history.db"
EXCLUSIONS_NAME = "exclusions"


class AtuinZConfig(BaseSettings):
    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="ATUIN_Z_",
        extra="ignore",
        populate_by_name=True,
    )
    # Set by the shell function to the caller's $PWD
    pwd: str | None = None
    # Atuin's own variables, read without our prefix
    atuin_db_path: str | None = Field(default=None, validation_alias="ATUIN_DB_PATH")
    atuin_data_dir: str | None = Field(default=None, validation_alias="ATUIN_DATA_DIR")
    xdg_data_home: str | None = Field(default=None, validation_alias="XDG_DATA_HOME")

    @field_validator("pwd", "atuin_db_path", "atuin_data_dir", "xdg_data_home")
    @classmethod
    def _emptyIsUnset(cls, v: str | None) -> str | None:
        return v or None


def homeDir() -> Path:
    """Return the user's home directory or raise HomeDirError."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirError("could not determine home directory") from e


def _dataHome(config: AtuinZConfig) -> Path:
    if config.xdg_data_home:
        return Path(config.xdg_data_home)
    return homeDir() / ".local" / "share"


def resolveDbPath(config: AtuinZConfig, override: str | None = None) -> Path:
    """Resolve the Atuin history database path.

    Priority:
    1. explicit override (--db)
    2. ATUIN_DB_PATH
    3. ATUIN_DATA_DIR/history.db
    4. XDG_DATA_HOME/atuin/history.db
    5. ~/.local/share/atuin/history.db
    """
    if override:
        return Path(override)
    if config.atuin_db_path:
        return Path(config.atuin_db_path)
    if config.atuin_data_dir:
        return Path(config.atuin_data_dir) / HISTORY_DB_NAME
    return _dataHome(config) / "atuin" / HISTORY_DB_NAME


def exclusionsPath(config: AtuinZConfig) -> Path:
    """XDG_DATA_HOME/atuin-z/exclusions, else ~/.local/share/atuin-z/exclusions."""
    return _dataHome(config) / APP_NAME / EXCLUSIONS_NAME


def loadConfig() -> AtuinZConfig:
    """Build settings from the current environment."""
    return AtuinZConfig()
