from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from ..exceptions import ConfigurationError
from .constants import PORT_PROTOCOL_COUNTS_FILENAME, TAG_COUNTS_FILENAME


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # Report settings
    output_dir: Path = Field(Path("."), description="Directory receiving the reports")
    tag_counts_filename: str = Field(TAG_COUNTS_FILENAME, description="Tag count report name")
    port_protocol_counts_filename: str = Field(
        PORT_PROTOCOL_COUNTS_FILENAME,
        description="Port/protocol count report name",
    )
    export_csv: bool = Field(False, description="Also export both count tables as CSV")

    # Diagnostics
    log_level: str = Field("INFO", description="Level for flowlog_tagger loggers")
    log_skipped_lines: bool = Field(
        True, description="Include the offending text in flow log line warnings"
    )

    class Config:
        env_prefix = "FLOWLOG_TAGGER_"
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Return a singleton settings instance."""
    return Settings()


def load_settings(path: Union[str, Path]) -> Settings:
    """Build settings from a YAML file; its keys override the defaults."""
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except OSError as exc:
        raise ConfigurationError(
            f"Failed to read configuration from {config_path}", context=str(exc)
        ) from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Configuration file {config_path} is not valid YAML", context=str(exc)
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping",
            suggestion="Use 'key: value' pairs such as 'output_dir: reports'",
        )
    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}", context=str(exc)
        ) from exc
