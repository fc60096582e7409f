from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the VULNREPORT_ prefix.
    For example:
        - VULNREPORT_REPORTS_DIR=/path/to/vulndb/data/reports
        - VULNREPORT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="VULNREPORT_",
        case_sensitive=False,
        extra="forbid",
    )

    reports_dir: Path = Field(
        default=Path("data/reports"),
        description="Directory holding GO-YYYY-NNNN.yaml reports, used to resolve report IDs",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ERROR)",
    )
