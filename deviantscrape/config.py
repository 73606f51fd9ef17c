"""Settings for fetching pages.

Uses a Pydantic model so settings files are validated on load. Command-line
options override values read from a file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from deviantscrape.common.request_manager import (
    DEFAULT_USER_AGENT,
    SyncRequestManager,
)

logger = logging.getLogger(__name__)


class ScraperSettings(BaseModel):
    """Fetch settings shared by every page run."""

    timeout: float = Field(30.0, gt=0)
    user_agent: str = Field(DEFAULT_USER_AGENT, alias="userAgent")
    verify_ssl: bool = Field(True, alias="verifySsl")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def request_manager(self) -> SyncRequestManager:
        """Build a request manager configured from these settings."""
        return SyncRequestManager(
            timeout=self.timeout,
            user_agent=self.user_agent,
            verify=self.verify_ssl,
        )


def load_settings(path: str | Path | None = None) -> ScraperSettings:
    """Load settings from a JSON file, or return defaults when no path is given.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If the file contents are invalid.
    """
    if path is None:
        return ScraperSettings()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info("Loading settings from %s", config_path)
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    return ScraperSettings.model_validate(data)
