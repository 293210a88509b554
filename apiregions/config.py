"""Configuration management for apiregions.

Loads settings from environment variables with sensible defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_GLOBAL_REGION = "global"


@dataclass
class ApiRegionsConfig:
    """Top-level configuration."""

    global_region: str = DEFAULT_GLOBAL_REGION  # name of the least restrictive tier
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ApiRegionsConfig":
        return cls(
            global_region=os.getenv("APIREGIONS_GLOBAL_REGION", DEFAULT_GLOBAL_REGION),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def configure_logging(config: ApiRegionsConfig | None = None) -> None:
    """Install a root handler at the configured level."""
    config = config or ApiRegionsConfig.from_env()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
