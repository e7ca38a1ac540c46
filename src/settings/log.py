"""Logger wiring for the fixture's packages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from settings.config import FixtureConfig

FIXTURE_LOGGERS = ("catalog", "entities", "settings")


def configure_logging(config: FixtureConfig) -> None:
    """Apply the configured level to every fixture logger.

    Handlers are left to the harness; only levels are touched.
    """
    level = logging.getLevelName(config.log_level)
    for name in FIXTURE_LOGGERS:
        logging.getLogger(name).setLevel(level)
