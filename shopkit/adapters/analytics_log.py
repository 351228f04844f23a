"""
Logging analytics adapter (dev).

Implements AnalyticsPort by logging each page view and
keeping the tracked paths in memory for test assertions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class LoggingAnalyticsAdapter:
    page_views: list[str] = field(default_factory=list)

    def track_page_view(self, path: str) -> None:
        self.page_views.append(path)
        logger.info("Page view: %s", path)

    def count(self, path: str) -> int:
        """Number of tracked views of a path."""
        return self.page_views.count(path)
