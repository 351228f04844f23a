"""
Pages component ports.
"""

from __future__ import annotations

from typing import Protocol


class AnalyticsPort(Protocol):
    """
    Page-view tracking.

    Implementations:
    - LoggingAnalyticsAdapter: Logs and records paths (dev/test)
    """

    def track_page_view(self, path: str) -> None: ...
