"""
Pages component.

Renders the home page and records the page view.
"""

from __future__ import annotations

from .ports import AnalyticsPort

HOME_PATH = "/home"


async def render_page(analytics: AnalyticsPort) -> str:
    """Return the home page markup, tracking a view of /home."""
    analytics.track_page_view(HOME_PATH)
    return "<div>content</div>"
