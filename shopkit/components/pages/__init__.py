"""
Pages component.
"""

from .component import HOME_PATH, render_page
from .ports import AnalyticsPort

__all__ = [
    "render_page",
    "HOME_PATH",
    "AnalyticsPort",
]
