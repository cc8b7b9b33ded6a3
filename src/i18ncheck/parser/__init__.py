"""Markup and configuration loading for i18ncheck."""

from i18ncheck.parser.config_loader import ConfigLoader
from i18ncheck.parser.loader import MarkupLoader, MarkupSafetyError

__all__ = [
    "ConfigLoader",
    "MarkupLoader",
    "MarkupSafetyError",
]
