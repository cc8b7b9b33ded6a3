"""Marker validation core for i18ncheck."""

from i18ncheck.checker.classifier import TextClassifier, TextSample
from i18ncheck.checker.context import ScopeRules, ValidationContext
from i18ncheck.checker.validator import I18nValidator

__all__ = [
    "I18nValidator",
    "ScopeRules",
    "TextClassifier",
    "TextSample",
    "ValidationContext",
]
