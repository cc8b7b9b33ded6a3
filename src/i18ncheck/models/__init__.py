"""Pydantic domain models for i18ncheck."""

from i18ncheck.models.config import CheckerConfig, ProjectConfig
from i18ncheck.models.errors import ConfigIssue, ConfigurationError, SourceSpan
from i18ncheck.models.problems import Problem, ProblemKind
from i18ncheck.models.report import CheckReport, FileReport

__all__ = [
    "CheckReport",
    "CheckerConfig",
    "ConfigIssue",
    "ConfigurationError",
    "FileReport",
    "Problem",
    "ProblemKind",
    "ProjectConfig",
    "SourceSpan",
]
