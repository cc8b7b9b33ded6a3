"""File-level orchestration for i18ncheck."""

from i18ncheck.service.runner import CheckRunner

__all__ = ["CheckRunner"]
