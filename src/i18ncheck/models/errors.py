"""Structured configuration errors with YAML source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int


class ConfigIssue(BaseModel):
    """A structured configuration error with optional source position."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None

    def describe(self) -> str:
        where = f"{self.span.file}:{self.span.line}: " if self.span else ""
        key = f"{self.path}: " if self.path else ""
        return f"{where}{key}{self.message}"


class ConfigurationError(Exception):
    """Raised when a project configuration file cannot be used."""

    def __init__(self, issues: list[ConfigIssue]) -> None:
        self.issues = issues
        super().__init__("; ".join(issue.describe() for issue in issues))
