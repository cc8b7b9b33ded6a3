"""Structured diagnostic records produced by the validator."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ProblemKind(StrEnum):
    MISSING = "missing"
    FORMAT = "format"
    NESTED = "nested"


class Problem(BaseModel):
    """A single diagnostic, attributed to the line of the offending element.

    ``meta`` holds the offending text for ``missing`` and the offending
    attribute value for ``format`` and ``nested``.
    """

    model_config = ConfigDict(frozen=True)

    file_name: str
    line: int
    meta: str
    problem: ProblemKind
