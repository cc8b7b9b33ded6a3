"""Checker configuration models."""

from __future__ import annotations

import re
from re import Pattern

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ATTR_NAME = "i18n"
DEFAULT_ATTR_PATTERN = r"\w+:\w+"
DEFAULT_IGNORE_TAGS = frozenset({"script", "style"})
DEFAULT_DISABLE_COMMENT = "i18ncheck:disable"


class CheckerConfig(BaseModel):
    """Immutable configuration shared by every file of a run.

    ``attr_pattern`` is matched with ``search``: the pattern only needs to
    occur somewhere in the attribute value.  Passing an invalid regular
    expression fails here, before any file is processed.
    """

    model_config = ConfigDict(frozen=True)

    attr_name: str = DEFAULT_ATTR_NAME
    attr_pattern: Pattern[str] = re.compile(DEFAULT_ATTR_PATTERN)
    ignore_tags: frozenset[str] = DEFAULT_IGNORE_TAGS
    disable_comment: str = DEFAULT_DISABLE_COMMENT

    @field_validator("attr_name", "disable_comment")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    def matches_format(self, value: str) -> bool:
        return self.attr_pattern.search(value) is not None


class ProjectConfig(BaseModel):
    """Options read from a ``.i18ncheck.yaml`` project file.

    Every field is optional; ``None`` means "not set in the file".
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    attr_name: str | None = Field(default=None, alias="attrName")
    attr_pattern: Pattern[str] | None = Field(default=None, alias="attrPattern")
    ignore_tags: list[str] | None = Field(default=None, alias="ignoreTags")
    disable_comment: str | None = Field(default=None, alias="disableComment")
    include: list[str] | None = None
    exclude: list[str] | None = None
    workers: int | None = Field(default=None, ge=1)
