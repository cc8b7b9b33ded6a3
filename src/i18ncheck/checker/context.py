"""Per-node scope state threaded through the tree walk."""

from __future__ import annotations

from dataclasses import dataclass, replace

from i18ncheck.markup.nodes import Element
from i18ncheck.models.config import CheckerConfig


@dataclass(frozen=True)
class CoveringMarker:
    """The nearest enclosing valid marker."""

    value: str
    line: int


@dataclass(frozen=True)
class ValidationContext:
    """Scope of the subtree being visited.

    ``disabled`` and ``ignored`` only ever turn on while descending.  Each
    recursive step receives its own value, so siblings never see each
    other's scope.
    """

    disabled: bool = False
    ignored: bool = False
    covering_marker: CoveringMarker | None = None

    @property
    def suppressed(self) -> bool:
        return self.disabled or self.ignored

    @property
    def covered(self) -> bool:
        return self.covering_marker is not None

    def covered_by(self, value: str, line: int) -> ValidationContext:
        return replace(self, covering_marker=CoveringMarker(value=value, line=line))


class ScopeRules:
    """Computes disable and ignore flags for an element from the configuration."""

    def __init__(self, config: CheckerConfig) -> None:
        self._config = config

    def is_disabled(self, element: Element) -> bool:
        """True if any direct child comment is the disable sentinel."""
        sentinel = self._config.disable_comment
        return any(comment.content.strip() == sentinel for comment in element.comments)

    def is_ignored(self, element: Element) -> bool:
        return element.tag in self._config.ignore_tags

    def excludes(self, element: Element) -> bool:
        return self.is_ignored(element) or self.is_disabled(element)

    def enter(self, parent: ValidationContext, element: Element) -> ValidationContext:
        """Return the context for *element*, given its parent's context."""
        disabled = parent.disabled or self.is_disabled(element)
        ignored = parent.ignored or self.is_ignored(element)
        if disabled == parent.disabled and ignored == parent.ignored:
            return parent
        return replace(parent, disabled=disabled, ignored=ignored)
