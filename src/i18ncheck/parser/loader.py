"""Markup loader that builds a line-tracked node tree for the validator."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, Comment as SoupComment, NavigableString, Tag
from bs4.element import PreformattedString

from i18ncheck.markup.nodes import ROOT_TAG, Comment, Element, Node, Text

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 200_000
_MAX_DEPTH = 256


class MarkupSafetyError(Exception):
    """Raised when markup input violates safety constraints.

    Distinct from malformed markup, which the parser tolerates: these
    indicate inputs too large or too deeply nested to walk safely.
    """


class MarkupLoader:
    """Builds :class:`Element` trees from HTML-like template text.

    Uses BeautifulSoup with the ``html.parser`` backend, which records the
    source line of every tag.  Multi-valued attributes are disabled so that
    every attribute value reaches the validator as a plain string.
    """

    def __init__(self, features: str = "html.parser") -> None:
        self._features = features

    # -- safety checks -------------------------------------------------------

    @staticmethod
    def _check_markup_safety(content: str) -> None:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise MarkupSafetyError(
                f"Markup document exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> Element:
        """Load a template file (UTF-8) and return its root element."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, str(path))

    def load_string(self, content: str, filename: str = "<string>") -> Element:
        """Parse markup text into a tree rooted at a ``#document`` element."""
        self._check_markup_safety(content)
        soup = BeautifulSoup(content, self._features, multi_valued_attributes=None)
        builder = _TreeBuilder(filename)
        return builder.build(soup)


class _TreeBuilder:
    """Converts one parsed soup into immutable nodes, enforcing the limits."""

    def __init__(self, filename: str) -> None:
        self._filename = filename
        self._count = 0

    def build(self, soup: BeautifulSoup) -> Element:
        return self._convert(soup, ROOT_TAG, line=1, depth=0)

    def _convert(self, tag: Tag, name: str, line: int, depth: int) -> Element:
        if depth > _MAX_DEPTH:
            raise MarkupSafetyError(
                f"{self._filename}: markup nesting exceeds maximum depth ({_MAX_DEPTH})"
            )
        self._tick()
        children: list[Node] = []
        # Only tags carry a source line; text and comments inherit a cursor
        # advanced by the newlines seen since the last tag.
        cursor = line
        for child in tag.children:
            if isinstance(child, Tag):
                if child.sourceline is not None:
                    cursor = child.sourceline
                element = self._convert(child, child.name, cursor, depth + 1)
                children.append(element)
                cursor += _newlines(element)
            elif isinstance(child, SoupComment):
                self._tick()
                children.append(Comment(content=str(child), line=cursor))
                cursor += child.count("\n")
            elif isinstance(child, PreformattedString):
                # Doctype, CDATA, declarations and processing instructions.
                continue
            elif isinstance(child, NavigableString):
                self._tick()
                children.append(Text(content=str(child), line=cursor))
                cursor += child.count("\n")
        attrs = {str(key): _attr_value(value) for key, value in tag.attrs.items()}
        return Element(tag=name, line=line, attrs=attrs, children=children)

    def _tick(self) -> None:
        self._count += 1
        if self._count > _MAX_NODE_COUNT:
            raise MarkupSafetyError(
                f"{self._filename}: markup exceeds maximum node count ({_MAX_NODE_COUNT:,})"
            )


def _attr_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(str(v) for v in value)
    return str(value)


def _newlines(element: Element) -> int:
    """Count newlines in the character data below *element*."""
    total = 0
    stack: list[Node] = list(element.children)
    while stack:
        node = stack.pop()
        if isinstance(node, Element):
            stack.extend(node.children)
        else:
            total += node.content.count("\n")
    return total
