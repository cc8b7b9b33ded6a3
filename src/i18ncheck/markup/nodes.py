"""Immutable markup tree nodes handed to the validator."""

from __future__ import annotations

from dataclasses import dataclass, field

ROOT_TAG = "#document"


@dataclass(frozen=True)
class Text:
    """Raw character data between tags."""

    content: str
    line: int


@dataclass(frozen=True)
class Comment:
    """An HTML comment; ``content`` is the payload between ``<!--`` and ``-->``."""

    content: str
    line: int


@dataclass(frozen=True)
class Element:
    """A tag with its attributes and ordered children."""

    tag: str
    line: int
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.tag == ROOT_TAG

    @property
    def child_elements(self) -> list[Element]:
        return [child for child in self.children if isinstance(child, Element)]

    @property
    def texts(self) -> list[Text]:
        return [child for child in self.children if isinstance(child, Text)]

    @property
    def comments(self) -> list[Comment]:
        return [child for child in self.children if isinstance(child, Comment)]

    def has_attr(self, name: str) -> bool:
        return name in self.attrs


# The union of all node types.
Node = Element | Text | Comment
