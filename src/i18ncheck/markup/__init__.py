"""Markup tree model consumed by the validator."""

from i18ncheck.markup.nodes import ROOT_TAG, Comment, Element, Node, Text
from i18ncheck.markup.visitor import MarkupVisitor

__all__ = [
    "ROOT_TAG",
    "Comment",
    "Element",
    "MarkupVisitor",
    "Node",
    "Text",
]
