"""Visitor pattern for markup tree traversal."""

from __future__ import annotations

from typing import Any

from i18ncheck.markup.nodes import Comment, Element, Node, Text


class MarkupVisitor:
    """Base visitor for markup trees.

    Override specific visit_* methods to customize behavior.  Extra
    positional arguments given to :meth:`visit` are passed through, which
    lets subclasses thread a per-node context down the tree.
    """

    def visit(self, node: Node, *args: Any) -> Any:
        """Dispatch to the appropriate visit_* method."""
        method_name = f"visit_{type(node).__name__.lower()}"
        method = getattr(self, method_name, self.generic_visit)
        return method(node, *args)

    def generic_visit(self, node: Node, *args: Any) -> Any:
        return None

    def visit_element(self, node: Element, *args: Any) -> Any:
        for child in node.children:
            self.visit(child, *args)

    def visit_text(self, node: Text, *args: Any) -> Any:
        return None

    def visit_comment(self, node: Comment, *args: Any) -> Any:
        return None
