"""Marker validation: missing, malformed and nested i18n markers."""

from __future__ import annotations

import logging

from i18ncheck.checker.classifier import TextClassifier, normalize
from i18ncheck.checker.context import ScopeRules, ValidationContext
from i18ncheck.markup.nodes import Element
from i18ncheck.markup.visitor import MarkupVisitor
from i18ncheck.models.config import CheckerConfig
from i18ncheck.models.problems import Problem, ProblemKind
from i18ncheck.parser.loader import MarkupLoader

logger = logging.getLogger("i18ncheck.checker")


class I18nValidator:
    """Checks markup trees for text that is not covered by a marker attribute.

    One instance serves a whole run; it holds only read-only configuration,
    so files can be validated concurrently.
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        loader: MarkupLoader | None = None,
        classifier: TextClassifier | None = None,
    ) -> None:
        self._config = config or CheckerConfig()
        self._loader = loader or MarkupLoader()
        self._classifier = classifier or TextClassifier()
        self._scope = ScopeRules(self._config)

    @property
    def config(self) -> CheckerConfig:
        return self._config

    def process_file(self, file_name: str, markup: str) -> list[Problem]:
        """Parse *markup* and return its problems in document order."""
        root = self._loader.load_string(markup, file_name)
        return self.validate(file_name, root)

    def validate(self, file_name: str, root: Element) -> list[Problem]:
        """Walk an already-built tree and return its problems in document order."""
        walker = _ProblemWalker(file_name, self._config, self._scope, self._classifier)
        walker.visit(root, ValidationContext())
        logger.debug("%s: %d problem(s)", file_name, len(walker.problems))
        return walker.problems


class _ProblemWalker(MarkupVisitor):
    """Depth-first, pre-order walk collecting the problems of one file."""

    def __init__(
        self,
        file_name: str,
        config: CheckerConfig,
        scope: ScopeRules,
        classifier: TextClassifier,
    ) -> None:
        self.file_name = file_name
        self.problems: list[Problem] = []
        self._config = config
        self._scope = scope
        self._classifier = classifier

    def visit_element(self, node: Element, parent: ValidationContext) -> None:
        ctx = self._scope.enter(parent, node)
        if ctx.suppressed:
            if not parent.suppressed:
                logger.debug(
                    "%s:%d: <%s> %s, skipping subtree",
                    self.file_name,
                    node.line,
                    node.tag,
                    "disabled" if ctx.disabled else "ignored",
                )
            for child in node.child_elements:
                self.visit(child, ctx)
            return

        attr_name = self._config.attr_name
        if node.has_attr(attr_name):
            ctx = self._check_marker(node, node.attrs[attr_name], ctx)
        elif not ctx.covered:
            self._check_texts(node)

        for child in node.child_elements:
            self.visit(child, ctx)

    def _check_marker(
        self, node: Element, value: str, ctx: ValidationContext
    ) -> ValidationContext:
        if ctx.covered:
            # Already reported as nested at the enclosing marker.
            return ctx
        if not self._config.matches_format(value):
            self._report(node, value, ProblemKind.FORMAT)
            return ctx
        inner = self._find_inner_marker(node)
        if inner is not None:
            logger.debug(
                "%s:%d: marker %r encloses marker at line %d",
                self.file_name,
                node.line,
                value,
                inner.line,
            )
            self._report(node, value, ProblemKind.NESTED)
        return ctx.covered_by(value, node.line)

    def _check_texts(self, node: Element) -> None:
        for text in node.texts:
            if self._classifier.is_meaningful(text.content):
                self._report(node, normalize(text.content), ProblemKind.MISSING)

    def _find_inner_marker(self, node: Element) -> Element | None:
        """Return the first descendant carrying the marker attribute.

        Disabled and ignored subtrees are not searched.
        """
        for child in node.child_elements:
            if self._scope.excludes(child):
                continue
            if child.has_attr(self._config.attr_name):
                return child
            found = self._find_inner_marker(child)
            if found is not None:
                return found
        return None

    def _report(self, node: Element, meta: str, kind: ProblemKind) -> None:
        self.problems.append(
            Problem(file_name=self.file_name, line=node.line, meta=meta, problem=kind)
        )
