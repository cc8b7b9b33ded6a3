"""Text classification: decides whether a text fragment needs a marker.

Each rule is a standalone predicate over a :class:`TextSample` that returns
``True`` when the text is noise.  :class:`TextClassifier` runs them in a
fixed order and stops at the first rule that fires.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

# Non-greedy, so consecutive segments are removed one by one.
_INTERPOLATION_RE = re.compile(r"\{\{.*?\}\}", re.DOTALL)
_URL_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://\S+$", re.IGNORECASE)
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# No letters of any script; digits, symbols and whitespace are allowed.
_NO_LETTERS_RE = re.compile(r"^[\W\d_]*$")


@dataclass(frozen=True)
class TextSample:
    """A text fragment in the two forms the rules look at.

    ``text`` is entity-decoded and trimmed; ``literal`` is ``text`` with
    every interpolation segment removed, trimmed again.
    """

    text: str
    literal: str

    @classmethod
    def of(cls, raw: str) -> TextSample:
        text = normalize(raw)
        return cls(text=text, literal=strip_interpolations(text).strip())


NoiseRule = Callable[[TextSample], bool]


def normalize(raw: str) -> str:
    """Decode character entities and trim surrounding whitespace."""
    return html.unescape(raw).strip()


def strip_interpolations(text: str) -> str:
    return _INTERPOLATION_RE.sub("", text)


def is_blank(sample: TextSample) -> bool:
    return not sample.text


def is_interpolation_only(sample: TextSample) -> bool:
    return not sample.literal


def is_url(sample: TextSample) -> bool:
    return _URL_RE.match(sample.text) is not None


def is_email(sample: TextSample) -> bool:
    return _EMAIL_RE.match(sample.text) is not None


def is_punctuation_only(sample: TextSample) -> bool:
    return _NO_LETTERS_RE.match(sample.literal) is not None


DEFAULT_RULES: tuple[NoiseRule, ...] = (
    is_blank,
    is_interpolation_only,
    is_url,
    is_email,
    is_punctuation_only,
)


class TextClassifier:
    """Separates user-visible text from whitespace, template and symbol noise."""

    def __init__(self, extra_rules: Sequence[NoiseRule] = ()) -> None:
        self._rules: tuple[NoiseRule, ...] = DEFAULT_RULES + tuple(extra_rules)

    def is_meaningful(self, raw: str) -> bool:
        """Return ``True`` if *raw* is genuine text that requires a marker."""
        sample = TextSample.of(raw)
        return not any(rule(sample) for rule in self._rules)
