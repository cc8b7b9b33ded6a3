"""Shared test fixtures for i18ncheck."""

from __future__ import annotations

import re

import pytest

from i18ncheck.checker.classifier import TextClassifier
from i18ncheck.checker.validator import I18nValidator
from i18ncheck.models.config import CheckerConfig
from i18ncheck.parser.config_loader import ConfigLoader
from i18ncheck.parser.loader import MarkupLoader

DISABLE = "<!-- i18ncheck:disable -->"


@pytest.fixture
def config() -> CheckerConfig:
    """The rules used throughout the examples: ``word:word`` markers, ``<code>`` ignored."""
    return CheckerConfig(attr_pattern=re.compile(r"\w+:\w+"), ignore_tags=frozenset({"code"}))


@pytest.fixture
def loader() -> MarkupLoader:
    return MarkupLoader()


@pytest.fixture
def classifier() -> TextClassifier:
    return TextClassifier()


@pytest.fixture
def validator(config: CheckerConfig) -> I18nValidator:
    return I18nValidator(config)


@pytest.fixture
def config_loader() -> ConfigLoader:
    return ConfigLoader()


SAMPLE_TEMPLATE = """\
<!DOCTYPE html>
<div class="card">
  <h1 i18n="Card:Title">Welcome back</h1>
  <p>
    Your balance is {{ balance | currency }}
  </p>
  <p i18n="Card:Help">
    Need help? <a href="/help">Contact support</a>
  </p>
  <footer i18n="Footer">(c) Example</footer>
  <code>npm install example</code>
  <section>
    <!-- i18ncheck:disable -->
    <span>Internal build {{ build }}</span>
  </section>
  <span>{{ user.name }}</span> <span>https://example.com</span>
  <div i18n="Outer:Block">
    Outer text
    <em i18n="Inner:Emphasis">inner</em>
  </div>
</div>
"""
