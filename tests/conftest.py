"""Pytest configuration and shared fixtures for the textview test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from textview.model import InlineTextStyle, LinkMark, Paragraph, TextNode

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def bold() -> InlineTextStyle:
    return InlineTextStyle(bold=True)


@pytest.fixture
def italic() -> InlineTextStyle:
    return InlineTextStyle(italic=True)


@pytest.fixture
def link_paragraph() -> Paragraph:
    """Paragraph ``"see docs now"`` with ``"docs"`` linked to https://example.com/docs."""
    paragraph = Paragraph()
    paragraph.push_str("see ")
    paragraph.push(TextNode.styled("docs", InlineTextStyle(link=LinkMark(url="https://example.com/docs"))))
    paragraph.push_str(" now")
    return paragraph
