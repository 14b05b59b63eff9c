"""pytest configuration and fixtures for html-formgen tests."""

import pytest


@pytest.fixture(autouse=True)
def default_form_config():
    """Run every test against the default configuration."""
    from html_formgen.protocols import reset_form_config

    reset_form_config()
    yield
    reset_form_config()


@pytest.fixture
def make_descriptor():
    """Factory for descriptors with test-friendly defaults."""
    from html_formgen.forms import ParameterDescriptor

    def factory(name="param", **kwargs):
        return ParameterDescriptor(name, **kwargs)

    return factory


@pytest.fixture
def format_descriptor(make_descriptor):
    """Single-choice parameter with a closed set of formats."""
    return make_descriptor("format", allowed_values=("table", "list", "ul"), default="list")


@pytest.fixture
def checkbox_lines():
    """Split a rendered checkbox group into one line per box."""
    def split(html):
        return [line for line in str(html).split("\n") if line]

    return split
