from __future__ import annotations

import pytest

from class_select.service import ClassSelect
from class_select.web.app import create_app

CSS = """
/* [custom_class class="my-cls" label="My Class" scope="global, !rich-text" /] */
/* [custom_class class="row-only" label="Row only" scope="row"] */
/* [custom_class class="shadow" label="Shadow" group="Effects"] */
"""


@pytest.fixture
def selector():
    """Class selector over a small stylesheet with an in-memory cache."""
    return ClassSelect(css_source=CSS)


@pytest.fixture
def app(selector):
    """Create a Flask app for testing."""
    application = create_app(selector=selector)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
