"""
Shared fixtures for the detector tests.
"""

from dataclasses import replace
from typing import Dict, Iterable, Optional

import pytest

from credential_field_detector.models.document import FieldDocument
from credential_field_detector.models.field import FieldNode
from credential_field_detector.models.form import FormRef


class StaticDocument(FieldDocument):
    """Document over a fixed list of nodes, for index-driven scenarios."""

    def __init__(self, fields: Iterable[FieldNode], labels: Optional[Dict[str, str]] = None):
        self.fields = list(fields)
        self.labels = labels or {}

    def query_fields(self):
        return [replace(f, document=self) for f in self.fields]

    def label_text_for(self, field_id):
        return self.labels.get(field_id)

    def enclosing_label_text(self, field):
        return None

    def enclosing_form(self, field):
        return field.form_ref


@pytest.fixture
def static_document():
    """Factory building a StaticDocument from nodes."""
    return StaticDocument


@pytest.fixture
def login_form_ref():
    return FormRef(document_order_index=1, form_id="login", action="/session", method="post")


@pytest.fixture
def login_html():
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Sign in</title></head>
    <body>
        <form id="search" action="/search">
            <input type="text" name="q" placeholder="Search the site">
        </form>
        <form id="login-form" action="/session" method="POST">
            <label for="email">E-Mail address</label>
            <input type="email" id="email" name="email">
            <input type="password" id="password" name="password">
            <input type="text" name="password_hint">
            <button type="submit">Sign in</button>
        </form>
    </body>
    </html>
    """
