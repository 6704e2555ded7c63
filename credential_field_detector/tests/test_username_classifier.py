"""
Tests for username field classification.
"""

import pytest

from credential_field_detector import HtmlDocument, is_username_field
from credential_field_detector.analyzer.normalizer import strip_non_alphanumeric
from credential_field_detector.analyzer.username_classifier import USERNAME_NAMES, UsernameClassifier
from credential_field_detector.models.field import FieldNode


def _only_field(html):
    fields = HtmlDocument(html).query_fields()
    assert len(fields) == 1
    return fields[0]


@pytest.mark.parametrize("attrs", [
    {"name": "username"},
    {"id": "user_id"},
    {"name": "loginId"},
    {"placeholder": "Customer ID"},
    {"name": "Benutzer-Name"},
    {"aria_label": "E-Mail-Adresse"},
    {"name": "cargo_login"},
])
def test_username_vocabulary(attrs):
    assert is_username_field(FieldNode(kind="text", **attrs))


def test_email_and_tel_kinds():
    assert is_username_field(FieldNode(kind="email", name="email"))
    assert is_username_field(FieldNode(kind="tel", name="login"))


@pytest.mark.parametrize("kind", ["hidden", "submit", "checkbox", "radio", "number", "password", "textarea"])
def test_other_kinds_are_rejected(kind):
    assert not is_username_field(FieldNode(kind=kind, name="username"))


def test_search_query_is_never_a_username():
    field = FieldNode(kind="text", id="search-query", name="username", aria_label="Email")
    assert not is_username_field(field)
    assert UsernameClassifier.is_search_field(field)


@pytest.mark.parametrize("attrs", [
    {"id": "siteSearch", "name": "login"},
    {"name": "go", "placeholder": "Email"},
    {"placeholder": "Find a user name"},
])
def test_search_words_reject(attrs):
    assert not is_username_field(FieldNode(kind="text", **attrs))


def test_search_word_inside_a_longer_word_is_not_a_search_field():
    field = FieldNode(kind="text", name="logo_login")
    assert not UsernameClassifier.is_search_field(field)
    assert is_username_field(field)


def test_username_must_precede_password():
    email = FieldNode(kind="text", name="email", document_order_index=3)
    password = FieldNode(kind="password", name="password", document_order_index=5)
    later = FieldNode(kind="text", name="email", document_order_index=7)
    same = FieldNode(kind="text", name="email", document_order_index=5)

    assert is_username_field(email, password)
    assert not is_username_field(later, password)
    assert not is_username_field(same, password)


def test_disabled_and_missing_fields():
    assert not is_username_field(None)
    assert not is_username_field(FieldNode(kind="text", name="username", disabled=True))


def test_unrelated_text_field():
    assert not is_username_field(FieldNode(kind="text", name="firstname"))
    assert not is_username_field(FieldNode(kind="email", name="contact"))


def test_explicit_label_is_matched():
    html = '<label for="f1">Login ID</label><input type="text" id="f1" name="f1">'
    assert is_username_field(_only_field(html))


def test_enclosing_label_is_matched():
    html = '<label>Customer ID <input type="tel" name="cid"></label>'
    assert is_username_field(_only_field(html))


def test_label_search_word_does_not_reject():
    """Search words are only looked for in type, name, id and placeholder."""
    html = '<label>Find your account: Email <input type="text" name="acct"></label>'
    assert is_username_field(_only_field(html))


def test_malformed_order_index_does_not_precede():
    field = FieldNode(kind="text", name="email", document_order_index=None)
    password = FieldNode(kind="password", document_order_index=5)
    assert not is_username_field(field, password)


@pytest.mark.parametrize("kind", [{"type": "text"}, ["text"], None, 3])
def test_non_string_kind_is_rejected(kind):
    assert not is_username_field(FieldNode(kind=kind, name="username"))


def test_non_field_password_context_is_rejected():
    field = FieldNode(kind="text", name="email", document_order_index=3)
    assert not is_username_field(field, {"document_order_index": 5})
    assert not is_username_field(field, "password")


def test_vocabulary_is_stored_alphanumeric_only():
    assert "emailaddress" in USERNAME_NAMES
    assert "benutzerid" in USERNAME_NAMES
    assert all(name == strip_non_alphanumeric(name) for name in USERNAME_NAMES)
