"""
Tests for password field classification.
"""

import pytest

from credential_field_detector import is_password_field
from credential_field_detector.analyzer.password_classifier import PasswordClassifier
from credential_field_detector.models.field import FieldNode


@pytest.mark.parametrize("name", [None, "password", "pass", "pwd", "current-password"])
def test_password_type_without_exclusions(name):
    assert is_password_field(FieldNode(kind="password", name=name))


def test_password_hint_is_not_a_password():
    """Contains 'password' but also the 'hint' exclusion."""
    assert not is_password_field(FieldNode(kind="text", name="password_hint"))
    assert not is_password_field(FieldNode(kind="password", name="password_hint"))


def test_disabled_password_field():
    assert not is_password_field(FieldNode(kind="password", name="password", disabled=True))


def test_missing_field():
    assert not is_password_field(None)


@pytest.mark.parametrize("attrs", [
    {"name": "otp_code"},
    {"id": "totp"},
    {"placeholder": "Verification Code"},
    {"name": "captcha_answer"},
    {"id": "twoFactorCode"},
    {"name": "forgotPassword"},
])
def test_code_and_captcha_fields_are_excluded(attrs):
    assert not is_password_field(FieldNode(kind="password", **attrs))


def test_text_field_that_looks_like_a_password():
    assert is_password_field(FieldNode(kind="text", id="user-password"))
    assert is_password_field(FieldNode(kind="text", placeholder="Enter your Password"))


def test_text_field_without_password_marker():
    assert not is_password_field(FieldNode(kind="text", name="passwd"))
    assert not is_password_field(FieldNode(kind="text", name="username"))


def test_other_kinds_never_match():
    assert not is_password_field(FieldNode(kind="email", name="password"))
    assert not is_password_field(FieldNode(kind="textarea", tag_name="textarea", name="password"))


def test_non_string_attributes_are_ignored():
    assert is_password_field(FieldNode(kind="password", name=42))
    assert not is_password_field(FieldNode(kind="text", name=["password"]))


def test_helpers():
    field = FieldNode(kind="text", name="new_password", placeholder="hint")
    assert PasswordClassifier.looks_like_password(field)
    assert PasswordClassifier.has_disqualifying_value(field)
    assert not is_password_field(field)
