"""
Tests for pairing password fields with username fields.
"""

from credential_field_detector import (
    HtmlDocument,
    detect_username_fields,
    find_username_for_password,
    get_login_forms,
    is_username_field,
)
from credential_field_detector.models.field import FieldNode


def test_email_before_password_is_paired(static_document, login_form_ref):
    email = FieldNode(kind="text", name="email", document_order_index=3, form_ref=login_form_ref)
    password = FieldNode(kind="password", name="password", document_order_index=5, form_ref=login_form_ref)
    document = static_document([email, password])

    assert is_username_field(email, password)

    [record] = get_login_forms(document)
    assert record.password_field == password
    assert record.username_field == email
    assert record.form_ref == login_form_ref
    assert record.form_action == "/session"
    assert record.form_method == "post"


def test_closest_preceding_candidate_wins(static_document):
    first = FieldNode(kind="text", name="login", document_order_index=2)
    second = FieldNode(kind="email", name="email", document_order_index=4)
    password = FieldNode(kind="password", document_order_index=5)
    after = FieldNode(kind="text", name="username", document_order_index=6)
    document = static_document([first, second, password, after])

    assert find_username_for_password(password, document) == second


def test_username_outside_the_form_is_ignored():
    html = """
        <input type="text" name="username">
        <form action="/login">
            <input type="password" name="password">
        </form>
    """
    document = HtmlDocument(html)

    [record] = get_login_forms(document)
    assert record.username_field is None
    assert len(detect_username_fields(document, record.password_field)) == 1


def test_password_outside_any_form_uses_all_candidates():
    html = '<div><input name="user_name"></div><div><input type="password"></div>'
    [record] = get_login_forms(HtmlDocument(html))

    assert record.username_field is not None
    assert record.username_field.name == "user_name"
    assert record.form_ref is None
    assert record.form_action is None
    assert record.form_method is None


def test_login_page(login_html):
    document = HtmlDocument(login_html, url="https://example.com/login")

    [record] = get_login_forms(document)
    assert record.password_field.id == "password"
    assert record.username_field.id == "email"
    assert record.form_action == "https://example.com/session"
    assert record.form_method == "post"


def test_each_form_gets_its_own_pairing():
    html = """
        <form id="signin">
            <input type="email" name="email">
            <input type="password" name="password">
        </form>
        <form id="signup">
            <input type="text" name="new_username">
            <input type="password" name="new_password">
            <input type="password" name="password_confirm">
        </form>
    """
    records = get_login_forms(HtmlDocument(html))

    assert [r.password_field.name for r in records] == ["password", "new_password", "password_confirm"]
    assert [r.username_field.name for r in records] == ["email", "new_username", "new_username"]
    assert [r.form_ref.form_id for r in records] == ["signin", "signup", "signup"]


def test_password_without_username():
    [record] = get_login_forms(HtmlDocument('<form><input type="password"><input name="email"></form>'))
    assert record.username_field is None
    assert not record.has_username()


def test_search_box_is_not_paired():
    html = '<form><input name="email" id="newsletter-search"><input type="password"></form>'
    [record] = get_login_forms(HtmlDocument(html))
    assert record.username_field is None


def test_detect_username_fields_without_password_context(login_html):
    names = [f.name for f in detect_username_fields(HtmlDocument(login_html))]
    assert names == ["email"]


def test_no_password_fields():
    assert get_login_forms(HtmlDocument('<form><input name="username"></form>')) == []


def test_record_serialization(login_html):
    [record] = get_login_forms(HtmlDocument(login_html))
    data = record.to_dict()

    assert data["password_field"]["name"] == "password"
    assert data["username_field"]["name"] == "email"
    assert data["form_ref"]["form_id"] == "login-form"
    assert "document" not in data["password_field"]
