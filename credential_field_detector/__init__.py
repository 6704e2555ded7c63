"""Credential Field Detector - locate password and username fields in web forms."""

from .detector import (
    detect_password_fields,
    detect_username_fields,
    is_password_field,
    is_username_field,
    find_username_for_password,
    get_login_forms,
)
from .dom.html_document import HtmlDocument
from .models import FieldNode, FormRef, LoginFormRecord, FieldDocument, LoginPageAnalysis

__all__ = [
    'detect_password_fields',
    'detect_username_fields',
    'is_password_field',
    'is_username_field',
    'find_username_for_password',
    'get_login_forms',
    'HtmlDocument',
    'FieldNode',
    'FormRef',
    'LoginFormRecord',
    'FieldDocument',
    'LoginPageAnalysis',
]
