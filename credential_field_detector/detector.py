"""
Public detection entry points.

Every function takes the document explicitly and walks it again on each
call; nothing is cached between calls.
"""

from typing import List, Optional
from credential_field_detector.models.document import FieldDocument
from credential_field_detector.models.field import FieldNode
from credential_field_detector.models.form import LoginFormRecord
from credential_field_detector.analyzer.field_detector import FieldDetector
from credential_field_detector.analyzer.form_assembler import FormAssembler
from credential_field_detector.analyzer.password_classifier import PasswordClassifier
from credential_field_detector.analyzer.username_classifier import UsernameClassifier


def detect_password_fields(document: FieldDocument) -> List[FieldNode]:
    """Return every password field of ``document`` in document order."""
    return FieldDetector.detect_password_fields(document)


def detect_username_fields(
    document: FieldDocument,
    password_field: Optional[FieldNode] = None
) -> List[FieldNode]:
    """Return every username field, optionally only those before ``password_field``."""
    return FieldDetector.detect_username_fields(document, password_field)


def is_password_field(field: Optional[FieldNode]) -> bool:
    return PasswordClassifier.is_password_field(field)


def is_username_field(field: Optional[FieldNode], password_field: Optional[FieldNode] = None) -> bool:
    return UsernameClassifier.is_username_field(field, password_field)


def find_username_for_password(password_field: FieldNode, document: FieldDocument) -> Optional[FieldNode]:
    """Return the closest username field before ``password_field``, or None."""
    return FormAssembler.find_username_for_password(password_field, document)


def get_login_forms(document: FieldDocument) -> List[LoginFormRecord]:
    """Return one login form record per password field."""
    return FormAssembler.get_login_forms(document)
