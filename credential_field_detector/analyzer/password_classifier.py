"""
Password Classifier - Decide whether a field is a password field.
"""

from typing import Optional
from credential_field_detector.models.field import FieldNode
from credential_field_detector.config.settings import Settings
from credential_field_detector.analyzer.normalizer import present_values, strip_separators


class PasswordClassifier:
    """Classifies fields as password fields."""

    @staticmethod
    def is_password_field(field: Optional[FieldNode]) -> bool:
        """
        Check if a field is a password field.

        Rules:
        - Disabled or missing fields never match
        - type="password" matches unless it carries a disqualifying value
        - type="text" matches if it looks like a password and is not disqualified

        Args:
            field: FieldNode to check

        Returns:
            True if field is a password field
        """
        if field is None or field.disabled:
            return False

        if field.kind == 'password':
            return not PasswordClassifier.has_disqualifying_value(field)

        if field.kind == 'text' and PasswordClassifier.looks_like_password(field):
            return not PasswordClassifier.has_disqualifying_value(field)

        return False

    @staticmethod
    def looks_like_password(field: FieldNode) -> bool:
        """Check if id, name or placeholder mentions a password."""
        for value in present_values(field.id, field.name, field.placeholder):
            if Settings.PASSWORD_MARKER in strip_separators(value):
                return True
        return False

    @staticmethod
    def has_disqualifying_value(field: FieldNode) -> bool:
        """
        Check if id, name or placeholder marks the field as a hint, CAPTCHA,
        one-time code or similar non-password secret.
        """
        for value in present_values(field.id, field.name, field.placeholder):
            clean_value = strip_separators(value)
            if any(term in clean_value for term in Settings.PASSWORD_EXCLUDE_TERMS):
                return True
        return False
