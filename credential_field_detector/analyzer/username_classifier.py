"""
Username Classifier - Decide whether a field holds a username or login identifier.
"""

from typing import Optional
from credential_field_detector.models.field import FieldNode
from credential_field_detector.config.settings import Settings
from credential_field_detector.analyzer.label_resolver import LabelResolver
from credential_field_detector.analyzer.normalizer import (
    present_values,
    split_words,
    strip_non_alphanumeric,
)
from credential_field_detector.utils.logger import logger

# Vocabulary in the same form as the attributes it is compared with
USERNAME_NAMES = tuple(strip_non_alphanumeric(name) for name in Settings.USERNAME_FIELD_NAMES)


class UsernameClassifier:
    """Classifies fields as username / identifier fields."""

    @staticmethod
    def is_username_field(field: Optional[FieldNode], password_field: Optional[FieldNode] = None) -> bool:
        """
        Check if a field is a username field.

        Classification rules:
        - Must be enabled and of type text, email or tel
        - Must not be a search box
        - Must precede ``password_field`` when one is given
        - Must match the username vocabulary

        Args:
            field: FieldNode to check
            password_field: Optional password field for context

        Returns:
            True if field is a username field
        """
        if field is None or field.disabled or not isinstance(field.kind, str):
            return False

        if field.kind in Settings.EXCLUDED_INPUT_TYPES:
            return False

        if field.kind not in Settings.USERNAME_INPUT_TYPES:
            return False

        if UsernameClassifier.is_search_field(field):
            logger.debug(f"Rejected search field: {field!r}")
            return False

        if password_field is not None and (
            not isinstance(password_field, FieldNode) or not field.precedes(password_field)
        ):
            return False

        return UsernameClassifier.matches_username_pattern(field)

    @staticmethod
    def is_search_field(field: FieldNode) -> bool:
        """Check if type, name, id or placeholder contains a search word."""
        for value in present_values(field.kind, field.name, field.id, field.placeholder):
            if any(word in Settings.SEARCH_FIELD_WORDS for word in split_words(value)):
                return True
        return False

    @staticmethod
    def matches_username_pattern(field: FieldNode) -> bool:
        """Check if any identifying attribute or the label names a login identifier."""
        attributes = present_values(
            field.id,
            field.name,
            field.placeholder,
            LabelResolver.resolve(field),
            field.aria_label,
        )
        for attr in attributes:
            clean_attr = strip_non_alphanumeric(attr)
            if any(clean_attr == name or name in clean_attr for name in USERNAME_NAMES):
                return True
        return False
