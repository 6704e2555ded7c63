"""
Field Detector - Run the classifiers over every field of a document.
"""

from typing import List, Optional
from credential_field_detector.models.document import FieldDocument
from credential_field_detector.models.field import FieldNode
from credential_field_detector.analyzer.password_classifier import PasswordClassifier
from credential_field_detector.analyzer.username_classifier import UsernameClassifier
from credential_field_detector.utils.logger import logger


class FieldDetector:
    """Detects credential fields in a document."""

    @staticmethod
    def detect_password_fields(document: FieldDocument) -> List[FieldNode]:
        """
        Detect password fields in document order.

        Args:
            document: Document to search in

        Returns:
            List of password FieldNodes
        """
        fields = [f for f in document.query_fields() if PasswordClassifier.is_password_field(f)]
        logger.debug(f"Password fields detected: {len(fields)}")
        return fields

    @staticmethod
    def detect_username_fields(
        document: FieldDocument,
        password_field: Optional[FieldNode] = None
    ) -> List[FieldNode]:
        """
        Detect username fields in document order.

        Args:
            document: Document to search in
            password_field: Optional password field; only fields before it qualify

        Returns:
            List of username FieldNodes
        """
        fields = [
            f for f in document.query_fields()
            if UsernameClassifier.is_username_field(f, password_field)
        ]
        logger.debug(f"Username fields detected: {len(fields)}")
        return fields
