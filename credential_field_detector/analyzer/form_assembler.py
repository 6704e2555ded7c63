"""
Form Assembler - Pair password fields with their username fields.
"""

from typing import List, Optional
from credential_field_detector.models.document import FieldDocument
from credential_field_detector.models.field import FieldNode
from credential_field_detector.models.form import LoginFormRecord
from credential_field_detector.analyzer.field_detector import FieldDetector
from credential_field_detector.utils.logger import logger


class FormAssembler:
    """Groups detected credential fields into login form records."""

    @staticmethod
    def find_username_for_password(
        password_field: FieldNode,
        document: FieldDocument
    ) -> Optional[FieldNode]:
        """
        Find the best username field for a password field.

        The closest username field before the password field wins. When the
        password field sits in a <form>, only fields of that form qualify.

        Args:
            password_field: The password field
            document: Document to search in

        Returns:
            The matching username field, or None
        """
        if password_field is None:
            return None

        form = document.enclosing_form(password_field)
        candidates = FieldDetector.detect_username_fields(document, password_field)

        if form is not None:
            candidates = [c for c in candidates if c.form_ref == form]

        if not candidates:
            logger.debug(f"No username field for {password_field!r}")
            return None

        return max(candidates, key=lambda c: c.document_order_index)

    @staticmethod
    def get_login_forms(document: FieldDocument) -> List[LoginFormRecord]:
        """
        Build one login form record per password field.

        Args:
            document: Document to analyze

        Returns:
            List of LoginFormRecord objects in document order
        """
        records = []

        for password_field in FieldDetector.detect_password_fields(document):
            username_field = FormAssembler.find_username_for_password(password_field, document)
            form = document.enclosing_form(password_field)

            records.append(LoginFormRecord(
                password_field=password_field,
                username_field=username_field,
                form_ref=form,
                form_action=form.action if form else None,
                form_method=form.method if form else None,
            ))

        logger.debug(f"Login form records built: {len(records)}")
        return records
