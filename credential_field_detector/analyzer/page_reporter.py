"""
Page Reporter - Summarize the login forms of one document.
"""

from typing import Optional
from credential_field_detector.models.document import FieldDocument
from credential_field_detector.models.page import LoginPageAnalysis
from credential_field_detector.analyzer.form_assembler import FormAssembler
from credential_field_detector.utils.logger import logger


class PageReporter:
    """Builds page-level analysis from the form assembler's records."""

    @staticmethod
    def build(document: FieldDocument, url: Optional[str] = None) -> LoginPageAnalysis:
        """
        Detect login forms and collect statistics.

        Args:
            document: Document to analyze
            url: Page URL, reported as-is

        Returns:
            LoginPageAnalysis object
        """
        logger.step(5, "Detecting password fields and pairing usernames")
        records = FormAssembler.get_login_forms(document)

        username_indexes = {
            record.username_field.document_order_index
            for record in records if record.has_username()
        }

        analysis = LoginPageAnalysis(
            url=url,
            login_forms=records,
            total_password_fields=len(records),
            total_username_fields=len(username_indexes),
        )

        for record in records:
            if not record.has_username():
                analysis.notes.append(
                    f"No username field precedes password field "
                    f"#{record.password_field.document_order_index}"
                )

        if not records:
            logger.warning("No password fields found")
            analysis.notes.append("No password fields found")

        logger.metric("Password fields", analysis.total_password_fields)
        logger.metric("Username fields", analysis.total_username_fields)
        logger.success(f"Login forms detected: {len(records)}")
        return analysis
