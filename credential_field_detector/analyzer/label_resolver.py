"""
Label Resolver - Recover the human-readable label of a field.
"""

from credential_field_detector.models.field import FieldNode


class LabelResolver:
    """Finds label text through the field's owning document."""

    @staticmethod
    def resolve(field: FieldNode) -> str:
        """
        Get the label text for a field.

        Checks ``label[for=id]`` first, then an enclosing ``<label>``.

        Args:
            field: FieldNode to resolve

        Returns:
            Label text, or an empty string when there is none
        """
        document = field.document if field is not None else None
        if document is None:
            return ''

        if isinstance(field.id, str) and field.id:
            label_text = document.label_text_for(field.id)
            if label_text is not None:
                return label_text

        return document.enclosing_label_text(field) or ''
