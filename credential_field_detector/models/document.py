"""
Document abstraction consumed by the classifiers.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from .field import FieldNode
from .form import FormRef


class FieldDocument(ABC):
    """
    Queryable snapshot of a page's field tree.

    Implementations must traverse the underlying tree on every call so that
    results follow changes made between calls.
    """

    @abstractmethod
    def query_fields(self) -> List[FieldNode]:
        """Return all input and textarea nodes in document order."""

    @abstractmethod
    def label_text_for(self, field_id: str) -> Optional[str]:
        """Return the text of the label associated with ``field_id``, if any."""

    @abstractmethod
    def enclosing_label_text(self, field: FieldNode) -> Optional[str]:
        """Return the text of the nearest label enclosing ``field``, if any."""

    @abstractmethod
    def enclosing_form(self, field: FieldNode) -> Optional[FormRef]:
        """Return the nearest form enclosing ``field``, if any."""
