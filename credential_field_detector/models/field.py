"""
Field model - Read-only view of one input-like element.
Nodes are built fresh by a document on every query and discarded after use.
"""

from dataclasses import dataclass, field as dataclass_field, fields
from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .document import FieldDocument
    from .form import FormRef


@dataclass
class FieldNode:
    """Input-like element as seen by the classifiers."""

    # input type for <input>, tag name otherwise
    kind: str
    tag_name: str = "input"

    # Identifiers
    id: Optional[str] = None
    name: Optional[str] = None

    # Labels and hints
    placeholder: Optional[str] = None
    aria_label: Optional[str] = None

    disabled: bool = False

    # Position among all elements of the snapshot
    document_order_index: int = 0

    # Enclosing <form>, if any
    form_ref: Optional['FormRef'] = None

    # Owning snapshot and provider handle, used for lazy label lookups
    document: Optional['FieldDocument'] = dataclass_field(default=None, compare=False, repr=False)
    handle: Any = dataclass_field(default=None, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (without document references)."""
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ('document', 'handle', 'form_ref')
        }
        data['form_ref'] = self.form_ref.to_dict() if self.form_ref else None
        return data

    def precedes(self, other: 'FieldNode') -> bool:
        """Check if this field comes before ``other`` in document order."""
        mine, theirs = self.document_order_index, other.document_order_index
        if not isinstance(mine, int) or not isinstance(theirs, int):
            return False
        return mine < theirs

    def __repr__(self) -> str:
        """String representation."""
        label = self.id or self.name or self.placeholder or self.tag_name
        return f"FieldNode({self.tag_name}[{self.kind}] #{self.document_order_index} - {label})"
