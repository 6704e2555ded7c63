"""
Form models - Enclosing form identity and login form records.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any
from .field import FieldNode


@dataclass(frozen=True)
class FormRef:
    """Identity of one <form> element within a snapshot."""

    document_order_index: int
    form_id: Optional[str] = None
    action: Optional[str] = None
    method: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class LoginFormRecord:
    """A password field paired with its username field and form metadata."""

    password_field: FieldNode
    username_field: Optional[FieldNode] = None
    form_ref: Optional[FormRef] = None
    form_action: Optional[str] = None
    form_method: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'password_field': self.password_field.to_dict(),
            'username_field': self.username_field.to_dict() if self.username_field else None,
            'form_ref': self.form_ref.to_dict() if self.form_ref else None,
            'form_action': self.form_action,
            'form_method': self.form_method,
        }

    def has_username(self) -> bool:
        """Check if a username field was paired."""
        return self.username_field is not None

    def __repr__(self) -> str:
        """String representation."""
        form = self.form_ref.form_id if self.form_ref else None
        return (
            f"LoginFormRecord(form={form}, password={self.password_field!r}, "
            f"username={self.username_field!r})"
        )
