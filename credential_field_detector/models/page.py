"""
Page model - Page-level detection result.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import List, Dict, Any, Optional
from datetime import datetime
import json
from .form import LoginFormRecord


@dataclass
class LoginPageAnalysis:
    """Login forms detected on one page."""

    url: Optional[str] = None

    login_forms: List[LoginFormRecord] = dataclass_field(default_factory=list)

    # Statistics
    total_password_fields: int = 0
    total_username_fields: int = 0

    # Metadata
    notes: List[str] = dataclass_field(default_factory=list)
    timestamp: str = dataclass_field(default_factory=lambda: datetime.now().isoformat())
    analysis_duration_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'url': self.url,
            'login_forms': [record.to_dict() for record in self.login_forms],
            'total_password_fields': self.total_password_fields,
            'total_username_fields': self.total_username_fields,
            'notes': list(self.notes),
            'timestamp': self.timestamp,
            'analysis_duration_ms': self.analysis_duration_ms,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save_to_file(self, filepath: str):
        """Save analysis to JSON file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self.to_json())

    def has_login_form(self) -> bool:
        """Check if any password field was paired with a username field."""
        return any(record.has_username() for record in self.login_forms)

    def summary(self) -> str:
        """Get a human-readable summary."""
        return (
            f"Login Field Summary\n"
            f"{'='*50}\n"
            f"URL: {self.url or 'N/A'}\n"
            f"Login Forms: {len(self.login_forms)}\n"
            f"Password Fields: {self.total_password_fields}\n"
            f"Username Fields: {self.total_username_fields}\n"
            f"Analysis Time: {self.analysis_duration_ms:.2f}ms\n"
            f"{'='*50}\n"
        )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LoginPageAnalysis(url={self.url}, forms={len(self.login_forms)}, "
            f"passwords={self.total_password_fields})"
        )
