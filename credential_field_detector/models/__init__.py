"""Data models for Credential Field Detector."""

from .field import FieldNode
from .form import FormRef, LoginFormRecord
from .document import FieldDocument
from .page import LoginPageAnalysis

__all__ = ['FieldNode', 'FormRef', 'LoginFormRecord', 'FieldDocument', 'LoginPageAnalysis']
