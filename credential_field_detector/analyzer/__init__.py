"""Analyzer package for Credential Field Detector."""

from .password_classifier import PasswordClassifier
from .username_classifier import UsernameClassifier
from .label_resolver import LabelResolver
from .field_detector import FieldDetector
from .form_assembler import FormAssembler
from .page_reporter import PageReporter

__all__ = [
    'PasswordClassifier',
    'UsernameClassifier',
    'LabelResolver',
    'FieldDetector',
    'FormAssembler',
    'PageReporter',
]
