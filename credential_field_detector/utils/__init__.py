"""Utility functions for Credential Field Detector."""

from .logger import logger, DetectorLogger
from .wait_utils import WaitUtils

__all__ = ['logger', 'DetectorLogger', 'WaitUtils']
