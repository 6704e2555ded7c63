"""Configuration package for Credential Field Detector."""

from .settings import Settings
from .browser_profiles import BrowserProfiles

__all__ = ['Settings', 'BrowserProfiles']
