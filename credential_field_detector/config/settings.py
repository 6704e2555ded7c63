"""
Configuration settings for the Credential Field Detector.
Controls browser behavior, timeouts, and the detection vocabularies.
"""

from typing import Dict, Any, FrozenSet, Tuple


class Settings:
    """Central configuration for the detector."""

    # Browser settings
    HEADLESS: bool = True

    # Timeouts (in milliseconds)
    PAGE_LOAD_TIMEOUT: int = 30000  # 30 seconds
    NETWORK_IDLE_TIMEOUT: int = 2000  # 2 seconds
    JS_EXECUTION_BUFFER: int = 1000  # 1 second additional wait for JS frameworks

    # HTML parsing
    HTML_PARSER: str = "html.parser"
    FIELD_TAGS: Tuple[str, ...] = ('input', 'textarea')

    # Password detection
    PASSWORD_MARKER: str = "password"

    # Matched verbatim against separator-stripped values
    PASSWORD_EXCLUDE_TERMS: Tuple[str, ...] = (
        "hint", "captcha", "findanything", "forgot", "totp", "totpcode", "2facode",
        "mfacode", "otc-code", "onetimecode", "otp-code", "otpcode", "security_code",
        "twofactor", "twofa", "twofactorcode", "verificationcode", "verification code",
    )

    # Username detection (English / German)
    USERNAME_FIELD_NAMES: Tuple[str, ...] = (
        "username", "user name", "userid", "user id", "customer id", "login id", "login",
        "benutzername", "benutzer name", "benutzerid", "benutzer id",
        "email", "email address", "e-mail", "e-mail address",
        "email adresse", "e-mail adresse",
    )

    USERNAME_INPUT_TYPES: Tuple[str, ...] = ('text', 'email', 'tel')

    EXCLUDED_INPUT_TYPES: FrozenSet[str] = frozenset({
        'hidden', 'submit', 'reset', 'button', 'image', 'file', 'radio', 'checkbox'
    })

    SEARCH_FIELD_WORDS: FrozenSet[str] = frozenset({'search', 'query', 'find', 'go'})

    # Logging
    LOG_LEVEL: str = "INFO"
    DEBUG_MODE: bool = False

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            key: value for key, value in cls.__dict__.items()
            if not key.startswith('_') and not callable(value)
            and not isinstance(value, classmethod)
        }

    @classmethod
    def update(cls, **kwargs):
        """Update settings dynamically."""
        for key, value in kwargs.items():
            if hasattr(cls, key.upper()):
                setattr(cls, key.upper(), value)
