"""
Browser profiles used when loading live pages.
Provides user agents, viewport configurations, and browser arguments.
"""

from typing import Dict, Any


class BrowserProfiles:
    """Browser configuration profiles."""

    USER_AGENTS = {
        'desktop_chrome': (
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
            'AppleWebKit/537.36 (KHTML, like Gecko) '
            'Chrome/120.0.0.0 Safari/537.36'
        ),
        'mobile_chrome': (
            'Mozilla/5.0 (Linux; Android 13) '
            'AppleWebKit/537.36 (KHTML, like Gecko) '
            'Chrome/120.0.6099.144 Mobile Safari/537.36'
        ),
    }

    VIEWPORTS = {
        'desktop': {'width': 1920, 'height': 1080},
        'mobile': {'width': 375, 'height': 667},
    }

    # Login pages are only read, never submitted
    BROWSER_ARGS = [
        '--disable-dev-shm-usage',
        '--no-sandbox',
        '--disable-setuid-sandbox',
    ]

    @classmethod
    def get_profile(cls, profile_name: str = 'desktop_chrome') -> Dict[str, Any]:
        """
        Get a complete browser profile configuration.

        Args:
            profile_name: Name of the profile (desktop_chrome, mobile_chrome)

        Returns:
            Dictionary with user_agent, viewport, and args
        """
        viewport_type = 'mobile' if 'mobile' in profile_name else 'desktop'

        return {
            'user_agent': cls.USER_AGENTS.get(profile_name, cls.USER_AGENTS['desktop_chrome']),
            'viewport': cls.VIEWPORTS[viewport_type],
            'args': list(cls.BROWSER_ARGS),
        }

    @classmethod
    def get_headers(cls) -> Dict[str, str]:
        """Get common HTTP headers."""
        return {
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9,de;q=0.8',
        }
