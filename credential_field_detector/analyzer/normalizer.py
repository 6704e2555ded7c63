"""
Text normalization for attribute matching.

Password rules and username rules normalize differently:
password checks strip separators only, username checks keep ASCII letters
and digits only. The two are not interchangeable.
"""

import re
from typing import Any, List

_SEPARATORS = re.compile(r'[\s_-]')
_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]+')
_CAMEL_BOUNDARY = re.compile(r'([a-z])([A-Z])')
_NON_LETTERS = re.compile(r'[^a-z]+')


def present_values(*values: Any) -> List[str]:
    """Keep non-empty string values; anything else counts as absent."""
    return [value for value in values if isinstance(value, str) and value]


def strip_separators(value: str) -> str:
    """Lowercase and remove whitespace, underscores and hyphens."""
    return _SEPARATORS.sub('', value.lower())


def strip_non_alphanumeric(value: str) -> str:
    """Lowercase and drop every character that is not a letter or digit."""
    return _NON_ALPHANUMERIC.sub('', value.lower())


def split_words(value: str) -> List[str]:
    """
    Split an attribute value into lowercase words.

    ``searchQuery`` -> ``['search', 'query']``, ``site-search_box`` ->
    ``['site', 'search', 'box']``.
    """
    spaced = _CAMEL_BOUNDARY.sub(r'\1 \2', value).lower()
    return [word for word in _NON_LETTERS.split(spaced) if word]
