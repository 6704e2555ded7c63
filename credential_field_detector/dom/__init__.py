"""Document providers for Credential Field Detector."""

from .html_document import HtmlDocument
from .page_snapshot import PageSnapshot

__all__ = ['HtmlDocument', 'PageSnapshot']
