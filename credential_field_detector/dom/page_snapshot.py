"""
Page Snapshot - Capture a live Playwright page as an HtmlDocument.
"""

from playwright.async_api import Page
from credential_field_detector.dom.html_document import HtmlDocument
from credential_field_detector.utils.logger import logger


class PageSnapshot:
    """Turns the current state of a page into a document snapshot."""

    @staticmethod
    async def capture(page: Page) -> HtmlDocument:
        """
        Serialize the page's current DOM.

        Each call takes a new snapshot, so changes made by page scripts
        between calls are picked up.

        Args:
            page: Playwright page object

        Returns:
            HtmlDocument of the page markup
        """
        logger.step(4, "Capturing DOM snapshot")

        markup = await page.content()
        url = page.url if page.url and page.url != 'about:blank' else None
        document = HtmlDocument(markup, url=url)

        logger.metric("Fields in snapshot", len(document.query_fields()))
        return document
