"""
Page Loader - Load URL and wait for stabilization.
"""

from typing import Optional
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError
from credential_field_detector.config.settings import Settings
from credential_field_detector.utils.wait_utils import WaitUtils
from credential_field_detector.utils.logger import logger


class PageLoader:
    """Handles page loading and stabilization."""

    @staticmethod
    def validate_url(url: str) -> str:
        """
        Reject anything that is not an http(s) URL.

        Raises:
            ValueError: If the URL scheme is not http or https
        """
        if not isinstance(url, str) or not url.startswith(('http://', 'https://')):
            raise ValueError(f"Invalid URL: {url}. Must start with http:// or https://")
        return url

    @staticmethod
    async def load(
        page: Page,
        url: str,
        wait_for_stability: bool = True,
        timeout: Optional[int] = None
    ) -> Page:
        """
        Load URL and wait for page stabilization.

        Args:
            page: Playwright page object
            url: URL to load (as-is, no modification)
            wait_for_stability: Whether to wait for page stability
            timeout: Optional timeout override

        Returns:
            Loaded and stabilized page
        """
        PageLoader.validate_url(url)

        logger.step(3, "Loading page and waiting for stabilization")

        timeout = timeout or Settings.PAGE_LOAD_TIMEOUT

        try:
            logger.debug(f"Navigating to {url}")
            await page.goto(url, wait_until='domcontentloaded', timeout=timeout)
        except PlaywrightTimeoutError as e:
            logger.error(f"Page load timeout: {url}")
            raise TimeoutError(f"Failed to load {url} within {timeout}ms") from e

        if wait_for_stability:
            if await WaitUtils.wait_for_stability(page, timeout):
                logger.success("Page loaded and stabilized")
            else:
                logger.warning("Page may not be fully stabilized")
        else:
            logger.info("Page loaded (stability wait skipped)")

        return page
