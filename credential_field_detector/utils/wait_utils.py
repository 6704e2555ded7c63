"""
Waiting strategies for page stabilization.
Login forms are often rendered by JS frameworks after the initial load.
"""

import asyncio
from typing import Optional
from playwright.async_api import Page, Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError
from credential_field_detector.config.settings import Settings
from credential_field_detector.utils.logger import logger


class WaitUtils:
    """Wait utilities for page stabilization."""

    @staticmethod
    async def wait_for_stability(page: Page, timeout: Optional[int] = None) -> bool:
        """
        Wait for page to stabilize.

        Waits for:
        1. Network to become idle
        2. JS execution to finish
        3. DOM mutations to settle

        Args:
            page: Playwright page object
            timeout: Optional timeout in ms

        Returns:
            True if page stabilized, False if timeout
        """
        timeout = timeout or Settings.PAGE_LOAD_TIMEOUT

        if not await WaitUtils.wait_for_network_idle(page, timeout):
            return False

        logger.debug(f"Waiting {Settings.JS_EXECUTION_BUFFER}ms for JS execution...")
        await asyncio.sleep(Settings.JS_EXECUTION_BUFFER / 1000)

        await WaitUtils.wait_for_dom_mutations(page)

        logger.success("Page stabilized")
        return True

    @staticmethod
    async def wait_for_network_idle(page: Page, timeout: Optional[int] = None) -> bool:
        """
        Wait for network to become idle.

        Args:
            page: Playwright page object
            timeout: Total timeout in ms

        Returns:
            True if network became idle, False if timeout
        """
        timeout = timeout or Settings.PAGE_LOAD_TIMEOUT

        try:
            logger.debug("Waiting for network idle...")
            await page.wait_for_load_state('networkidle', timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"Network idle timeout after {timeout}ms")
            return False

    @staticmethod
    async def wait_for_dom_mutations(page: Page, quiet_ms: int = 500) -> bool:
        """
        Wait until the DOM stops changing for ``quiet_ms`` milliseconds.

        Args:
            page: Playwright page object
            quiet_ms: Mutation-free period that counts as settled

        Returns:
            True if DOM settled, False if the observer could not be installed
        """
        try:
            await page.evaluate("""
                (quietMs) => {
                    return new Promise((resolve) => {
                        let timeout;
                        const done = () => {
                            observer.disconnect();
                            resolve(true);
                        };
                        const observer = new MutationObserver(() => {
                            clearTimeout(timeout);
                            timeout = setTimeout(done, quietMs);
                        });

                        observer.observe(document.body || document.documentElement, {
                            childList: true,
                            subtree: true,
                            attributes: true
                        });

                        timeout = setTimeout(done, quietMs);
                    });
                }
            """, quiet_ms)
            return True
        except PlaywrightError as e:
            logger.debug(f"DOM mutation wait failed: {e}")
            return False
