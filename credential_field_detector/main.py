"""
Credential Field Detector - Main Entry Point
Runs the detection pipeline on a live URL or a local HTML file.
"""

import asyncio
import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from credential_field_detector.browser.browser_manager import BrowserManager
from credential_field_detector.browser.page_loader import PageLoader
from credential_field_detector.dom.html_document import HtmlDocument
from credential_field_detector.dom.page_snapshot import PageSnapshot
from credential_field_detector.analyzer.page_reporter import PageReporter
from credential_field_detector.models.page import LoginPageAnalysis
from credential_field_detector.utils.logger import logger
from credential_field_detector.config.settings import Settings


def analyze_html(html: str, url: Optional[str] = None) -> LoginPageAnalysis:
    """
    Detect login forms in HTML markup.

    Args:
        html: Page markup
        url: Optional page URL, used to resolve form actions

    Returns:
        LoginPageAnalysis object
    """
    start_time = time.time()

    logger.step(1, f"Accepting markup ({len(html)} characters)")
    document = HtmlDocument(html, url=url)

    analysis = PageReporter.build(document, url)
    analysis.analysis_duration_ms = (time.time() - start_time) * 1000
    return analysis


async def analyze_website(
    url: str,
    headless: Optional[bool] = None
) -> LoginPageAnalysis:
    """
    Load a live page and detect its login forms.

    Pipeline:
    1. Accept URL
    2. Launch browser
    3. Load & stabilize page
    4. Capture DOM snapshot
    5. Detect and pair credential fields
    6. Cleanup

    Nothing is printed or saved; the CLI emits the report.

    Args:
        url: URL to analyze
        headless: Run browser in headless mode

    Returns:
        LoginPageAnalysis object
    """
    start_time = time.time()

    logger.info("=" * 60)
    logger.info("Credential Field Detector")
    logger.info("=" * 60)

    logger.step(1, f"Accepting URL: {url}")
    PageLoader.validate_url(url)

    async with BrowserManager(headless=headless) as browser_manager:
        page = await browser_manager.new_page()
        await PageLoader.load(page, url)
        document = await PageSnapshot.capture(page)
        analysis = PageReporter.build(document, page.url)

    analysis.analysis_duration_ms = (time.time() - start_time) * 1000
    return analysis


def _emit(analysis: LoginPageAnalysis, output_file: Optional[str] = None):
    logger.step(6, "Generating structured JSON output")

    print("\n" + analysis.summary())

    if output_file:
        analysis.save_to_file(output_file)
        logger.success(f"Analysis saved to: {output_file}")

    print("\nJSON Output:")
    print("-" * 60)
    print(analysis.to_json())
    print("-" * 60)

    logger.success(f"Analysis complete in {analysis.analysis_duration_ms:.2f}ms")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Credential Field Detector - find username and password fields in web forms"
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--url',
        type=str,
        help='URL to analyze in a browser (e.g., https://example.com/login)'
    )
    source.add_argument(
        '--file',
        type=str,
        help='Local HTML file to analyze'
    )

    parser.add_argument(
        '--base-url',
        type=str,
        help='Page URL used to resolve form actions when analyzing a file'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Output JSON file path (optional)'
    )

    parser.add_argument(
        '--headless',
        action='store_true',
        default=True,
        help='Run browser in headless mode (default: True)'
    )

    parser.add_argument(
        '--no-headless',
        action='store_true',
        help='Run browser in visible mode'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv=None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        Settings.update(log_level="DEBUG", debug_mode=True)
        logger.set_level("DEBUG")
        logger.debug(f"Settings: {Settings.to_dict()}")

    headless = not args.no_headless if args.no_headless else args.headless

    try:
        if args.file:
            html = Path(args.file).read_text(encoding='utf-8')
            analysis = analyze_html(html, url=args.base_url)
        else:
            analysis = asyncio.run(analyze_website(url=args.url, headless=headless))
        _emit(analysis, args.output)
    except KeyboardInterrupt:
        logger.warning("\nAnalysis interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"\nFatal error: {str(e)}")
        sys.exit(1)


if __name__ == '__main__':
    main()
