import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from urllib.parse import urljoin

from playwright.sync_api import sync_playwright, Error as PlaywrightError, TimeoutError as PlaywrightTimeoutError

from .config import PLAYWRIGHT_CONFIG
from .errors import DownloadError, NotGitBookError
from .links import href_to_slug, parse_html, is_gitbook_website, collect_links
from .page_actions import MENU_EXPANSION, PAGE_PREPARATION, apply_actions

logger = logging.getLogger(__name__)

# archive_page() outcomes, named after the RunSummary lists they land in
ARCHIVED = "archived"
FAILED = "failed"
SKIPPED = "skipped"


@dataclass
class RunSummary:
    """Outcome of one run, link by link."""
    links: List[str] = field(default_factory=list)
    archived: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


@contextmanager
def launch_browser(settings):
    """Start Chromium once for the whole run, always closed on exit."""
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=settings.headless)
        try:
            yield browser
        finally:
            browser.close()


def open_page(page, url, settings):
    """Navigate to url and fail on a non-success response."""
    response = page.goto(
        url,
        wait_until=PLAYWRIGHT_CONFIG["wait_until"],
        timeout=settings.timeout_ms,
    )
    if response is None or not response.ok:
        raise DownloadError.from_response(url, response)
    return response


def discover_links(browser, settings):
    """Visit the entry URL and return the distinct root-relative links of the site
    :return: List of raw hrefs in document order
    :raises DownloadError / NotGitBookError / PlaywrightError: the run cannot go on
    """
    logger.info(f"🔍 Visiting \"{settings.url}\"")
    page = browser.new_page()
    try:
        open_page(page, settings.url, settings)
        apply_actions(page, MENU_EXPANSION)
        html = page.content()
    finally:
        page.close()

    soup = parse_html(html)
    if not is_gitbook_website(soup):
        if settings.check_gitbook:
            raise NotGitBookError(f"Not a GitBook website - {settings.url}")
        logger.warning(f"⚠️  GitBook root element not found, continuing anyway - {settings.url}")

    links = collect_links(soup)
    logger.debug(f"Links collected: {links}")
    return links


def archive_page(browser, settings, href):
    """Render one discovered link to <out_dir>/<slug>.pdf
    :return: ARCHIVED (PDF written) / SKIPPED (no usable slug) / FAILED (already logged)
    """
    # 1. Derive output path, skip links without a usable slug
    slug = href_to_slug(href)
    if not slug:
        logger.warning(f"⚠️  Empty slug, ignoring \"{href}\"")
        return SKIPPED
    out_path = Path(settings.out_dir) / f"{slug}.pdf"

    # 2. Resolve link against the entry URL
    url = urljoin(settings.url, href)

    page = browser.new_page()
    try:
        logger.info(f"📥 Downloading \"{url}\" into \"{out_path}\"")
        open_page(page, url, settings)
        apply_actions(page, PAGE_PREPARATION)
        # Created only once the page is known to load, no empty dirs for dead links
        out_path.parent.mkdir(parents=True, exist_ok=True)
        page.pdf(**settings.pdf_kwargs(out_path))
        return ARCHIVED
    except PlaywrightTimeoutError:
        logger.error(f"❌ Downloading \"{url}\" failed: Timeout ({settings.timeout}s)")
    except (PlaywrightError, DownloadError, OSError) as e:
        logger.error(f"❌ Downloading \"{url}\" failed: {e}")
    finally:
        page.close()
    return FAILED


def run(settings, launcher=launch_browser):
    """Discover every page of the site and archive them one after another
    Discovery failures are fatal and re-raised; per-page failures are only logged.
    """
    summary = RunSummary()
    try:
        with launcher(settings) as browser:
            summary.links = discover_links(browser, settings)
            logger.info(f"🔗 Found {len(summary.links)} links, saving PDFs into \"{settings.out_dir}\"")

            for href in summary.links:
                outcome = archive_page(browser, settings, href)
                getattr(summary, outcome).append(href)
    except PlaywrightTimeoutError:
        logger.critical(f"❌ Page load timeout: Exceed {settings.timeout}s - {settings.url}")
        raise
    except (PlaywrightError, DownloadError) as e:
        logger.critical(f"❌ {e}")
        raise

    logger.info(
        f"🎉 Done! Archived {len(summary.archived)} pages, "
        f"{len(summary.failed)} failed, {len(summary.skipped)} skipped"
    )
    return summary
