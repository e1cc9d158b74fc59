"""Shared fixtures: a scripted stand-in for the Playwright browser."""

import logging
from contextlib import contextmanager
from pathlib import Path

import pytest

ENTRY_URL = "https://docs.example.com/"

GITBOOK_HTML = """
<html>
<body>
  <div class="gitbook-root">
    <header><a href="/">Home</a></header>
    <div data-rnwrdesktop-hidden="true">Duplicated navigation</div>
    <div aria-label="Search…">Search</div>
    <a data-rnwrdesktop-fnigne="true" href="/guides"><div tabindex="0">Guides</div></a>
    <a href="/intro">Intro</a>
    <a href="/intro">Intro (again)</a>
    <a href="https://x.com">External</a>
    <main>
      <div aria-label="Page actions">Edit on GitHub</div>
      <div aria-controls="expandable-body-1">Show more</div>
      <div dir="auto"><span aria-label="Last modified on 2024-03-01">2 days ago</span></div>
    </main>
  </div>
</body>
</html>
"""


class FakeResponse:
    def __init__(self, status=200, status_text="OK"):
        self.status = status
        self.status_text = status_text

    @property
    def ok(self):
        return 200 <= self.status < 300


class FakePage:
    def __init__(self, browser):
        self.browser = browser
        self.url = None
        self.closed = False
        self.evaluated = []

    def goto(self, url, wait_until=None, timeout=None):
        self.url = url
        self.browser.visits.append((url, wait_until, timeout))
        route = self.browser.routes.get(url, (404, "Not Found", ""))
        if isinstance(route, Exception):
            raise route
        status, status_text, _ = route
        return FakeResponse(status, status_text)

    def evaluate(self, expression, arg=None):
        self.evaluated.append(arg)
        return len(arg or [])

    def wait_for_timeout(self, timeout):
        pass

    def content(self):
        return self.browser.routes[self.url][2]

    def pdf(self, path, **options):
        if self.url in self.browser.pdf_errors:
            raise self.browser.pdf_errors[self.url]
        # Fails like the real thing when the parent directory is missing
        Path(path).write_bytes(b"%PDF-1.4 " + self.url.encode())
        self.browser.pdfs.append((path, options))

    def close(self):
        self.closed = True


class FakeBrowser:
    """Serves canned (status, status_text, html) tuples or raises canned exceptions per URL."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.pdf_errors = {}
        self.pages = []
        self.visits = []
        self.pdfs = []
        self.closed = False

    def new_page(self):
        page = FakePage(self)
        self.pages.append(page)
        return page

    def close(self):
        self.closed = True


@pytest.fixture
def browser():
    return FakeBrowser({ENTRY_URL: (200, "OK", GITBOOK_HTML)})


@pytest.fixture
def launcher(browser):
    @contextmanager
    def _launch(settings):
        try:
            yield browser
        finally:
            browser.close()
    return _launch


@pytest.fixture(autouse=True)
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="gitbook2pdf")
