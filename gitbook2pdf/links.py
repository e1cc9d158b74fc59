import re
from urllib.parse import unquote

from bs4 import BeautifulSoup
from slugify import slugify

# Root marker rendered by every GitBook-hosted site
GITBOOK_ROOT_SELECTOR = "body > .gitbook-root"
# Root-relative links only; absolute/external URLs never match
INTERNAL_LINK_SELECTOR = 'a[href^="/"]'
# python-slugify's default disallowed pattern, with "/" kept as a path separator
SLUG_DISALLOWED_PATTERN = r"[^-a-z0-9/]+"
INDEX_SLUG = "index"


def href_to_slug(href):
    """Turn a root-relative href into a filesystem-safe relative path (without extension)
    Example: / → index
    Example: /Getting Started/ → getting-started
    Example: //a///b// → a/b
    Example: # → "" (no valid slug, caller must skip it)
    """
    slug = slugify(unquote(href or ""), regex_pattern=SLUG_DISALLOWED_PATTERN)
    # Collapse "/" runs, dropping separator dashes left at segment edges ("/-/a-/" → "/a/")
    slug = re.sub(r"[-/]*/[-/]*", "/", slug).strip()
    if slug == "/":
        return INDEX_SLUG
    return slug.strip("/")


def parse_html(html):
    return BeautifulSoup(html, "lxml")


def is_gitbook_website(soup):
    """Check the rendered document carries the GitBook root element."""
    return soup.select_one(GITBOOK_ROOT_SELECTOR) is not None


def collect_links(soup):
    """Distinct root-relative hrefs of the document, in first-seen order."""
    hrefs = (a.get("href") for a in soup.select(INTERNAL_LINK_SELECTOR))
    return list(dict.fromkeys(hrefs))
