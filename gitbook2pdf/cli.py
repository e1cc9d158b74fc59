import argparse
import logging
import math
import re
import sys

from playwright.sync_api import Error as PlaywrightError

from . import __version__
from .config import DEFAULTS, Settings
from .downloader import run
from .errors import DownloadError
from .logger import setup_logging


def validate_url(url):
    """Validate URL legality, must start with http/https"""
    if not re.match(r'^https?://', url, re.IGNORECASE):
        raise argparse.ArgumentTypeError(f"Invalid URL: {url} | Must start with http/https")
    return url


def validate_timeout(timeout):
    """Validate timeout is a non-negative number of seconds"""
    try:
        timeout_float = float(timeout)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid timeout: {timeout} | Not a number.")
    if not math.isfinite(timeout_float):
        raise argparse.ArgumentTypeError(f"Invalid timeout: {timeout} | Not a number.")
    if timeout_float < 0:
        raise argparse.ArgumentTypeError(f"Invalid timeout: {timeout} | Must be zero or positive number.")
    return timeout_float


def build_parser():
    parser = argparse.ArgumentParser(
        prog="gitbook2pdf",
        description="📄 GitBook Website to PDF Downloader | One PDF per page | Directory tree mirrors URL paths",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="===== Core Rules =====\n"
               "1. Only links of the entry page starting with '/' are downloaded (same site)\n"
               "2. PDF path: <outDir>/<slugified link path>.pdf, '/' → <outDir>/index.pdf\n"
               "3. A failing page is logged and skipped, the run goes on\n"
               "===== Usage Examples =====\n"
               "  1. Default output dir: gitbook2pdf https://docs.example.com\n"
               "  2. Custom dir + timeout: gitbook2pdf https://docs.example.com -o example-docs -t 60"
    )
    # Mandatory arg: Entry URL
    parser.add_argument("url", type=validate_url, help="URL of the website to scrape (must start with http/https)")
    parser.add_argument("-o", "--outDir", "--out-dir", dest="out_dir", default=DEFAULTS["out_dir"],
                        help=f"Output directory used to save files (default: {DEFAULTS['out_dir']})")
    parser.add_argument("-t", "--timeout", type=validate_timeout, default=DEFAULTS["timeout"],
                        help=f"Request timeout in seconds, 0 = no timeout (default: {DEFAULTS['timeout']})")
    parser.add_argument("--skip-gitbook-check", action="store_true",
                        help="Do not abort when the entry page does not look like a GitBook website")
    parser.add_argument("--show-browser", action="store_true", help="Run the browser with a visible window")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output (e.g. collected links)")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    """Main function: Parse CLI args → Build settings → Download all pages"""
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    setup_logging(level)

    settings = Settings.from_args(args)
    try:
        run(settings)
    except (PlaywrightError, DownloadError):
        # Already reported by run()
        sys.exit(1)


if __name__ == "__main__":
    main()
