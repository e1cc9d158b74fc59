# meta data, align with setup.py

from .version import __version__

__author__ = "gitbook2pdf contributors"

__description__ = "A CLI tool to crawl a GitBook documentation website and save every page as PDF"
__license__ = "MIT"
