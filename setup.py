import os
from setuptools import setup, find_packages
from gitbook2pdf import __version__, __description__, __author__, __license__

def read_long_description():
    """Read README.md for PyPI long description (rendered as markdown)"""
    if os.path.exists("README.md"):
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    return __description__

# PyPI package setup configuration
setup(
    # -------------------------- BASIC INFO --------------------------
    name="gitbook2pdf",
    version=__version__,
    author=__author__,
    description=__description__,
    long_description=read_long_description(),
    # Declare README as Markdown for PyPI page rendering
    long_description_content_type="text/markdown",
    license=__license__,
    # Search keywords for PyPI (improve discoverability)
    keywords=["gitbook", "pdf", "crawler", "archive", "documentation", "playwright"],
    # ----------------------------------------------------------------

    # -------------------------- PACKAGE STRUCTURE --------------------------
    # Auto discover all packages under the project root (tests are not shipped)
    packages=find_packages(exclude=["tests", "tests.*"]),
    # Include non-Python files (e.g., README, LICENSE) in the package
    include_package_data=True,
    # -----------------------------------------------------------------------

    # -------------------------- DEPENDENCIES --------------------------
    # Dependencies installed automatically with pip install gitbook2pdf
    # Specify minimum compatible versions for stability
    install_requires=[
        "playwright>=1.40.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=4.9.0",
        "python-slugify>=8.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0"
        ]
    },
    # ------------------------------------------------------------------

    # -------------------------- CLI ENTRY POINT --------------------------
    # Generate global CLI command: `gitbook2pdf` (instead of python -m gitbook2pdf)
    # Format: command_name = package_name.file_name:main_function_name
    entry_points={
        "console_scripts": [
            "gitbook2pdf = gitbook2pdf.cli:main",
        ]
    },
    # ---------------------------------------------------------------------

    # -------------------------- COMPATIBILITY --------------------------
    # Minimum Python version (Playwright requires 3.8+)
    python_requires=">=3.8",
    # Disable zip packaging (ensure Playwright driver loads correctly)
    zip_safe=False,
    # PyPI classification tags (for package categorization)
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: System :: Archiving",
        "Topic :: Text Processing :: Markup :: HTML"
    ]
    # -------------------------------------------------------------------
)
