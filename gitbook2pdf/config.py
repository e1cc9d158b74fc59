from dataclasses import dataclass, field
from types import MappingProxyType

# ===================== Configurable Params (Adjust as needed) =====================
PLAYWRIGHT_CONFIG = {
    "headless": True,  # Set to False to watch the browser while it works
    "wait_until": "load",  # Navigation lifecycle event to wait for
    "settle_ms": 500,  # Wait after DOM actions (ms) so clicked menus/sections render
}
# Chromium print settings; page.pdf() is only supported by Chromium in Playwright
PDF_OPTIONS = {
    "width": "745px",
    "height": "1123px",
    "scale": 0.95,
    "margin": {
        "top": "50px",
        "right": "25px",
        "bottom": "50px",
        "left": "25px",
    },
}
# Default CLI values
DEFAULTS = {
    "out_dir": "pages",
    "timeout": 30,  # seconds
}
# ==================================================================================


def _frozen(mapping):
    """Read-only deep view of a nested dict of options."""
    return MappingProxyType({
        key: _frozen(value) if isinstance(value, dict) else value
        for key, value in mapping.items()
    })


@dataclass(frozen=True)
class Settings:
    """Per-run configuration, built once at startup and never mutated."""

    url: str
    out_dir: str = DEFAULTS["out_dir"]
    timeout: float = DEFAULTS["timeout"]
    pdf_options: MappingProxyType = field(default_factory=lambda: _frozen(PDF_OPTIONS))
    check_gitbook: bool = True
    headless: bool = PLAYWRIGHT_CONFIG["headless"]

    @property
    def timeout_ms(self) -> float:
        """Navigation timeout in milliseconds, as Playwright expects it (0 = no timeout)."""
        return self.timeout * 1000

    def pdf_kwargs(self, path) -> dict:
        """Keyword arguments for page.pdf() writing to `path`."""
        kwargs = {key: dict(value) if isinstance(value, MappingProxyType) else value
                  for key, value in self.pdf_options.items()}
        kwargs["path"] = str(path)
        return kwargs

    @classmethod
    def from_args(cls, args):
        """Build settings from parsed CLI arguments."""
        return cls(
            url=args.url,
            out_dir=args.out_dir,
            timeout=args.timeout,
            check_gitbook=not args.skip_gitbook_check,
            headless=not args.show_browser,
        )
