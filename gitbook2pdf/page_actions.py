"""
DOM actions applied inside the browser before reading or printing a page.

Actions are plain data (kind + CSS selector) so the lists below can be checked
without a browser; apply_actions() ships them to a single generic script.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from .config import PLAYWRIGHT_CONFIG

CLICK = "click"
REMOVE = "remove"
REWRITE = "rewrite"
KINDS = (CLICK, REMOVE, REWRITE)


@dataclass(frozen=True)
class DomAction:
    kind: str
    selector: str
    attribute: Optional[str] = None  # rewrite only: attribute holding the replacement text

    def __post_init__(self):
        if self.kind not in KINDS:
            raise ValueError(f"Unknown DOM action kind: {self.kind}")
        if self.kind == REWRITE and not self.attribute:
            raise ValueError(f"Rewrite action needs an attribute: {self.selector}")


# Expand all TOC menu items, so every page link is present in the DOM
MENU_EXPANSION = (
    DomAction(CLICK, 'a[data-rnwrdesktop-fnigne="true"] > div[tabindex="0"]'),
)

PAGE_PREPARATION = (
    # Expand all expandable sections
    DomAction(CLICK, 'div[aria-controls^="expandable-body-"]'),
    # Remove redundant/interactive elements
    DomAction(REMOVE, 'header + div[data-rnwrdesktop-hidden="true"]'),
    DomAction(REMOVE, 'div[aria-label="Search…"]'),
    DomAction(REMOVE, 'div[aria-label="Page actions"]'),
    # Turn relative "last modified" timestamps into absolute ones
    DomAction(REWRITE, 'div[dir="auto"] > span[aria-label]', attribute="aria-label"),
)

APPLY_ACTIONS_JS = """
(actions) => {
    let applied = 0
    for (const action of actions) {
        for (const element of document.querySelectorAll(action.selector)) {
            if (action.kind === 'click') {
                element.click()
            } else if (action.kind === 'remove') {
                element.remove()
            } else if (action.kind === 'rewrite') {
                const value = element.getAttribute(action.attribute)
                if (value !== null) {
                    element.textContent = value
                }
            }
            applied += 1
        }
    }
    return applied
}
"""


def apply_actions(page, actions):
    """Run DOM actions in the page, then let the DOM settle. Returns matched element count."""
    applied = page.evaluate(APPLY_ACTIONS_JS, [asdict(action) for action in actions])
    page.wait_for_timeout(PLAYWRIGHT_CONFIG["settle_ms"])
    return applied
