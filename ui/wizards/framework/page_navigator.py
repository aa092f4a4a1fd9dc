# -*- coding: utf-8 -*-
"""
Page Navigator - Moves the wizard between its visible pages.

Handles:
- Bounds-checked page changes
- Full mode (single continuous view, no bounds)
- Clamping after the page list shrinks
- Progress tracking
"""

from typing import Callable, List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from models.navigation_state import NavigationState
from models.page import Page
from services.exceptions import PageNotFound
from utils.logger import get_logger

logger = get_logger(__name__)


class PageNavigator(QObject):
    """
    Owns the current page index of a wizard.

    Responsibilities:
    - Reject targets outside the visible pages
    - Trigger a redraw after every successful change
    - Emit page_changed for UI updates
    """

    # Signals
    page_changed = pyqtSignal(int, int)  # old_index, new_index

    def __init__(self, state: NavigationState, redraw: Optional[Callable[[], None]] = None):
        """
        Initialize the navigator.

        Args:
            state: Navigation state shared with the wizard
            redraw: Called after the current page changed
        """
        super().__init__()
        self.state = state
        self.pages: List[Page] = []
        self._redraw = redraw

    def set_pages(self, pages: List[Page]):
        """Replace the visible pages after a build cycle."""
        self.pages = pages

    def get_current_page(self) -> Optional[Page]:
        """Get the current page."""
        if 0 <= self.state.current_page < len(self.pages):
            return self.pages[self.state.current_page]
        return None

    def get_page_count(self) -> int:
        """Get total number of visible pages."""
        return len(self.pages)

    def set_page(self, target: Optional[int]) -> bool:
        """
        Show the page at ``target``.

        Args:
            target: Page index; None requests no change

        Returns:
            True if the request succeeded, False for a None target

        Raises:
            PageNotFound: target is outside the visible pages (non-full mode)

        A redraw that raises leaves the current page unchanged.
        """
        if target is None:
            logger.debug("set_page called without a target, nothing to do")
            return False

        if target == self.state.current_page:
            return True

        if self.state.full:
            logger.debug(f"Full mode: redraw instead of moving to page {target}")
            self._do_redraw()
            return True

        if not 0 <= target < len(self.pages):
            logger.warning(
                f"Invalid page index: {target} (valid range: 0-{len(self.pages) - 1})"
            )
            raise PageNotFound(target, len(self.pages))

        old_index = self.state.current_page
        self.state.current_page = target
        try:
            self._do_redraw()
        except Exception:
            self.state.current_page = old_index
            raise
        logger.info(f"Navigation complete: Page {old_index} → {target}")

        self.page_changed.emit(old_index, target)
        return True

    def clamp(self) -> bool:
        """
        Keep the current page inside the visible pages after a rebuild.

        Moves to the last page when the list shrank below the current index
        and drops history entries pointing past the end or at the page now
        shown.

        Returns:
            True if the current page had to move
        """
        count = len(self.pages)
        dropped = self.state.history.discard_from(count)
        if dropped:
            logger.debug(f"Dropped {dropped} history entr{'y' if dropped == 1 else 'ies'} past page {count - 1}")

        old_index = self.state.current_page
        moved = not (old_index < count or (count == 0 and old_index == 0))
        if moved:
            self.state.current_page = max(count - 1, 0)
            logger.info(
                f"Page list shrank to {count}, moving from page {old_index} to {self.state.current_page}"
            )

        if self.state.history.discard_top(self.state.current_page):
            logger.debug(f"Dropped history entries pointing at the current page {self.state.current_page}")

        if moved:
            self.page_changed.emit(old_index, self.state.current_page)
        return moved

    def reset(self):
        """Forget history and return to the first page without redrawing."""
        self.state.reset()

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.pages) <= 1:
            return 100.0 if self.pages else 0.0
        return (self.state.current_page / (len(self.pages) - 1)) * 100.0

    def _do_redraw(self):
        if self._redraw is not None:
            self._redraw()
