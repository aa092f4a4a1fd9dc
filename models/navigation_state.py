# -*- coding: utf-8 -*-
"""
Navigation state of a wizard session.
"""

from dataclasses import dataclass, field

from services.wizard.history_stack import HistoryStack


@dataclass
class NavigationState:
    """
    Current page, visited history and full-mode flag.

    ``current_page`` indexes the visible pages of the current build cycle.
    """

    current_page: int = 0
    history: HistoryStack = field(default_factory=HistoryStack)
    full: bool = False

    def reset(self):
        """Return to the first page and forget the visited history."""
        self.current_page = 0
        self.history.clear()

    def to_dict(self) -> dict:
        return {
            "current_page": self.current_page,
            "history": self.history.to_list(),
            "full": self.full,
        }
