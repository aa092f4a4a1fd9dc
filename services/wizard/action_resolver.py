# -*- coding: utf-8 -*-
"""
Action Availability Resolver - which wizard controls are actionable.
"""

from typing import Dict, Optional

ACTION_CANCEL = "cancel"
ACTION_PREVIOUS = "previous"
ACTION_NEXT = "next"
ACTION_SUBMIT = "submit"

ACTIONS = (ACTION_CANCEL, ACTION_PREVIOUS, ACTION_NEXT, ACTION_SUBMIT)


def is_action_available(action: str, current_page: int, next_page: Optional[int],
                        pages_count: int, button_settings: Dict[str, bool],
                        read_only: bool = False) -> bool:
    """
    Check if an action is currently available.

    Args:
        action: One of cancel, previous, next, submit
        current_page: Current page index
        next_page: Result of the navigation engine for the current page
        pages_count: Number of visible pages
        button_settings: showPrevious/showNext/showCancel flags
        read_only: Read-only forms never submit

    Returns:
        True if the action can be taken; unknown actions are always available
    """
    if action == ACTION_PREVIOUS:
        return current_page > 0 and bool(button_settings.get("showPrevious"))
    if action == ACTION_NEXT:
        return (
            next_page is not None
            and next_page < pages_count
            and bool(button_settings.get("showNext"))
        )
    if action == ACTION_CANCEL:
        return bool(button_settings.get("showCancel"))
    if action == ACTION_SUBMIT:
        return not read_only and (next_page is None or current_page == pages_count - 1)
    return True


def available_actions(current_page: int, next_page: Optional[int], pages_count: int,
                      button_settings: Dict[str, bool],
                      read_only: bool = False) -> Dict[str, bool]:
    """Return {action: True} for every available action, in display order."""
    return {
        action: True
        for action in ACTIONS
        if is_action_available(action, current_page, next_page, pages_count,
                               button_settings, read_only)
    }
