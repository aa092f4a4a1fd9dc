# -*- coding: utf-8 -*-
"""
Navigation Engine - resolves the next and previous page.

Pure functions over the current pages; the session controller decides
whether a resolved index can actually be shown.
"""

from typing import Any, Dict, List, Optional

from models.page import Page
from services.wizard.condition_evaluator import (
    ConditionEvaluator, GoTo, GoToKey, Terminate
)
from services.wizard.history_stack import HistoryStack
from utils.logger import get_logger

logger = get_logger(__name__)


def get_page_index_by_key(pages: List[Page], key: str) -> int:
    """Return the index of the first page with ``key``, or 0 if none matches."""
    for index, page in enumerate(pages):
        if page.key == key:
            return index
    logger.debug(f"No page with key '{key}', falling back to the first page")
    return 0


def get_next_page(pages: List[Page], data: Dict[str, Any], current_page: int,
                  evaluator: ConditionEvaluator) -> Optional[int]:
    """
    Resolve the page that follows ``current_page``.

    Without a branch expression the result is ``current_page + 1``, even past
    the last page (the caller reads that as "submit next").

    Returns:
        Page index, or None for an explicit dead end or a missing page
    """
    if current_page is None or not 0 <= current_page < len(pages):
        return None

    page = pages[current_page]
    following = current_page + 1
    if not page.has_branch:
        return following

    result = evaluator.evaluate_branch(page.next_page, {
        "next": following,
        "data": data,
        "page": following,
        "form": page,
    })

    if isinstance(result, Terminate):
        return None
    if isinstance(result, GoTo):
        return result.index
    if isinstance(result, GoToKey):
        return get_page_index_by_key(pages, result.key)

    raise TypeError(f"Unsupported branch result: {result!r}")


def get_previous_page(history: HistoryStack, current_page: int) -> int:
    """
    Pop the history stack, falling back to ``current_page - 1``.

    The fallback may be negative; setting the page rejects it.
    """
    previous = history.pop()
    if previous is not None:
        return previous
    return current_page - 1
