# -*- coding: utf-8 -*-
"""Custom exceptions for wizard navigation."""

from typing import List, Optional


class WizardException(Exception):
    """Base exception for rejected wizard operations."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        return self.message


class PageNotFound(WizardException):
    """Raised when a requested page index is outside the visible pages."""

    def __init__(self, page, page_count: int = 0, context: str = None):
        super().__init__(f"Page not found: {page}", context=context)
        self.page = page
        self.page_count = page_count


class ValidationFailed(WizardException):
    """Raised when the current page does not pass validation."""

    def __init__(self, errors: Optional[List[str]] = None, page: int = None,
                 context: str = None):
        self.errors = list(errors or [])
        self.page = page
        message = "Page validation failed"
        if self.errors:
            message += ": " + "; ".join(self.errors)
        super().__init__(message, context=context)


class HookRejected(WizardException):
    """Raised when a before-next or cancel hook refuses the transition."""

    def __init__(self, hook: str, original_error: Exception = None,
                 context: str = None):
        message = f"Hook '{hook}' rejected the transition"
        if original_error is not None:
            message += f": {original_error}"
        super().__init__(message, context=context)
        self.hook = hook
        self.original_error = original_error


class TransitionInProgress(WizardException):
    """Raised when a transition is requested while another one is running."""

    def __init__(self, operation: str, running: str, context: str = None):
        super().__init__(
            f"Cannot start '{operation}' while '{running}' is in progress",
            context=context
        )
        self.operation = operation
        self.running = running


class NavigationNotAllowed(WizardException):
    """Raised when a navigation control is disabled by configuration."""
