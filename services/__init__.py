# -*- coding: utf-8 -*-
"""
Page Wizard Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "WizardException",
    "PageNotFound",
    "ValidationFailed",
    "HookRejected",
    "TransitionInProgress",
    "NavigationNotAllowed",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name in __all__:
        from . import exceptions
        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
