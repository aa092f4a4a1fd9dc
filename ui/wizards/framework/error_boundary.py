# -*- coding: utf-8 -*-
"""
Error Boundary for wizard transitions.

Every public transition runs inside a guard that:
- Refuses to start while another transition is in flight
- Logs rejected transitions with context
- Always clears the in-flight marker, on success and on failure
"""

from typing import Callable, Optional
from functools import wraps

from services.exceptions import TransitionInProgress, WizardException
from utils.logger import get_logger

logger = get_logger(__name__)


def running_transition(wizard) -> Optional[str]:
    """Name of the transition currently in flight, if any."""
    return getattr(wizard, "_transition", None)


def with_transition_guard(operation_name: str):
    """
    Decorator serializing a wizard transition.

    Usage:
        @with_transition_guard("next_page")
        def next_page(self):
            # ... method code ...

    Args:
        operation_name: Name of the transition for logs and errors

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            running = running_transition(self)
            if running is not None:
                logger.warning(f"Refused {operation_name}: {running} is still in progress")
                raise TransitionInProgress(operation_name, running)

            self._transition = operation_name
            try:
                return func(self, *args, **kwargs)

            except WizardException as e:
                logger.warning(f"{operation_name} rejected: {e}")
                raise

            except Exception:
                logger.error(f"Unexpected error during {operation_name}", exc_info=True)
                raise

            finally:
                self._transition = None

        return wrapper
    return decorator
