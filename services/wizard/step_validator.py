# -*- coding: utf-8 -*-
"""
Page validation service.

Asks every field component of a page to validate against the data document
and aggregates the outcome. All components are asked, so each one can
record its own error state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List


@dataclass
class StepValidationResult:
    """Result of page validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0


class StepValidator:
    """Validates the field components of a wizard page."""

    @staticmethod
    def check_page_validity(components: Iterable[Any], data: Dict[str, Any],
                            dirty: bool = False) -> bool:
        """
        Validate every component of a page.

        Args:
            components: Field components of the page (globals included)
            data: Data document
            dirty: Force untouched fields into their error-showing state

        Returns:
            True when every component passes
        """
        valid = True
        for component in components:
            # No short circuit: each component must record its own state
            valid = component.check_validity(data, dirty) and valid
        return valid

    @staticmethod
    def collect_errors(components: Iterable[Any]) -> List[str]:
        """Gather the error messages recorded by the components."""
        errors: List[str] = []
        for component in components:
            errors.extend(getattr(component, "errors", None) or [])
        return errors

    @staticmethod
    def validate_page(components: Iterable[Any], data: Dict[str, Any],
                      dirty: bool = False) -> StepValidationResult:
        """Validate a page and return the aggregated result."""
        components = list(components)
        is_valid = StepValidator.check_page_validity(components, data, dirty)
        return StepValidationResult(
            is_valid=is_valid,
            errors=StepValidator.collect_errors(components) if not is_valid else []
        )
