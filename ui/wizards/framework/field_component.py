# -*- coding: utf-8 -*-
"""
Field Component - the validatable unit a page is made of.

Real field rendering belongs to the form engine; the wizard only relies on
the capabilities defined here:
- check_validity(): validate against the data document
- errors: messages recorded by the last validation
- destroy(): release the component when pages are rebuilt
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from utils.helpers import get_in, set_in, is_empty_value


class FieldComponent(ABC):
    """
    Abstract base class for field components.

    Subclasses implement validate(); check_validity() records the outcome
    and tracks whether errors should be shown yet.
    """

    def __init__(self, definition: Dict[str, Any], options: Optional[Dict[str, Any]] = None):
        """
        Initialize the component.

        Args:
            definition: Component definition from the wizard schema
            options: Options shared by all components of the form
        """
        self.definition = definition
        self.options = options or {}
        self.key: Optional[str] = definition.get("key")
        self.label: str = definition.get("label") or self.key or ""
        self.page: Optional[int] = None
        self.pristine = True
        self.destroyed = False
        self.errors: List[str] = []

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def validate(self, data: Dict[str, Any]) -> List[str]:
        """
        Validate the component's value.

        Returns:
            List of error messages (empty list if valid)
        """
        pass

    # =========================================================================
    # Validation
    # =========================================================================

    def check_validity(self, data: Dict[str, Any], dirty: bool = False) -> bool:
        """
        Validate and record the error state.

        Args:
            data: Data document
            dirty: Mark the component as interacted with so errors show

        Returns:
            True if the component is valid
        """
        if dirty:
            self.pristine = False
        self.errors = self.validate(data)
        return not self.errors

    @property
    def visible_errors(self) -> List[str]:
        """Errors to display; pristine components stay silent."""
        if self.pristine:
            return []
        return list(self.errors)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def get_value(self, data: Dict[str, Any]) -> Any:
        return get_in(data, self.key, self.definition.get("defaultValue"))

    def set_value(self, data: Dict[str, Any], value: Any):
        """Write the value into the data document and mark the field touched."""
        set_in(data, self.key, value)
        self.pristine = False

    def destroy(self):
        self.destroyed = True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r}, page={self.page!r})"


class BasicFieldComponent(FieldComponent):
    """
    Field component applying the schema's ``validate`` rules.

    Supported rules: required, minLength, maxLength, pattern and custom
    (a callable receiving {"value", "data", "component"} that returns True
    or an error message).
    """

    def validate(self, data: Dict[str, Any]) -> List[str]:
        rules = self.definition.get("validate") or {}
        value = self.get_value(data)
        errors = []

        if is_empty_value(value):
            if rules.get("required"):
                errors.append(f"{self.label} is required")
            return errors

        if isinstance(value, str):
            min_length = rules.get("minLength")
            max_length = rules.get("maxLength")
            if min_length and len(value) < int(min_length):
                errors.append(f"{self.label} must have at least {min_length} characters")
            if max_length and len(value) > int(max_length):
                errors.append(f"{self.label} must have no more than {max_length} characters")
            pattern = rules.get("pattern")
            if pattern and not re.fullmatch(pattern, value):
                errors.append(f"{self.label} does not match the pattern {pattern}")

        custom = rules.get("custom")
        if callable(custom):
            outcome = custom({"value": value, "data": data, "component": self.definition})
            if outcome is not True and outcome:
                errors.append(str(outcome))

        return errors
