# -*- coding: utf-8 -*-
"""
Condition and branch evaluation.

The form engine owns the expression language; the wizard only needs two
capabilities from it:
- check_condition(): is a panel visible for the current data?
- evaluate(): what does a branch expression yield?

Branch values are normalized into a BranchResult at this boundary so the
navigation engine never has to guess what a raw value means.
"""

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from utils.helpers import get_in
from utils.logger import get_logger

logger = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


# =========================================================================
# Branch results
# =========================================================================

@dataclass(frozen=True)
class BranchResult:
    """Base class of branch expression results."""


@dataclass(frozen=True)
class GoTo(BranchResult):
    """Jump to a page index (used verbatim, not clamped)."""
    index: int


@dataclass(frozen=True)
class GoToKey(BranchResult):
    """Jump to the first page with this key."""
    key: str


@dataclass(frozen=True)
class Terminate(BranchResult):
    """Explicit dead end: there is no next page."""


def _parse_int(value: Any) -> Optional[int]:
    """Parse a page index from a leading integer (" 2abc" -> 2), or return None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        return None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
        return None
    return None


def to_branch_result(value: Any) -> BranchResult:
    """
    Normalize a raw branch expression value.

    None terminates, numbers and strings starting with an integer are indexes,
    everything else is looked up as a page key.
    """
    if value is None:
        return Terminate()
    if isinstance(value, BranchResult):
        return value

    index = _parse_int(value)
    if index is not None:
        return GoTo(index)
    return GoToKey(str(value))


# =========================================================================
# Evaluators
# =========================================================================

class ConditionEvaluator(ABC):
    """Interface the wizard consumes from the form engine."""

    @abstractmethod
    def check_condition(self, item: Any, data: Dict[str, Any],
                        root_data: Optional[Dict[str, Any]] = None,
                        form: Any = None, instance: Any = None) -> bool:
        """Check if an item is visible for the given data."""
        pass

    @abstractmethod
    def evaluate(self, expression: Any, context: Dict[str, Any],
                 result_key: str = "value") -> Any:
        """Evaluate an expression against a context and return its value."""
        pass

    def evaluate_branch(self, expression: Any, context: Dict[str, Any]) -> BranchResult:
        """Evaluate a branch expression into a BranchResult."""
        return to_branch_result(self.evaluate(expression, context, "next"))


class DefaultConditionEvaluator(ConditionEvaluator):
    """
    Evaluator for declarative and callable conditions.

    Supported forms:
    - ``conditional``: {"show": true, "when": "field.path", "eq": "value"}
    - ``customConditional``: callable receiving a context dict, returns bool
    - branch expressions: callables receiving the branch context, literal
      ints/keys/None, or {"var": "data.path"} lookups
    """

    def check_condition(self, item, data, root_data=None, form=None, instance=None) -> bool:
        conditional = _item_attr(item, "conditional", "conditional")
        custom = _item_attr(item, "custom_conditional", "customConditional")

        if custom is not None:
            context = {
                "data": data,
                "row": data,
                "root": root_data if root_data is not None else data,
                "form": form,
                "instance": instance,
            }
            return bool(self._call(custom, context, default=True))

        if conditional and conditional.get("when"):
            return self._check_simple_conditional(conditional, data, root_data)

        return True

    def evaluate(self, expression, context, result_key="value"):
        if callable(expression):
            return self._call(expression, context, default=None)

        if isinstance(expression, dict) and "var" in expression:
            return get_in(context, expression["var"], expression.get("default"))

        return expression

    # =========================================================================
    # Helpers
    # =========================================================================

    def _call(self, func, context: Dict[str, Any], default: Any) -> Any:
        try:
            return func(context)
        except Exception as e:
            logger.warning(f"Expression evaluation failed, using {default!r}: {e}")
            return default

    def _check_simple_conditional(self, conditional: Dict[str, Any],
                                  data: Dict[str, Any],
                                  root_data: Optional[Dict[str, Any]]) -> bool:
        when = conditional["when"]
        value = get_in(data, when)
        if value is None and root_data is not None:
            value = get_in(root_data, when)

        eq = _as_text(conditional.get("eq"))
        show = _as_text(conditional.get("show")) == "true"

        if isinstance(value, dict) and eq in value:
            return _as_text(value[eq]) == _as_text(show)
        if isinstance(value, (list, tuple)):
            return (eq in [_as_text(v) for v in value]) == show
        return (_as_text(value) == eq) == show


def _as_text(value: Any) -> str:
    """Stringify a value the way conditions compare them."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _item_attr(item: Any, attr: str, key: str) -> Any:
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, attr, None)
