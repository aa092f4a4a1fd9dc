# -*- coding: utf-8 -*-
"""
Wizard navigation services.

Pure building blocks of the wizard state machine: page graph building,
page validation, next/previous resolution, history and action availability.
"""

__all__ = [
    "HistoryStack",
    "ConditionEvaluator",
    "DefaultConditionEvaluator",
    "StepValidator",
    "StepValidationResult",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies with the models package."""
    if name == "HistoryStack":
        from .history_stack import HistoryStack
        return HistoryStack
    elif name == "ConditionEvaluator":
        from .condition_evaluator import ConditionEvaluator
        return ConditionEvaluator
    elif name == "DefaultConditionEvaluator":
        from .condition_evaluator import DefaultConditionEvaluator
        return DefaultConditionEvaluator
    elif name == "StepValidator":
        from .step_validator import StepValidator
        return StepValidator
    elif name == "StepValidationResult":
        from .step_validator import StepValidationResult
        return StepValidationResult
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
