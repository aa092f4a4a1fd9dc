# -*- coding: utf-8 -*-
"""
Tests for condition and branch evaluation.
"""

import pytest

from models.wizard_definition import WizardItem
from services.wizard.condition_evaluator import (
    DefaultConditionEvaluator, GoTo, GoToKey, Terminate, to_branch_result
)


@pytest.fixture
def evaluator():
    return DefaultConditionEvaluator()


class TestBranchResult:
    """Normalization of raw branch values."""

    def test_none_terminates(self):
        assert to_branch_result(None) == Terminate()

    @pytest.mark.parametrize("value,expected", [
        (2, GoTo(2)),
        ("3", GoTo(3)),
        (" 4 ", GoTo(4)),
        (1.0, GoTo(1)),
        (-1, GoTo(-1)),
        ("1.5", GoTo(1)),
        ("2abc", GoTo(2)),
        ("-3", GoTo(-3)),
    ])
    def test_integers_are_indexes(self, value, expected):
        assert to_branch_result(value) == expected

    @pytest.mark.parametrize("value", ["page3", "b2", "", float("inf"), True])
    def test_other_values_are_keys(self, value):
        result = to_branch_result(value)
        assert isinstance(result, GoToKey)
        assert result.key == str(value)

    def test_branch_result_passes_through(self):
        assert to_branch_result(GoToKey("x")) == GoToKey("x")


class TestCheckCondition:
    """Panel visibility conditions."""

    def test_no_condition_is_visible(self, evaluator):
        item = WizardItem.from_dict({"type": "panel", "key": "p"})
        assert evaluator.check_condition(item, {}) is True

    def test_simple_conditional_show_when_equal(self, evaluator):
        item = WizardItem.from_dict({
            "type": "panel", "key": "p",
            "conditional": {"show": True, "when": "kind", "eq": "company"},
        })
        assert evaluator.check_condition(item, {"kind": "company"}) is True
        assert evaluator.check_condition(item, {"kind": "person"}) is False
        assert evaluator.check_condition(item, {}) is False

    def test_simple_conditional_hide_when_equal(self, evaluator):
        item = {"conditional": {"show": "false", "when": "skip", "eq": "true"}}
        assert evaluator.check_condition(item, {"skip": True}) is False
        assert evaluator.check_condition(item, {"skip": False}) is True

    def test_simple_conditional_nested_path(self, evaluator):
        item = {"conditional": {"show": True, "when": "address.country", "eq": "DE"}}
        assert evaluator.check_condition(item, {"address": {"country": "DE"}}) is True

    def test_simple_conditional_list_value(self, evaluator):
        item = {"conditional": {"show": True, "when": "tags", "eq": "b"}}
        assert evaluator.check_condition(item, {"tags": ["a", "b"]}) is True
        assert evaluator.check_condition(item, {"tags": ["a"]}) is False

    def test_simple_conditional_checkbox_map(self, evaluator):
        item = {"conditional": {"show": True, "when": "options", "eq": "x"}}
        assert evaluator.check_condition(item, {"options": {"x": True, "y": False}}) is True
        assert evaluator.check_condition(item, {"options": {"x": False}}) is False

    def test_custom_conditional_callable(self, evaluator):
        item = {"customConditional": lambda ctx: ctx["data"].get("age", 0) >= 18}
        assert evaluator.check_condition(item, {"age": 30}) is True
        assert evaluator.check_condition(item, {"age": 12}) is False

    def test_failing_custom_conditional_defaults_to_visible(self, evaluator):
        item = {"customConditional": lambda ctx: ctx["data"]["missing"]}
        assert evaluator.check_condition(item, {}) is True


class TestEvaluate:
    """Branch expression evaluation."""

    def test_callable_receives_context(self, evaluator):
        seen = {}

        def expression(context):
            seen.update(context)
            return context["next"] + 1

        assert evaluator.evaluate(expression, {"next": 2, "data": {}}, "next") == 3
        assert seen["next"] == 2

    def test_literal_values_are_returned(self, evaluator):
        assert evaluator.evaluate("summary", {}) == "summary"
        assert evaluator.evaluate(None, {}) is None

    def test_var_lookup(self, evaluator):
        context = {"data": {"route": "details"}}
        assert evaluator.evaluate({"var": "data.route"}, context) == "details"

    def test_failing_expression_yields_none(self, evaluator):
        assert evaluator.evaluate(lambda ctx: 1 / 0, {}) is None

    def test_evaluate_branch(self, evaluator):
        assert evaluator.evaluate_branch(lambda ctx: None, {}) == Terminate()
        assert evaluator.evaluate_branch(lambda ctx: "2", {}) == GoTo(2)
        assert evaluator.evaluate_branch("confirm", {}) == GoToKey("confirm")
