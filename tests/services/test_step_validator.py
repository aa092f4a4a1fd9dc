# -*- coding: utf-8 -*-
"""
Tests for page validation.
"""

from conftest import make_field
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import BasicFieldComponent


def components(*fields):
    return [BasicFieldComponent(field) for field in fields]


class TestCheckPageValidity:
    """Aggregation over a page."""

    def test_all_valid(self):
        page = components(make_field("a"), make_field("b"))
        assert StepValidator.check_page_validity(page, {"a": "1", "b": "2"}) is True

    def test_one_invalid_fails_page(self):
        page = components(make_field("a"), make_field("b"))
        assert StepValidator.check_page_validity(page, {"a": "1"}) is False

    def test_every_component_is_asked(self):
        page = components(make_field("a"), make_field("b"), make_field("c"))
        StepValidator.check_page_validity(page, {"b": "2"}, dirty=True)

        assert [bool(c.errors) for c in page] == [True, False, True]
        assert all(not c.pristine for c in page)

    def test_clean_validation_keeps_errors_silent(self):
        page = components(make_field("a"))
        assert StepValidator.check_page_validity(page, {}, dirty=False) is False
        assert page[0].errors == ["a is required"]
        assert page[0].visible_errors == []

    def test_dirty_validation_shows_errors(self):
        page = components(make_field("a"))
        StepValidator.check_page_validity(page, {}, dirty=True)
        assert page[0].visible_errors == ["a is required"]

    def test_empty_page_is_valid(self):
        assert StepValidator.check_page_validity([], {}) is True


class TestValidatePage:
    """Aggregated results."""

    def test_collects_errors(self):
        page = components(make_field("a"), make_field("b"))
        result = StepValidator.validate_page(page, {}, dirty=True)

        assert result.is_valid is False
        assert result.errors == ["a is required", "b is required"]

    def test_valid_result_has_no_errors(self):
        page = components(make_field("a"))
        result = StepValidator.validate_page(page, {"a": "x"})

        assert result.is_valid is True
        assert result.has_errors() is False


class TestFieldRules:
    """Rules understood by BasicFieldComponent."""

    def test_length_and_pattern(self):
        field = BasicFieldComponent(make_field(
            "zip", validate={"minLength": 5, "maxLength": 5, "pattern": r"\d+"}
        ))
        assert field.check_validity({"zip": "12345"}) is True
        assert field.check_validity({"zip": "12ab"}) is False
        assert len(field.errors) == 2

    def test_optional_empty_field_is_valid(self):
        field = BasicFieldComponent(make_field("nick", required=False))
        assert field.check_validity({}) is True

    def test_custom_rule(self):
        field = BasicFieldComponent(make_field(
            "age", validate={"custom": lambda ctx: True if int(ctx["value"]) >= 18 else "Too young"}
        ))
        assert field.check_validity({"age": "21"}) is True
        assert field.check_validity({"age": "12"}) is False
        assert field.errors == ["Too young"]

    def test_nested_key(self):
        field = BasicFieldComponent(make_field("address.city"))
        assert field.check_validity({"address": {"city": "Aleppo"}}) is True
