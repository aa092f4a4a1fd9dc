# -*- coding: utf-8 -*-
"""
Shared fixtures for the wizard test suite.
"""
import os
import sys
from pathlib import Path

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.wizard.condition_evaluator import DefaultConditionEvaluator
from ui.wizards.framework import HeadlessFormEngine, Wizard, WizardContext


def make_field(key, required=True, **extra):
    """Build a text field definition."""
    field = {"type": "textfield", "key": key, "label": key, "input": True}
    if required:
        field["validate"] = {"required": True}
    field.update(extra)
    return field


def make_panel(key, fields=None, **extra):
    """Build a panel definition with the given field keys."""
    panel = {
        "type": "panel",
        "key": key,
        "title": key.title(),
        "components": [make_field(f) for f in (fields or [])],
    }
    panel.update(extra)
    return panel


class FailingRenderEngine(HeadlessFormEngine):
    """Headless engine whose render raises while ``fail`` is set."""

    def __init__(self):
        super().__init__()
        self.fail = False

    def render(self, wizard):
        if self.fail:
            raise RuntimeError("render failed")
        super().render(wizard)


def make_form(*items, **extra):
    form = {"key": "testWizard", "title": "Test Wizard", "display": "wizard",
            "components": list(items)}
    form.update(extra)
    return form


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture
def evaluator():
    return DefaultConditionEvaluator()


@pytest.fixture
def engine():
    return HeadlessFormEngine()


@pytest.fixture
def linear_form():
    """Three pages, no conditions, no branches."""
    return make_form(
        make_panel("page1", ["a"]),
        make_panel("page2", ["b"]),
        make_panel("page3", ["c"]),
    )


@pytest.fixture
def filled_data():
    return {"a": "one", "b": "two", "c": "three"}


@pytest.fixture
def make_wizard(engine):
    """Factory creating a wizard with a loaded form."""
    created = []

    def _make(form, data=None, options=None, wizard_engine=None):
        wizard = Wizard(
            engine=wizard_engine or engine,
            options=options,
            context=WizardContext(data if data is not None else {})
        )
        wizard.set_form(form)
        created.append(wizard)
        return wizard

    yield _make

    for wizard in created:
        wizard.deleteLater()


@pytest.fixture
def conditional_form():
    """Middle page shown only when showMiddle is "yes"."""
    return make_form(
        make_panel("page1", ["a"]),
        make_panel("middle", ["b"], conditional={"show": True, "when": "showMiddle", "eq": "yes"}),
        make_panel("page3", ["c"]),
    )
