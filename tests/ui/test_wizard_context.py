# -*- coding: utf-8 -*-
"""
Tests for WizardContext.
"""
from ui.wizards.framework import WizardContext


class TestWizardContext:

    def test_shares_the_data_document(self):
        data = {"a": 1}
        context = WizardContext(data)

        assert context.data is data
        assert context.submission == {"data": data}

    def test_update_and_get(self):
        context = WizardContext()

        context.update_data("owner.name", "Lina")

        assert context.get_data("owner.name") == "Lina"
        assert context.get_data("owner.phone", "-") == "-"

    def test_reset_keeps_identity(self):
        data = {"owner": {"name": "Lina"}}
        context = WizardContext(data)
        context.update_data("owner.name", "Sami")
        context.update_data("extra", True)

        context.reset_data()

        assert context.data is data
        assert data == {"owner": {"name": "Lina"}}

    def test_to_dict(self):
        context = WizardContext({"a": 1})
        result = context.to_dict()

        assert result["status"] == "in_progress"
        assert result["data"] == {"a": 1}
        assert result["wizard_id"] == context.wizard_id

    def test_reset_reopens_the_session(self):
        context = WizardContext({"a": 1})
        context.status = "completed"

        context.reset_data()

        assert context.status == "in_progress"
