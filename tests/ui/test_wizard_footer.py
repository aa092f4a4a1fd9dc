# -*- coding: utf-8 -*-
"""
Tests for the WizardFooter and ActionButton UI components.
"""
import pytest

from conftest import FailingRenderEngine
from ui.components import ActionButton, WizardFooter
from ui.wizards.framework import HeadlessFormEngine


@pytest.fixture
def make_footer(qapp, qtbot):
    def _make(wizard):
        footer = WizardFooter(wizard)
        qtbot.addWidget(footer)
        return footer
    return _make


class TestActionButton:

    def test_invalid_variant(self, qapp):
        with pytest.raises(ValueError):
            ActionButton("Next", variant="danger")

    def test_loading_state(self, qapp):
        button = ActionButton("Next")

        button.set_loading(True)
        assert not button.isEnabled()
        assert button.text() == "Next …"

        button.set_loading(False)
        assert button.isEnabled()
        assert button.text() == "Next"


class TestButtonVisibility:

    def test_first_page(self, make_wizard, make_footer, linear_form):
        footer = make_footer(make_wizard(linear_form))

        assert not footer.btn_cancel.isHidden()
        assert not footer.btn_next.isHidden()
        assert footer.btn_previous.isHidden()
        assert footer.btn_submit.isHidden()

    def test_last_page(self, make_wizard, make_footer, linear_form):
        wizard = make_wizard(linear_form)
        footer = make_footer(wizard)

        wizard.set_page(2)

        assert footer.btn_next.isHidden()
        assert not footer.btn_submit.isHidden()
        assert not footer.btn_previous.isHidden()

    def test_read_only_hides_cancel(self, make_wizard, make_footer, linear_form):
        footer = make_footer(make_wizard(linear_form, options={"readOnly": True}))
        assert footer.btn_cancel.isHidden()


class TestActions:

    def test_next_click(self, make_wizard, make_footer, linear_form, filled_data):
        wizard = make_wizard(linear_form, data=filled_data)
        footer = make_footer(wizard)
        done = []
        footer.action_done.connect(done.append)

        footer.btn_next.click()

        assert wizard.current_page == 1
        assert done == ["next"]
        assert not footer.btn_previous.isHidden()

    def test_button_disabled_while_hook_runs(self, make_wizard, make_footer, linear_form, filled_data):
        seen = []
        engine = HeadlessFormEngine(before_next=lambda wizard: seen.append(footer.btn_next.isEnabled()) or True)
        wizard = make_wizard(linear_form, data=filled_data, wizard_engine=engine)
        footer = make_footer(wizard)

        footer.btn_next.click()

        assert seen == [False]
        assert footer.btn_next.isEnabled()
        assert footer.btn_next.text() == "Next"

    def test_button_reenabled_after_rejection(self, make_wizard, make_footer, linear_form):
        wizard = make_wizard(linear_form)
        footer = make_footer(wizard)
        failures = []
        footer.action_failed.connect(lambda action, message: failures.append((action, message)))

        footer.btn_next.click()

        assert wizard.current_page == 0
        assert failures == [("next", "Page validation failed: a is required")]
        assert footer.btn_next.isEnabled()

    def test_button_reenabled_after_hook_error(self, make_wizard, make_footer, linear_form, filled_data):
        def failing(wizard):
            raise RuntimeError("offline")

        engine = HeadlessFormEngine(before_next=failing)
        wizard = make_wizard(linear_form, data=filled_data, wizard_engine=engine)
        footer = make_footer(wizard)
        failures = []
        footer.action_failed.connect(lambda action, message: failures.append(action))

        footer.btn_next.click()

        assert failures == ["next"]
        assert footer.btn_next.isEnabled()

    def test_unexpected_error_stays_in_the_slot(self, make_wizard, make_footer, linear_form, filled_data):
        engine = FailingRenderEngine()
        wizard = make_wizard(linear_form, data=filled_data, wizard_engine=engine)
        footer = make_footer(wizard)
        failures = []
        footer.action_failed.connect(lambda action, message: failures.append((action, message)))
        engine.fail = True

        footer.btn_next.click()

        assert failures == [("next", "render failed")]
        assert wizard.current_page == 0
        assert footer.btn_next.isEnabled()
        assert footer.btn_previous.isHidden()

    def test_cancel_click(self, make_wizard, make_footer, linear_form, filled_data):
        wizard = make_wizard(linear_form, data=filled_data)
        footer = make_footer(wizard)
        wizard.next_page()

        footer.btn_cancel.click()

        assert wizard.current_page == 0
        assert footer.btn_previous.isHidden()


class TestBreadcrumbLinks:

    def test_links_follow_pages(self, make_wizard, make_footer, linear_form):
        wizard = make_wizard(linear_form)
        footer = make_footer(wizard)

        assert [b.text() for b in footer.link_buttons] == ["Page1", "Page2", "Page3"]
        assert [b.isChecked() for b in footer.link_buttons] == [True, False, False]

    def test_link_click_jumps(self, make_wizard, make_footer, linear_form):
        wizard = make_wizard(linear_form)
        footer = make_footer(wizard)

        footer.link_buttons[2].click()

        assert wizard.current_page == 2
        assert [b.isChecked() for b in footer.link_buttons] == [False, False, True]

    def test_links_disabled_when_not_clickable(self, make_wizard, make_footer, linear_form):
        wizard = make_wizard(linear_form, options={"breadcrumbSettings": {"clickable": False}})
        footer = make_footer(wizard)

        assert not any(b.isEnabled() for b in footer.link_buttons)

    def test_links_follow_rebuild(self, make_wizard, make_footer, conditional_form):
        wizard = make_wizard(conditional_form)
        footer = make_footer(wizard)
        assert len(footer.link_buttons) == 2

        wizard.set_value("showMiddle", "yes")

        assert [b.text() for b in footer.link_buttons] == ["Page1", "Middle", "Page3"]

