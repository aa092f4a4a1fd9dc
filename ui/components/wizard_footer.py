# -*- coding: utf-8 -*-
"""
Wizard Footer Component - controls and breadcrumb bar bound to a Wizard.

Each button runs its wizard action and stays disabled until the action
finished, whether it succeeded or was rejected.
"""

from typing import Callable, Dict, List

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout
from PyQt5.QtCore import pyqtSignal

from services.exceptions import WizardException
from ui.components.action_button import ActionButton
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardFooter(QWidget):
    """
    Footer with Cancel/Previous/Next/Submit buttons and breadcrumb links.

    Signals:
        action_failed: Emitted with (action, message) when a transition is rejected
        action_done: Emitted with the action name after a successful transition

    Usage:
        footer = WizardFooter(wizard)
        footer.action_failed.connect(self._show_error)
    """

    # Signals
    action_failed = pyqtSignal(str, str)
    action_done = pyqtSignal(str)

    def __init__(self, wizard, cancel_text: str = "Cancel", previous_text: str = "Previous",
                 next_text: str = "Next", submit_text: str = "Submit", parent=None):
        """
        Initialize wizard footer.

        Args:
            wizard: Wizard session the controls drive
            cancel_text: Text for cancel button
            previous_text: Text for previous button
            next_text: Text for next button
            submit_text: Text for submit button
            parent: Parent widget
        """
        super().__init__(parent)
        self.wizard = wizard
        self.link_buttons: List[ActionButton] = []

        self._setup_ui(cancel_text, previous_text, next_text, submit_text)

        self.wizard.page_changed.connect(self.refresh)
        self.wizard.pages_rebuilt.connect(self.refresh)
        self.wizard.form_loaded.connect(self.refresh)
        self.refresh()

    def _setup_ui(self, cancel_text: str, previous_text: str, next_text: str, submit_text: str):
        """Setup footer UI."""
        self.setStyleSheet("""
            QWidget {
                background-color: #f8f9fa;
                border-top: 1px solid #dee2e6;
            }
        """)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(20, 16, 20, 16)
        main_layout.setSpacing(12)

        self.breadcrumb_layout = QHBoxLayout()
        self.breadcrumb_layout.setSpacing(4)
        main_layout.addLayout(self.breadcrumb_layout)

        layout = QHBoxLayout()
        layout.setSpacing(12)
        main_layout.addLayout(layout)

        # Left side (Cancel)
        self.btn_cancel = ActionButton(cancel_text, variant="secondary")
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        # Right side (Previous, Next, Submit)
        self.btn_previous = ActionButton(previous_text, variant="secondary")
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(next_text, variant="primary")
        layout.addWidget(self.btn_next)

        self.btn_submit = ActionButton(submit_text, variant="primary")
        layout.addWidget(self.btn_submit)

        self.action_buttons: Dict[str, ActionButton] = {
            "cancel": self.btn_cancel,
            "previous": self.btn_previous,
            "next": self.btn_next,
            "submit": self.btn_submit,
        }
        handlers: Dict[str, Callable] = {
            "cancel": self.wizard.cancel,
            "previous": self.wizard.prev_page,
            "next": self.wizard.next_page,
            "submit": self.wizard.submit,
        }
        for name, button in self.action_buttons.items():
            button.clicked.connect(
                lambda _checked=False, n=name, h=handlers[name]: self._run_action(n, h)
            )

    def _run_action(self, name: str, handler: Callable):
        """Run a wizard action with its button disabled for the duration."""
        button = self.action_buttons[name]
        button.set_loading(True)
        try:
            handler()
        except WizardException as e:
            logger.warning(f"Action '{name}' failed: {e}")
            self.action_failed.emit(name, str(e))
        except Exception as e:
            logger.error(f"Unexpected error in action '{name}'", exc_info=True)
            self.action_failed.emit(name, str(e))
        else:
            self.action_done.emit(name)
        finally:
            button.set_loading(False)
            self.refresh()

    def refresh(self, *args):
        """Show the actions available for the current page and rebuild links."""
        buttons = self.wizard.buttons
        for name, button in self.action_buttons.items():
            button.setVisible(name in buttons)
        self._rebuild_links()

    def _rebuild_links(self):
        for button in self.link_buttons:
            self.breadcrumb_layout.removeWidget(button)
            button.deleteLater()
        self.link_buttons = []

        clickable = bool(self.wizard.options["breadcrumbSettings"].get("clickable"))
        for link in self.wizard.breadcrumb_links():
            button = ActionButton(link["title"], variant="link")
            button.setCheckable(True)
            button.setChecked(link["current"])
            button.setEnabled(clickable)
            button.clicked.connect(
                lambda _checked=False, index=link["index"]: self._go_to_link(index)
            )
            self.breadcrumb_layout.addWidget(button)
            self.link_buttons.append(button)

    def _go_to_link(self, index: int):
        try:
            self.wizard.go_to_link(index)
        except WizardException as e:
            logger.warning(f"Breadcrumb jump to page {index} failed: {e}")
            self.action_failed.emit("link", str(e))
        except Exception as e:
            logger.error(f"Unexpected error jumping to page {index}", exc_info=True)
            self.action_failed.emit("link", str(e))
        self.refresh()
