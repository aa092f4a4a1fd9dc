# -*- coding: utf-8 -*-
"""
Action Button Component - wizard control button with a loading state.

Variants:
- primary: main actions (Next, Submit)
- secondary: Cancel, Previous
- link: breadcrumb entries
"""

from PyQt5.QtWidgets import QPushButton


_STYLES = {
    "primary": """
        QPushButton {
            background-color: #0d6efd;
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
        }
        QPushButton:hover {
            background-color: #0b5ed7;
        }
        QPushButton:disabled {
            background-color: #6c757d;
        }
    """,
    "secondary": """
        QPushButton {
            background-color: #6c757d;
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
        }
        QPushButton:hover {
            background-color: #5c636a;
        }
        QPushButton:disabled {
            background-color: #adb5bd;
        }
    """,
    "link": """
        QPushButton {
            background: transparent;
            color: #0d6efd;
            border: none;
            padding: 4px 8px;
        }
        QPushButton:checked {
            font-weight: bold;
            color: #212529;
        }
        QPushButton:disabled {
            color: #6c757d;
        }
    """,
}


class ActionButton(QPushButton):
    """
    Button used by the wizard footer.

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn.set_loading(True)
    """

    LOADING_SUFFIX = " …"

    def __init__(self, text: str, variant: str = "primary", parent=None):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary" or "link"
            parent: Parent widget
        """
        super().__init__(text, parent)
        if variant not in _STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {', '.join(_STYLES)}")
        self.variant = variant
        self.base_text = text
        self.loading = False
        self.setStyleSheet(_STYLES[variant])

    def set_loading(self, loading: bool):
        """Disable the button and mark it busy while its action runs."""
        self.loading = loading
        self.setEnabled(not loading)
        self.setText(self.base_text + self.LOADING_SUFFIX if loading else self.base_text)
