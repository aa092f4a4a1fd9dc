# -*- coding: utf-8 -*-
"""
Page Wizard UI Components
"""

from .action_button import ActionButton
from .wizard_footer import WizardFooter

__all__ = [
    "ActionButton",
    "WizardFooter",
]
