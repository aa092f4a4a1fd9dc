# -*- coding: utf-8 -*-
"""
Page Wizard Data Models
"""

from .wizard_definition import ItemKind, WizardItem, WizardDefinition, page_id
from .page import Page
from .navigation_state import NavigationState

__all__ = [
    "ItemKind",
    "WizardItem",
    "WizardDefinition",
    "page_id",
    "Page",
    "NavigationState",
]
