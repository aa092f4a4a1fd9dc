# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-page form sessions.

Provides the session controller and its collaborators for wizards with
conditional pages, branching, validation gating and history navigation.
"""

from .field_component import FieldComponent, BasicFieldComponent
from .form_engine import FormEngine, HeadlessFormEngine
from .wizard_context import WizardContext
from .page_navigator import PageNavigator
from .wizard import Wizard

__all__ = [
    'FieldComponent',
    'BasicFieldComponent',
    'FormEngine',
    'HeadlessFormEngine',
    'WizardContext',
    'PageNavigator',
    'Wizard'
]
