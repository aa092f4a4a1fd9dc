# -*- coding: utf-8 -*-
"""
Page Graph Builder - turns the static definition into the current pages.

This is the only place field components are instantiated. Callers must
destroy the previous generation of components before building again.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from models.page import Page
from models.wizard_definition import ItemKind, WizardDefinition, WizardItem
from services.wizard.condition_evaluator import ConditionEvaluator
from utils.logger import get_logger

logger = get_logger(__name__)

ComponentFactory = Callable[[Dict[str, Any], Dict[str, Any]], Any]


def is_panel_visible(item: WizardItem, data: Dict[str, Any],
                     evaluator: ConditionEvaluator, form: Any = None,
                     instance: Any = None) -> bool:
    """Check a panel's condition; panels without one are always visible."""
    if not item.has_condition:
        return True
    return evaluator.check_condition(item, data, data, form, instance)


def calculate_visible_panels(definition: WizardDefinition, data: Dict[str, Any],
                             evaluator: ConditionEvaluator,
                             instance: Any = None) -> List[WizardItem]:
    """Return the panels visible for ``data``, in definition order."""
    return [
        item for item in definition.items
        if item.kind is ItemKind.PANEL
        and is_panel_visible(item, data, evaluator, definition.raw, instance)
    ]


def build_pages(definition: WizardDefinition, data: Dict[str, Any],
                create_component: ComponentFactory,
                evaluator: ConditionEvaluator,
                options: Optional[Dict[str, Any]] = None,
                instance: Any = None) -> Tuple[List[Page], List[Any]]:
    """
    Build the visible pages and the global components.

    Args:
        definition: Wizard definition
        data: Data document the conditions are evaluated against
        create_component: Factory creating a field component from its definition
        evaluator: Condition evaluator
        options: Options copied into every component
        instance: Owning wizard, passed through to conditions

    Returns:
        Tuple of (pages, global_components)
    """
    pages: List[Page] = []
    global_components: List[Any] = []

    for item in definition.items:
        component_options = dict(options or {})

        if item.kind is ItemKind.PANEL:
            if not is_panel_visible(item, data, evaluator, definition.raw, instance):
                logger.debug(f"Panel '{item.key}' hidden by condition")
                continue

            page = Page(item=item, index=len(pages))
            for child in item.components:
                component = create_component(child, component_options)
                component.page = page.index
                page.components.append(component)
            pages.append(page)

        elif item.kind is ItemKind.HIDDEN:
            global_components.append(create_component(item.raw, component_options))

    logger.debug(
        f"Built {len(pages)} page(s) and {len(global_components)} global component(s)"
    )
    return pages, global_components
