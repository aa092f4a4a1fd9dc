# -*- coding: utf-8 -*-
"""
Form Engine - the collaborator that builds, renders and tears down fields.

The wizard never creates widgets itself. It asks the engine for components,
asks it to render the current page, and consults it before advancing or
cancelling.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

from .field_component import FieldComponent, BasicFieldComponent


class FormEngine(ABC):
    """
    Base class for form engines.

    Subclasses must implement create_component(); the hooks default to
    approving every transition.
    """

    @abstractmethod
    def create_component(self, definition: Dict[str, Any],
                         options: Dict[str, Any]) -> FieldComponent:
        """Create a field component from its definition."""
        pass

    def destroy_components(self, components: Iterable[FieldComponent]):
        """Destroy a generation of components before pages are rebuilt."""
        for component in components:
            component.destroy()

    def render(self, wizard: Any):
        """Redraw the wizard's current page. Override to attach to a UI."""
        pass

    def confirm_cancel(self, wizard: Any) -> bool:
        """
        Ask whether cancellation should proceed.

        Returns:
            True to cancel, False to keep the current state
        """
        return True

    def before_next(self, wizard: Any) -> bool:
        """
        Run before advancing to the next page.

        Return False or raise to refuse the transition.
        """
        return True


class HeadlessFormEngine(FormEngine):
    """
    Form engine without widgets.

    Builds BasicFieldComponent instances (or registered types), keeps the
    live generation in ``created``, counts renders and delegates hooks to
    optional callables.
    """

    def __init__(self,
                 component_types: Optional[Dict[str, Type[FieldComponent]]] = None,
                 before_next: Optional[Callable[[Any], bool]] = None,
                 confirm_cancel: Optional[Callable[[Any], bool]] = None):
        self.component_types: Dict[str, Type[FieldComponent]] = dict(component_types or {})
        self.before_next_hook = before_next
        self.confirm_cancel_hook = confirm_cancel
        self.created: List[FieldComponent] = []
        self.destroyed_count = 0
        self.render_count = 0
        self.rendered_keys: List[Optional[str]] = []

    def create_component(self, definition, options):
        component_class = self.component_types.get(definition.get("type"), BasicFieldComponent)
        component = component_class(definition, options)
        self.created.append(component)
        return component

    def destroy_components(self, components):
        components = list(components)
        super().destroy_components(components)
        self.destroyed_count += len(components)
        released = {id(component) for component in components}
        self.created = [c for c in self.created if id(c) not in released]

    def render(self, wizard):
        self.render_count += 1
        self.rendered_keys = [component.key for component in wizard.current_components]

    def confirm_cancel(self, wizard):
        if self.confirm_cancel_hook is None:
            return True
        return self.confirm_cancel_hook(wizard)

    def before_next(self, wizard):
        if self.before_next_hook is None:
            return True
        return self.before_next_hook(wizard)
