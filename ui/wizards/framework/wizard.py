# -*- coding: utf-8 -*-
"""
Wizard - session controller of a multi-page form.

Provides:
- Page building from a definition, rebuilt when page visibility changes
- Validation-gated forward navigation with branching
- History-based backward navigation
- Cancel, submit and breadcrumb jumps
- Action availability for the host UI
"""

from typing import Any, Dict, List, Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal

from app.config import Config
from models.navigation_state import NavigationState
from models.page import Page
from models.wizard_definition import WizardDefinition, WizardItem
from services.exceptions import (
    HookRejected, NavigationNotAllowed, PageNotFound, ValidationFailed,
    WizardException
)
from services.wizard.action_resolver import ACTION_SUBMIT, available_actions, is_action_available
from services.wizard.condition_evaluator import ConditionEvaluator, DefaultConditionEvaluator
from services.wizard.navigation_engine import get_next_page, get_previous_page
from services.wizard.page_graph_builder import build_pages, calculate_visible_panels
from services.wizard.step_validator import StepValidator
from utils.helpers import set_in
from utils.logger import get_logger

from .error_boundary import with_transition_guard
from .field_component import FieldComponent
from .form_engine import FormEngine, HeadlessFormEngine
from .page_navigator import PageNavigator
from .wizard_context import WizardContext

logger = get_logger(__name__)

_UNSET = object()


class Wizard(QObject):
    """
    Multi-page form session.

    Options:
    - readOnly: skip validation on next, never offer submit
    - buttonSettings: showPrevious/showNext/showCancel
    - breadcrumbSettings: clickable
    """

    # Signals
    form_loaded = pyqtSignal(dict)       # formLoad: the form schema
    page_advanced = pyqtSignal(dict)     # nextPage: {page, submission}
    page_retreated = pyqtSignal(dict)    # prevPage: {page, submission}
    page_changed = pyqtSignal(int, int)  # old_index, new_index
    pages_rebuilt = pyqtSignal(int)      # number of visible pages
    validation_failed = pyqtSignal(list)
    wizard_cancelled = pyqtSignal()
    submit_requested = pyqtSignal(dict)  # submission

    def __init__(self,
                 engine: Optional[FormEngine] = None,
                 evaluator: Optional[ConditionEvaluator] = None,
                 options: Optional[Dict[str, Any]] = None,
                 context: Optional[WizardContext] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the wizard.

        Args:
            engine: Form engine building and rendering components
            evaluator: Condition and branch evaluator
            options: Wizard options (readOnly, buttonSettings, breadcrumbSettings)
            context: Context owning the data document
            parent: Parent QObject
        """
        super().__init__(parent)
        self.engine = engine or HeadlessFormEngine()
        self.evaluator = evaluator or DefaultConditionEvaluator()
        self.options: Dict[str, Any] = dict(options or {})
        self.context = context or WizardContext()

        self.definition: Optional[WizardDefinition] = None
        self.state = NavigationState()
        self.panels: List[WizardItem] = []
        self.global_components: List[FieldComponent] = []
        self._transition: Optional[str] = None

        self.navigator = PageNavigator(self.state, redraw=self.redraw)
        self.navigator.page_changed.connect(self.page_changed.emit)

        self._init_settings()

    def _init_settings(self):
        """Merge button and breadcrumb options over the configured defaults."""
        self.options["buttonSettings"] = Config.button_settings(
            self.read_only, self.options.get("buttonSettings")
        )
        self.options["breadcrumbSettings"] = Config.breadcrumb_settings(
            self.options.get("breadcrumbSettings")
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def pages(self) -> List[Page]:
        return self.navigator.pages

    @property
    def current_page(self) -> int:
        return self.state.current_page

    @property
    def history(self):
        return self.state.history

    @property
    def full(self) -> bool:
        return self.state.full

    @property
    def data(self) -> Dict[str, Any]:
        return self.context.data

    @property
    def submission(self) -> Dict[str, Any]:
        return self.context.submission

    @property
    def read_only(self) -> bool:
        return bool(self.options.get("readOnly"))

    @property
    def schema(self) -> Optional[WizardDefinition]:
        return self.definition

    @property
    def wizard_key(self) -> str:
        key = self.definition.key if self.definition else ""
        return f"{Config.WIZARD_KEY_PREFIX}-{key}"

    @property
    def current_components(self) -> List[FieldComponent]:
        """Global components followed by the current page's components."""
        return self.global_components + self._page_components(self.current_page)

    @property
    def progress(self) -> float:
        """Position of the current page as a percentage of the visible pages."""
        return self.navigator.get_progress_percentage()

    @property
    def buttons(self) -> Dict[str, bool]:
        """Available actions in display order, e.g. {"cancel": True, "next": True}."""
        return available_actions(
            self.current_page,
            self.get_next_page(),
            len(self.pages),
            self.options["buttonSettings"],
            self.read_only
        )

    # =========================================================================
    # Form lifecycle
    # =========================================================================

    def set_form(self, form: Union[WizardDefinition, Dict[str, Any], None]) -> Optional[WizardDefinition]:
        """
        Load a wizard definition and show its first page.

        Args:
            form: WizardDefinition or form schema dictionary

        Returns:
            The loaded definition, or None when no form was given
        """
        if not form:
            return None
        if isinstance(form, dict):
            form = WizardDefinition.from_dict(form)

        if self.definition is not None:
            self.destroy_components()

        self.definition = form
        self.state.full = form.full
        self.navigator.reset()
        self._init_settings()
        self.add_components()
        self.redraw()

        logger.info(f"Loaded wizard '{form.key}' with {len(self.pages)} visible page(s)")
        self.form_loaded.emit(form.raw)
        return form

    def add_components(self):
        """Build pages and global components for the current data."""
        pages, global_components = build_pages(
            self.definition,
            self.data,
            self.engine.create_component,
            self.evaluator,
            self.options,
            instance=self
        )
        self.global_components = global_components
        self.panels = [page.item for page in pages]
        self.navigator.set_pages(pages)

    def destroy_components(self):
        """Destroy every page and global component of the current generation."""
        components = list(self.global_components)
        for page in self.pages:
            components.extend(page.components)
        self.engine.destroy_components(components)

        self.global_components = []
        self.panels = []
        self.navigator.set_pages([])

    def redraw(self):
        if self.definition is None:
            return
        self.engine.render(self)

    def rebuild(self):
        """Tear down all components and build them again from scratch."""
        self.destroy_components()
        self.add_components()
        self.navigator.clamp()
        self.redraw()
        self.pages_rebuilt.emit(len(self.pages))

    def on_change(self, changed: Any = None) -> bool:
        """
        React to a data change.

        Only rebuilds when the set of visible panels changed.

        Args:
            changed: The changed values, logged for tracing

        Returns:
            True if the pages were rebuilt
        """
        if self.definition is None:
            return False

        panels = calculate_visible_panels(self.definition, self.data, self.evaluator, instance=self)
        if panels == self.panels:
            logger.debug(f"Data changed ({changed!r}), visible panels unchanged")
            return False

        logger.info(
            f"Visible panels changed ({len(self.panels)} → {len(panels)}), rebuilding pages"
        )
        self.rebuild()
        return True

    def set_value(self, key: str, value: Any) -> bool:
        """
        Write a value into the data document and re-check page visibility.

        Returns:
            True if the pages were rebuilt
        """
        set_in(self.data, key, value)
        return self.on_change({key: value})

    # =========================================================================
    # Navigation queries
    # =========================================================================

    def get_next_page(self, data: Optional[Dict[str, Any]] = None,
                      current_page: Optional[int] = None) -> Optional[int]:
        """Resolve the page after ``current_page`` (defaults to the current page)."""
        return get_next_page(
            self.pages,
            self.data if data is None else data,
            self.current_page if current_page is None else current_page,
            self.evaluator
        )

    def get_previous_page(self) -> int:
        """Pop the history stack or fall back to the page before the current one."""
        return get_previous_page(self.state.history, self.current_page)

    def check_page_validity(self, data: Optional[Dict[str, Any]] = None,
                            dirty: bool = False, page: Optional[int] = None) -> bool:
        """Validate the global components and the components of ``page``."""
        page = self.current_page if page is None else page
        components = self.global_components + self._page_components(page)
        return StepValidator.check_page_validity(
            components, self.data if data is None else data, dirty
        )

    def has_button(self, name: str, next_page: Any = _UNSET) -> bool:
        """Check if the action ``name`` is currently available."""
        if next_page is _UNSET:
            next_page = self.get_next_page()
        return is_action_available(
            name,
            self.current_page,
            next_page,
            len(self.pages),
            self.options["buttonSettings"],
            self.read_only
        )

    def breadcrumb_links(self) -> List[Dict[str, Any]]:
        """Describe the visible pages for a breadcrumb bar."""
        return [
            {
                "index": page.index,
                "key": page.key,
                "title": page.title,
                "current": page.index == self.current_page,
            }
            for page in self.pages
        ]

    # =========================================================================
    # Transitions
    # =========================================================================

    @with_transition_guard("set_page")
    def set_page(self, target: Optional[int]) -> bool:
        """
        Show the page at ``target``.

        Raises:
            PageNotFound: target is outside the visible pages
        """
        return self.navigator.set_page(target)

    def go_to_link(self, index: int) -> bool:
        """Jump to a page from the breadcrumb bar."""
        if not self.options["breadcrumbSettings"].get("clickable"):
            raise NavigationNotAllowed("Breadcrumb links are not clickable")
        return self.set_page(index)

    @with_transition_guard("next_page")
    def next_page(self) -> int:
        """
        Advance to the next page.

        Read-only forms advance without validation. Otherwise the current
        page must validate and the before-next hook must approve.

        Returns:
            The new current page index

        Raises:
            ValidationFailed: the current page has errors
            HookRejected: the before-next hook refused
            PageNotFound: there is no page to advance to
        """
        current = self.current_page

        if not self.read_only:
            if not self.check_page_validity(self.data, True):
                errors = StepValidator.collect_errors(self.current_components)
                logger.warning(f"Page {current} validation failed: {errors}")
                self.validation_failed.emit(errors)
                raise ValidationFailed(errors, page=current)

            self._call_hook("before_next", self.engine.before_next)

        target = self.get_next_page(self.data, current)
        if target is None and not self.full:
            raise PageNotFound(None, len(self.pages))

        logger.info(f"Navigating: Page {current} → {target}")
        self.state.history.push(current)
        try:
            self.navigator.set_page(target)
        except Exception:
            self.state.history.pop()
            raise

        self.page_advanced.emit(self._page_event())
        return self.current_page

    @with_transition_guard("prev_page")
    def prev_page(self) -> int:
        """
        Go back to the previously visited page.

        A rejected target or a failed redraw puts the popped history entry back.

        Returns:
            The new current page index
        """
        from_history = bool(self.state.history)
        target = self.get_previous_page()

        logger.info(f"Navigating back: Page {self.current_page} → {target}")
        try:
            self.navigator.set_page(target)
        except Exception:
            if from_history:
                self.state.history.push(target)
            raise

        self.page_retreated.emit(self._page_event())
        return self.current_page

    @with_transition_guard("cancel")
    def cancel(self, no_confirm: bool = False) -> bool:
        """
        Cancel the session.

        When confirmed, resets the data document, clears the history and
        returns to the first page.

        Returns:
            True if the wizard was reset, False if cancellation was declined
        """
        if not no_confirm and not self._call_hook("confirm_cancel", self.engine.confirm_cancel,
                                                  raise_on_false=False):
            self.navigator.set_page(None)
            logger.debug("Cancellation declined")
            return False

        self.context.reset_data()
        self.on_change()
        self.state.history.clear()
        self.navigator.set_page(0)

        logger.info("Wizard cancelled, back to the first page")
        self.wizard_cancelled.emit()
        return True

    @with_transition_guard("submit")
    def submit(self) -> Dict[str, Any]:
        """
        Validate every visible page and request submission.

        Returns:
            The submission payload

        Raises:
            NavigationNotAllowed: submit is not available on this page
            ValidationFailed: any visible component has errors
        """
        if not self.has_button(ACTION_SUBMIT):
            raise NavigationNotAllowed("Submit is not available on this page")

        components = list(self.global_components)
        for page in self.pages:
            components.extend(page.components)

        result = StepValidator.validate_page(components, self.data, dirty=True)
        if not result.is_valid:
            self.validation_failed.emit(result.errors)
            raise ValidationFailed(result.errors, page=self.current_page)

        self.context.status = "completed"
        submission = self.submission
        logger.info(f"Submission requested from page {self.current_page}")
        self.submit_requested.emit(submission)
        return submission

    # =========================================================================
    # Helpers
    # =========================================================================

    def _page_components(self, page: int) -> List[FieldComponent]:
        if page is not None and 0 <= page < len(self.pages):
            return list(self.pages[page].components)
        return []

    def _page_event(self) -> Dict[str, Any]:
        return {"page": self.current_page, "submission": self.submission}

    def _call_hook(self, name: str, hook, raise_on_false: bool = True) -> bool:
        """Run an engine hook, turning refusals and errors into HookRejected."""
        try:
            approved = hook(self)
        except WizardException:
            raise
        except Exception as e:
            raise HookRejected(name, original_error=e) from e

        if approved is False and raise_on_false:
            raise HookRejected(name)
        return approved is not False
