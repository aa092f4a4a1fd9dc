# -*- coding: utf-8 -*-
"""
Wizard definition model.

A definition is the static, ordered list of items a wizard is built from.
Only panels and hidden fields take part in paging; other item types are
dropped when the definition is loaded.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ItemKind(Enum):
    """Kind of a top-level wizard item."""
    PANEL = "panel"
    HIDDEN = "hidden"


@dataclass
class WizardItem:
    """
    Top-level item of a wizard definition.

    Panels become pages; hidden items become global components present on
    every page.
    """

    kind: ItemKind
    key: Optional[str] = None
    title: Optional[str] = None
    conditional: Optional[Dict[str, Any]] = None
    custom_conditional: Any = None
    next_page: Any = None
    components: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_panel(self) -> bool:
        return self.kind is ItemKind.PANEL

    @property
    def has_condition(self) -> bool:
        """Check if visibility depends on the data document."""
        if self.custom_conditional is not None:
            return True
        return bool(self.conditional and self.conditional.get("when"))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['WizardItem']:
        """
        Create an item from its dictionary form.

        Returns:
            WizardItem, or None for item types the wizard does not page
        """
        try:
            kind = ItemKind(data.get("type"))
        except ValueError:
            return None

        return cls(
            kind=kind,
            key=data.get("key"),
            title=data.get("title"),
            conditional=data.get("conditional"),
            custom_conditional=data.get("customConditional"),
            next_page=data.get("nextPage"),
            components=list(data.get("components") or []) if kind is ItemKind.PANEL else [],
            raw=data,
        )


def page_id(item: Dict[str, Any]) -> Optional[str]:
    """
    Resolve the key identifying a page.

    Uses the item key, then the first child's id (recursively), then the title.
    """
    if item.get("key"):
        return item["key"]
    children = item.get("components") or []
    if children:
        return page_id(children[0])
    return item.get("title")


@dataclass
class WizardDefinition:
    """Static wizard definition loaded once per form."""

    items: List[WizardItem] = field(default_factory=list)
    key: str = "form"
    title: str = ""
    display: str = "wizard"
    full: bool = False
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def panels(self) -> List[WizardItem]:
        """All panel items, visible or not, in definition order."""
        return [item for item in self.items if item.kind is ItemKind.PANEL]

    @property
    def hidden_items(self) -> List[WizardItem]:
        return [item for item in self.items if item.kind is ItemKind.HIDDEN]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardDefinition':
        """Create a definition from a form schema dictionary."""
        items = []
        for component in data.get("components") or []:
            item = WizardItem.from_dict(component)
            if item is not None:
                items.append(item)

        return cls(
            items=items,
            key=data.get("key") or data.get("name") or "form",
            title=data.get("title", ""),
            display=data.get("display", "wizard"),
            full=bool(data.get("full", False)),
            raw=data,
        )
