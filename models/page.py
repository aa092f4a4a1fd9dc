# -*- coding: utf-8 -*-
"""
Page model - a visible panel materialized for the current build cycle.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .wizard_definition import WizardItem, page_id


@dataclass
class Page:
    """
    A page of the wizard.

    Pages are rebuilt wholesale whenever the set of visible panels changes,
    so ``index`` is only meaningful for the build cycle that created it.
    """

    item: WizardItem
    index: int
    components: List[Any] = field(default_factory=list)

    @property
    def key(self) -> Optional[str]:
        if self.item.key:
            return self.item.key
        if self.item.components:
            return page_id(self.item.components[0])
        return self.item.title

    @property
    def title(self) -> str:
        return self.item.title or self.key or f"Page {self.index + 1}"

    @property
    def next_page(self) -> Any:
        """Branch expression overriding the default next page."""
        return self.item.next_page

    @property
    def has_branch(self) -> bool:
        return self.item.next_page is not None
