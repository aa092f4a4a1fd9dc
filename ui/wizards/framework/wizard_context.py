# -*- coding: utf-8 -*-
"""
Wizard Context - owns the data document of a wizard session.

Pages and components read and write the document through the context; no
component keeps a private copy.
"""

from typing import Dict, Any, Optional
from datetime import datetime
import copy
import uuid

from utils.helpers import get_in, set_in


class WizardContext:
    """Session data shared by every page of a wizard."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = "in_progress"  # in_progress, completed
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()

        # The data document
        self.data: Dict[str, Any] = data if data is not None else {}
        self._initial_data: Dict[str, Any] = copy.deepcopy(self.data)

    @property
    def submission(self) -> Dict[str, Any]:
        """Submission payload sent along with navigation events."""
        return {"data": self.data}

    def update_data(self, key: str, value: Any):
        """Update a (dotted) key of the data document."""
        set_in(self.data, key, value)
        self.updated_at = datetime.now()

    def get_data(self, key: str, default: Any = None) -> Any:
        """Get data from the context."""
        return get_in(self.data, key, default)

    def reset_data(self):
        """Restore the data document to the values the session started with."""
        self.status = "in_progress"
        self.data.clear()
        self.data.update(copy.deepcopy(self._initial_data))
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        return {
            "wizard_id": self.wizard_id,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "data": self.data
        }
