# -*- coding: utf-8 -*-
"""
Application configuration for the page wizard runtime.

Defaults live on the ``Config`` dataclass; a ``.env`` file or the process
environment can override the logging and navigation defaults.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Dict, Any, Optional
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
try:
    from dotenv import load_dotenv
    load_dotenv()  # Load from .env file in project root
except ImportError:
    pass  # dotenv not installed - will use defaults


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_LOG_DIR = os.getenv("WIZARD_LOG_DIR", None)
_LOG_LEVEL = os.getenv("WIZARD_LOG_LEVEL", "DEBUG").upper()
_SHOW_PREVIOUS = _env_flag("WIZARD_SHOW_PREVIOUS", True)
_SHOW_NEXT = _env_flag("WIZARD_SHOW_NEXT", True)
_BREADCRUMB_CLICKABLE = _env_flag("WIZARD_BREADCRUMB_CLICKABLE", True)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Page Wizard"
    VERSION: str = "1.0.0"
    LOGGER_NAME: str = "pagewizard"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOG_DIR) if _LOG_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "wizard.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Navigation defaults (overridable per wizard through options)
    SHOW_PREVIOUS: bool = _SHOW_PREVIOUS
    SHOW_NEXT: bool = _SHOW_NEXT
    BREADCRUMB_CLICKABLE: bool = _BREADCRUMB_CLICKABLE

    # Wizard key prefix used for ref names ("wizard-<form key>")
    WIZARD_KEY_PREFIX: str = "wizard"

    @classmethod
    def button_settings(cls, read_only: bool = False,
                        overrides: Optional[Dict[str, Any]] = None) -> Dict[str, bool]:
        """
        Build the button settings for a wizard.

        Options given by the caller win over the configured defaults.
        Cancel is hidden by default on read-only forms.
        """
        settings = {
            "showPrevious": cls.SHOW_PREVIOUS,
            "showNext": cls.SHOW_NEXT,
            "showCancel": not read_only,
        }
        if overrides:
            settings.update({k: v for k, v in overrides.items() if v is not None})
        return settings

    @classmethod
    def breadcrumb_settings(cls, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, bool]:
        """Build the breadcrumb settings for a wizard."""
        settings = {"clickable": cls.BREADCRUMB_CLICKABLE}
        if overrides:
            settings.update({k: v for k, v in overrides.items() if v is not None})
        return settings
