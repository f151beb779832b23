"""
Vancouver School Planner

Filters a static catalog of Vancouver-area schools by a family's profile,
tracks a shortlist of up to five schools, and writes an education plan PDF.
"""

from .catalog import Catalog, get_catalog, load_catalog
from .errors import CatalogValidationError, SchoolPlannerError, WizardError
from .logic import EligibilityEngine, FamilyProfile, SchoolRecord, filter_eligible, toggle_selection
from .report import build_report, render_report
from .wizard import WizardSession, WizardStep

__version__ = "1.0.0"

__all__ = [
    "Catalog",
    "get_catalog",
    "load_catalog",
    "EligibilityEngine",
    "FamilyProfile",
    "SchoolRecord",
    "filter_eligible",
    "toggle_selection",
    "build_report",
    "render_report",
    "WizardSession",
    "WizardStep",
    "SchoolPlannerError",
    "CatalogValidationError",
    "WizardError",
]
