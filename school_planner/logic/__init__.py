"""
School Planner Logic Module

Provides the deterministic eligibility filter, selection tracker and
application guidance.
"""

from .contracts import (
    FamilyProfile,
    SchoolRecord,
    NumericTuition,
    FreeTuition,
    VariableTuition,
    Selection,
    EligibilityVerdict,
    DiscoveryOutput,
    parse_tuition,
)
from .eligibility import filter_eligible, evaluate_school, is_eligible
from .engine import EligibilityEngine, get_eligible_schools
from .selection import toggle_selection
from .constants import SchoolCategory, LevelBand, Competitiveness

__all__ = [
    # Main engine
    "EligibilityEngine",
    "get_eligible_schools",
    "filter_eligible",
    "evaluate_school",
    "is_eligible",
    "toggle_selection",

    # Contracts
    "FamilyProfile",
    "SchoolRecord",
    "NumericTuition",
    "FreeTuition",
    "VariableTuition",
    "Selection",
    "EligibilityVerdict",
    "DiscoveryOutput",
    "parse_tuition",

    # Enums
    "SchoolCategory",
    "LevelBand",
    "Competitiveness",
]
