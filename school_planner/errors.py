"""
Exceptions raised by the school planner.

Filtering and selection never raise; errors only come from loading a
malformed catalog and from invalid wizard navigation.
"""

from typing import Optional


class SchoolPlannerError(Exception):
    """Base class for all school planner errors."""


class CatalogValidationError(SchoolPlannerError, ValueError):
    """A catalog record failed validation at load time."""

    def __init__(self, message: str, school_id: Optional[str] = None):
        self.school_id = school_id
        if school_id:
            message = f"School '{school_id}': {message}"
        super().__init__(message)


class WizardError(SchoolPlannerError):
    """Invalid wizard navigation or action for the current step."""
