"""
Wizard Controller

Owns the session state of the planning wizard:
Welcome -> Profile -> Discovery -> Results.

Profile and selection are immutable values; every update replaces them.
Eligible schools are recomputed on each access, never cached.
"""

import logging
import re
from enum import IntEnum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .. import config
from ..errors import WizardError
from ..logic.constants import (
    BUDGET_STEP,
    DEFAULT_CHILD_AGE,
    DEFAULT_LOCATION,
    LOCATION_OPTIONS,
    MAX_BUDGET,
    MAX_CHILD_AGE,
    MIN_CHILD_AGE,
    PRIORITY_OPTIONS,
    PUBLIC_ONLY_BUDGET,
)
from ..logic.contracts import DiscoveryOutput, EligibilityVerdict, FamilyProfile, SchoolRecord, Selection
from ..logic.engine import EligibilityEngine
from ..logic.guidance import application_timeline, format_budget, preparation_tips
from ..logic.selection import toggle_selection
from ..report.renderer import render_report

logger = logging.getLogger(__name__)


class WizardStep(IntEnum):
    WELCOME = 0
    PROFILE = 1
    DISCOVERY = 2
    RESULTS = 3


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


def _plan_filename(profile: FamilyProfile) -> str:
    name = (profile.child_name or "").strip()
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return f"education-plan-{slug}.pdf" if slug else "education-plan.pdf"


class WizardSession:
    """
    One family's pass through the wizard.

    Args:
        catalog: Catalog to search. If None, uses the shipped catalog.
    """

    def __init__(self, catalog=None):
        self.engine = EligibilityEngine(catalog)
        self.catalog = self.engine.catalog
        self.restart()

    # ===== NAVIGATION =====

    def restart(self):
        """Back to Welcome with a default profile and no selection."""
        self.step = WizardStep.WELCOME
        self.profile = FamilyProfile(
            child_age=DEFAULT_CHILD_AGE,
            location_preference=DEFAULT_LOCATION,
            budget_ceiling=PUBLIC_ONLY_BUDGET,
        )
        self.selection: Selection = ()
        self.last_plan_path: Optional[Path] = None

    @property
    def progress(self) -> float:
        """Percent complete, 0 on Welcome and 100 on Results."""
        return self.step / WizardStep.RESULTS * 100

    def next_step(self) -> WizardStep:
        if self.step == WizardStep.RESULTS:
            return self.step
        if self.step == WizardStep.DISCOVERY and not self.selection:
            raise WizardError("Select at least one school before viewing results")
        self.step = WizardStep(self.step + 1)
        logger.debug(f"Wizard advanced to {self.step.name}")
        return self.step

    def prev_step(self) -> WizardStep:
        if self.step > WizardStep.WELCOME:
            self.step = WizardStep(self.step - 1)
        return self.step

    # ===== PROFILE =====

    @staticmethod
    def profile_options() -> Dict[str, Any]:
        """Choices offered on the Profile step."""
        return {
            "age_range": (MIN_CHILD_AGE, MAX_CHILD_AGE),
            "budget_range": (PUBLIC_ONLY_BUDGET, MAX_BUDGET),
            "budget_step": BUDGET_STEP,
            "locations": list(LOCATION_OPTIONS),
            "priorities": list(PRIORITY_OPTIONS),
        }

    def update_profile(self, **changes: Any) -> FamilyProfile:
        """
        Replace the profile with the given fields changed.
        Age and budget are clamped to the ranges the wizard offers.

        Raises:
            WizardError: for a field FamilyProfile does not have
        """
        unknown = sorted(set(changes) - set(FamilyProfile.model_fields))
        if unknown:
            raise WizardError(f"Unknown profile field(s): {', '.join(unknown)}")

        if "child_age" in changes:
            changes["child_age"] = _clamp(changes["child_age"], MIN_CHILD_AGE, MAX_CHILD_AGE)
        if "budget_ceiling" in changes:
            changes["budget_ceiling"] = _clamp(changes["budget_ceiling"], PUBLIC_ONLY_BUDGET, MAX_BUDGET)
        if "priority_tags" in changes:
            changes["priority_tags"] = frozenset(changes["priority_tags"])

        data: Dict[str, Any] = self.profile.model_dump()
        data.update(changes)
        self.profile = FamilyProfile(**data)
        return self.profile

    def toggle_priority(self, tag: str) -> FamilyProfile:
        tags = set(self.profile.priority_tags)
        if tag in tags:
            tags.remove(tag)
        else:
            tags.add(tag)
        return self.update_profile(priority_tags=tags)

    # ===== DISCOVERY =====

    @property
    def eligible_schools(self) -> List[SchoolRecord]:
        return self.engine.eligible_schools(self.profile)

    def discovery(self) -> DiscoveryOutput:
        return self.engine.discover(self.profile)

    def explain(self, school_id: str) -> Optional[EligibilityVerdict]:
        return self.engine.explain(self.profile, school_id)

    def toggle_school(self, school_id: str) -> bool:
        """
        Add or remove a school from the shortlist.

        Returns:
            False when the shortlist is full and the school was not added
        """
        updated = toggle_selection(self.selection, school_id)
        changed = updated != self.selection
        if not changed:
            logger.debug(f"Shortlist full, ignoring {school_id}")
        self.selection = updated
        return changed

    @property
    def selected_schools(self) -> List[SchoolRecord]:
        return self.catalog.resolve(self.selection)

    # ===== RESULTS =====

    def plan_overview(self) -> Dict[str, Any]:
        schools = self.selected_schools
        return {
            "schools": schools,
            "school_count": len(schools),
            "budget_label": format_budget(self.profile.budget_ceiling),
            "child_age": self.profile.child_age,
            "preparation_tips": {
                school.id: preparation_tips(school.competitiveness) for school in schools
            },
            "timeline": application_timeline(),
        }

    def download_plan(self, output_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Render the plan PDF for the current profile and selection.

        Raises:
            WizardError: outside the Results step
        """
        if self.step != WizardStep.RESULTS:
            raise WizardError("The plan can only be downloaded from the results step")

        directory = Path(output_dir or config.REPORT_OUTPUT_DIR)
        output_path = directory / _plan_filename(self.profile)
        self.last_plan_path = render_report(self.profile, self.selection, self.catalog, output_path)
        return self.last_plan_path
