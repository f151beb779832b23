"""
Plan report content.

Builds the text of the downloadable education plan, independent of layout.
Section order is fixed: title, overview, selected schools, action plan, footer.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field

from .. import config
from ..catalog import Catalog
from ..logic.constants import ADMISSIONS_TEST_AGE, CATEGORY_LABELS, COMPETITIVENESS_LABELS
from ..logic.contracts import FamilyProfile, SchoolRecord
from ..logic.guidance import format_budget

logger = logging.getLogger(__name__)

DEFAULT_CHILD_REFERENCE = "your child"

# Advisory bullets per horizon. "{child}" is replaced with the child's name.
IMMEDIATE_ACTIONS = [
    "Mark application deadlines in your calendar",
    "Research upcoming information sessions",
    "Sign up to track school updates",
]

SHORT_TERM_ACTIONS = [
    "Book school tours & info nights",
    "Prepare applications for {child}",
]

ADMISSIONS_TEST_ACTION = "Register {child} for admissions tests (SSAT)"

MEDIUM_TERM_ACTIONS = [
    "Academic enrichment & tutoring for {child}",
    "Interview practice with {child}",
    "Financial planning for tuition and fees",
]

LONG_TERM_ACTIONS = [
    "Apply to backup schools",
    "Join parent community groups",
    "Monitor school district policy changes",
]


class ReportSchool(BaseModel):
    """One selected school as it appears in the plan."""
    name: str
    category_label: str
    competitiveness: str
    location: str
    grade_range: str
    tuition: str
    deadline: str
    specialty: str


class ReportSection(BaseModel):
    title: str
    bullets: List[str] = Field(default_factory=list)


class PlanReport(BaseModel):
    """
    Text content of an education plan, in display order.
    """
    title: str
    prepared_for: Optional[str] = None
    generated_on: str

    school_count: int = 0
    budget_label: str
    child_age: int

    schools: List[ReportSchool] = Field(default_factory=list)
    sections: List[ReportSection] = Field(default_factory=list)

    footer: str

    @property
    def overview_lines(self) -> List[str]:
        return [
            f"Schools selected: {self.school_count}",
            f"Budget: {self.budget_label}",
            f"Child age: {self.child_age}",
        ]


def child_reference(profile: FamilyProfile) -> str:
    name = (profile.child_name or "").strip()
    return name or DEFAULT_CHILD_REFERENCE


def action_sections(profile: FamilyProfile) -> List[ReportSection]:
    """
    The four-horizon action plan.
    The admissions-test reminder appears only from ADMISSIONS_TEST_AGE up.
    """
    child = child_reference(profile)

    short_term = list(SHORT_TERM_ACTIONS)
    if profile.child_age >= ADMISSIONS_TEST_AGE:
        short_term.append(ADMISSIONS_TEST_ACTION)

    horizons = [
        ("This Week", IMMEDIATE_ACTIONS),
        ("1–3 Months", short_term),
        ("3–6 Months", MEDIUM_TERM_ACTIONS),
        ("Long-term", LONG_TERM_ACTIONS),
    ]
    return [
        ReportSection(title=title, bullets=[b.format(child=child) for b in bullets])
        for title, bullets in horizons
    ]


def _school_entry(school: SchoolRecord) -> ReportSchool:
    return ReportSchool(
        name=school.name,
        category_label=CATEGORY_LABELS.get(school.category, school.category.value),
        competitiveness=COMPETITIVENESS_LABELS.get(school.competitiveness, school.competitiveness.value),
        location=school.location,
        grade_range=school.grade_range,
        tuition=school.tuition.display(),
        deadline=school.application_deadline or "Contact school",
        specialty=", ".join(school.specialty_tags),
    )


def build_report(
    profile: FamilyProfile,
    selection: Iterable[str],
    catalog,
    generated_on: Optional[date] = None
) -> PlanReport:
    """
    Assemble the plan content for a profile and selection.

    Args:
        profile: Family profile
        selection: Selected school ids, in the order they were chosen
        catalog: Catalog (or iterable of SchoolRecord) used to resolve the ids
        generated_on: Date printed on the plan (default today)

    Returns:
        PlanReport; ids missing from the catalog are left out
    """
    if not isinstance(catalog, Catalog):
        catalog = Catalog(catalog)

    schools: List[ReportSchool] = []
    for school_id in selection:
        school = catalog.get(school_id)
        if school is None:
            logger.warning(f"Selected school not in catalog, skipping: {school_id}")
            continue
        schools.append(_school_entry(school))

    parent = (profile.parent_name or "").strip()
    generated_on = generated_on or date.today()

    return PlanReport(
        title=f"Education Plan for {child_reference(profile)}",
        prepared_for=f"Prepared for {parent}" if parent else None,
        generated_on=generated_on.strftime("%B %d, %Y"),
        school_count=len(schools),
        budget_label=format_budget(profile.budget_ceiling),
        child_age=profile.child_age,
        schools=schools,
        sections=action_sections(profile),
        footer=f"{config.APP_NAME} • Data as of {config.DATA_AS_OF}",
    )
