"""
Eligibility Checks

Independent boolean checks deciding whether a school suits a family profile:
- Age / level band
- Location
- Budget
- Priorities

A school is eligible only if it passes all four. Every function here is pure
and safe to re-run on every profile change.
"""

from typing import Dict, FrozenSet, Iterable, List

from .constants import (
    AGE_LEVEL_BANDS,
    CHECK_BUDGET,
    CHECK_LEVEL,
    CHECK_LOCATION,
    CHECK_PRIORITIES,
    FLEXIBLE_LOCATION,
    MAX_CHILD_AGE,
    MIN_CHILD_AGE,
    PRIORITY_KEYWORDS,
    LevelBand,
)
from .contracts import (
    EligibilityVerdict,
    FamilyProfile,
    FreeTuition,
    NumericTuition,
    SchoolRecord,
    VariableTuition,
)


def admissible_levels(age: int) -> FrozenSet[LevelBand]:
    """
    Map a child's age to the level bands they can enrol in.

    Ages outside the supported 2-18 range map to no bands at all, so the
    profile matches nothing rather than raising.
    """
    if age < MIN_CHILD_AGE or age > MAX_CHILD_AGE:
        return frozenset()
    for upper_age, levels in AGE_LEVEL_BANDS:
        if age <= upper_age:
            return frozenset(levels)
    return frozenset()


def priority_keywords(tag: str) -> List[str]:
    """Keywords searched for a priority tag; unknown tags match on themselves."""
    return PRIORITY_KEYWORDS.get(tag, [tag.lower()])


def is_flexible_location(preference: str) -> bool:
    preference = preference.strip()
    return not preference or preference.lower() == FLEXIBLE_LOCATION.lower()


# =============================================================================
# CHECKS
# =============================================================================

def matches_level(school: SchoolRecord, profile: FamilyProfile) -> bool:
    return school.level_band in admissible_levels(profile.child_age)


def matches_location(school: SchoolRecord, profile: FamilyProfile) -> bool:
    """
    The school's location must contain the preference (case-insensitive).
    "Vancouver" matches "Vancouver (Point Grey)"; the reverse is not checked.
    """
    if is_flexible_location(profile.location_preference):
        return True
    return profile.location_preference.strip().lower() in school.location.lower()


def matches_budget(school: SchoolRecord, profile: FamilyProfile) -> bool:
    """
    Budget 0 admits only free schools. Any other budget admits free schools,
    numeric tuition up to the ceiling, and variable tuition.
    """
    tuition = school.tuition

    if isinstance(tuition, FreeTuition):
        return True
    if profile.budget_ceiling == 0:
        return False
    if isinstance(tuition, NumericTuition):
        return tuition.amount <= profile.budget_ceiling
    # Variable amounts can't be compared, so they are admitted
    return isinstance(tuition, VariableTuition)


def matches_priorities(school: SchoolRecord, profile: FamilyProfile) -> bool:
    """
    Passes if any keyword of any selected priority appears in the school's
    specialty, feature or description text.
    """
    if not profile.priority_tags:
        return True

    text = school.descriptive_text
    return any(
        keyword in text
        for tag in profile.priority_tags
        for keyword in priority_keywords(tag)
    )


# Evaluation order; cheap structural checks first
CHECKS = [
    (CHECK_LEVEL, matches_level),
    (CHECK_LOCATION, matches_location),
    (CHECK_BUDGET, matches_budget),
    (CHECK_PRIORITIES, matches_priorities),
]


def is_eligible(school: SchoolRecord, profile: FamilyProfile) -> bool:
    """Short-circuits on the first failed check."""
    return all(check(school, profile) for _, check in CHECKS)


def filter_eligible(
    catalog: Iterable[SchoolRecord],
    profile: FamilyProfile
) -> List[SchoolRecord]:
    """
    Return the schools eligible for a profile.

    Args:
        catalog: Catalog or any iterable of SchoolRecord
        profile: Family profile

    Returns:
        Eligible schools in catalog order (never sorted by relevance)
    """
    return [school for school in catalog if is_eligible(school, profile)]


def evaluate_school(school: SchoolRecord, profile: FamilyProfile) -> EligibilityVerdict:
    """
    Run every check without short-circuiting.
    Used to explain why a school is hidden.
    """
    checks: Dict[str, bool] = {name: check(school, profile) for name, check in CHECKS}
    return EligibilityVerdict(school_id=school.id, checks=checks)
