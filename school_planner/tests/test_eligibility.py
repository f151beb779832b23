"""
Eligibility filter: the four checks, their combination, and the
behavioural properties families rely on.
"""

import pytest

from school_planner.catalog import Catalog
from school_planner.logic.constants import FLEXIBLE_LOCATION, LevelBand, PRIORITY_OPTIONS
from school_planner.logic.contracts import FamilyProfile
from school_planner.logic.eligibility import (
    admissible_levels,
    evaluate_school,
    filter_eligible,
    is_eligible,
    is_flexible_location,
    matches_budget,
    matches_level,
    matches_location,
    matches_priorities,
    priority_keywords,
)

from .conftest import make_school


# =============================================================================
# SCENARIOS
# =============================================================================

def test_zero_budget_keeps_only_free_school(two_school_catalog):
    profile = FamilyProfile(child_age=5, location_preference="Flexible", budget_ceiling=0)

    result = filter_eligible(two_school_catalog, profile)

    assert [s.id for s in result] == ["free-elementary"]


def test_budget_above_tuition_keeps_both_schools(two_school_catalog):
    profile = FamilyProfile(child_age=5, location_preference="Flexible", budget_ceiling=35000)

    result = filter_eligible(two_school_catalog, profile)

    assert [s.id for s in result] == ["free-elementary", "paid-elementary"]


def test_teenager_never_matches_elementary_school():
    school = make_school(level_band="elementary", tuition="Free", location="Anywhere",
                         description="academic gifted everything")
    profile = FamilyProfile(child_age=16, location_preference="Flexible",
                            budget_ceiling=50000, priority_tags={"Academic Excellence"})

    assert filter_eligible([school], profile) == []


def test_location_matches_by_substring():
    point_grey = make_school(id="pg", location="Vancouver (Point Grey)")
    burnaby = make_school(id="bby", location="Burnaby")
    profile = FamilyProfile(child_age=8, location_preference="Vancouver")

    result = filter_eligible([point_grey, burnaby], profile)

    assert [s.id for s in result] == ["pg"]


def test_priority_matches_through_keyword_table():
    school = make_school(description="A program for gifted learners.")
    profile = FamilyProfile(child_age=8, location_preference="Flexible",
                            priority_tags={"Academic Excellence"})

    assert "academic excellence" not in school.descriptive_text
    assert filter_eligible([school], profile) == [school]


# =============================================================================
# AGE / LEVEL
# =============================================================================

@pytest.mark.parametrize("age, expected", [
    (2, {LevelBand.PRESCHOOL, LevelBand.ELEMENTARY, LevelBand.ALL_AGES}),
    (6, {LevelBand.PRESCHOOL, LevelBand.ELEMENTARY, LevelBand.ALL_AGES}),
    (7, {LevelBand.ELEMENTARY, LevelBand.ALL_AGES}),
    (11, {LevelBand.ELEMENTARY, LevelBand.ALL_AGES}),
    (12, {LevelBand.MIDDLE, LevelBand.HIGH, LevelBand.ALL_AGES}),
    (14, {LevelBand.MIDDLE, LevelBand.HIGH, LevelBand.ALL_AGES}),
    (15, {LevelBand.HIGH, LevelBand.ALL_AGES}),
    (18, {LevelBand.HIGH, LevelBand.ALL_AGES}),
])
def test_admissible_levels_cut_points(age, expected):
    assert admissible_levels(age) == expected


@pytest.mark.parametrize("age", [-3, 0, 1, 19, 25])
def test_out_of_range_age_admits_nothing(age, mixed_catalog):
    profile = FamilyProfile(child_age=age, location_preference="Flexible", budget_ceiling=50000)

    assert admissible_levels(age) == frozenset()
    assert filter_eligible(mixed_catalog, profile) == []


def test_all_ages_school_matches_every_supported_age():
    school = make_school(level_band="all_ages")
    for age in range(2, 19):
        assert matches_level(school, FamilyProfile(child_age=age))


# =============================================================================
# LOCATION
# =============================================================================

def test_location_is_case_insensitive():
    school = make_school(location="West Vancouver")
    assert matches_location(school, FamilyProfile(location_preference="vancouver"))


def test_location_containment_is_one_directional():
    school = make_school(location="Vancouver")
    assert not matches_location(school, FamilyProfile(location_preference="West Vancouver"))


@pytest.mark.parametrize("preference", [FLEXIBLE_LOCATION, "flexible", "", "   "])
def test_flexible_or_blank_location_matches_anywhere(preference):
    school = make_school(location="Maple Ridge")
    assert matches_location(school, FamilyProfile(location_preference=preference))


# =============================================================================
# BUDGET
# =============================================================================

class TestBudget:

    def test_zero_budget_rejects_variable_tuition(self):
        school = make_school(tuition="Free + fees")
        assert not matches_budget(school, FamilyProfile(budget_ceiling=0))

    def test_zero_numeric_tuition_is_not_free(self):
        school = make_school(tuition=0)
        assert not matches_budget(school, FamilyProfile(budget_ceiling=0))
        assert matches_budget(school, FamilyProfile(budget_ceiling=2500))

    def test_free_always_passes(self):
        school = make_school(tuition="free")
        assert matches_budget(school, FamilyProfile(budget_ceiling=0))
        assert matches_budget(school, FamilyProfile(budget_ceiling=50000))

    def test_numeric_tuition_passes_at_exact_ceiling(self):
        school = make_school(tuition=25000)
        assert matches_budget(school, FamilyProfile(budget_ceiling=25000))
        assert not matches_budget(school, FamilyProfile(budget_ceiling=24999))

    def test_variable_tuition_passes_any_positive_budget(self):
        school = make_school(tuition="Starting from $9,250 (sliding scale)")
        assert matches_budget(school, FamilyProfile(budget_ceiling=2500))


# =============================================================================
# PRIORITIES
# =============================================================================

class TestPriorities:

    def test_no_priorities_passes(self):
        assert matches_priorities(make_school(), FamilyProfile())

    def test_unknown_tag_matches_on_its_own_text(self):
        assert priority_keywords("Rowing") == ["rowing"]
        school = make_school(feature_tags=["Competitive ROWING team"])
        assert matches_priorities(school, FamilyProfile(priority_tags={"Rowing"}))

    def test_any_tag_is_enough(self):
        school = make_school(specialty_tags=["Mandarin Program"])
        profile = FamilyProfile(priority_tags={"Language Learning", "Outdoor Education"})
        assert matches_priorities(school, profile)

    def test_no_keyword_present_fails(self):
        school = make_school(description="Neighbourhood school.")
        assert not matches_priorities(school, FamilyProfile(priority_tags={"Gifted Programs"}))

    def test_adding_a_tag_never_shrinks_the_result(self, mixed_catalog):
        base = FamilyProfile(child_age=13, location_preference="Flexible", budget_ceiling=50000,
                             priority_tags={"Gifted Programs"})
        widened = base.model_copy(update={"priority_tags": base.priority_tags | {"Technology Focus"}})

        before = {s.id for s in filter_eligible(mixed_catalog, base)}
        after = {s.id for s in filter_eligible(mixed_catalog, widened)}

        assert before <= after
        assert "middle-variable" in after - before


# =============================================================================
# PROPERTIES
# =============================================================================

def test_filter_is_deterministic(shipped_catalog):
    profile = FamilyProfile(child_age=13, location_preference="Vancouver", budget_ceiling=35000,
                            priority_tags={"Academic Excellence", "Strong Community"})

    first = filter_eligible(shipped_catalog, profile)
    second = filter_eligible(shipped_catalog, profile)

    assert first == second


def test_result_keeps_catalog_order(mixed_catalog):
    profile = FamilyProfile(child_age=13, location_preference="Flexible", budget_ceiling=50000)
    result = [s.id for s in filter_eligible(mixed_catalog, profile)]
    catalog_order = [s.id for s in mixed_catalog if s.id in result]
    assert result == catalog_order


@pytest.mark.parametrize("age", [4, 9, 13, 17])
def test_raising_budget_never_removes_a_school(age, shipped_catalog):
    previous = set()
    for ceiling in range(0, 50001, 2500):
        profile = FamilyProfile(child_age=age, location_preference="Flexible", budget_ceiling=ceiling)
        current = {s.id for s in filter_eligible(shipped_catalog, profile)}
        assert previous <= current
        previous = current


def test_empty_catalog_gives_empty_result(default_profile):
    assert filter_eligible(Catalog([]), default_profile) == []


def test_every_priority_option_finds_a_school(shipped_catalog):
    for tag in PRIORITY_OPTIONS:
        profile = FamilyProfile(child_age=8, location_preference="Flexible",
                                budget_ceiling=50000, priority_tags={tag})
        assert filter_eligible(shipped_catalog, profile), tag


# =============================================================================
# VERDICTS
# =============================================================================

def test_verdict_lists_every_failed_check():
    school = make_school(level_band="high", location="Surrey", tuition=40000)
    profile = FamilyProfile(child_age=5, location_preference="Vancouver", budget_ceiling=10000,
                            priority_tags={"Gifted Programs"})

    verdict = evaluate_school(school, profile)

    assert not verdict.eligible
    assert verdict.failed_checks == ["level", "location", "budget", "priorities"]
    assert not is_eligible(school, profile)


def test_verdict_agrees_with_filter(mixed_catalog):
    profile = FamilyProfile(child_age=13, location_preference="Vancouver", budget_ceiling=30000)
    eligible_ids = {s.id for s in filter_eligible(mixed_catalog, profile)}
    for school in mixed_catalog:
        assert evaluate_school(school, profile).eligible == (school.id in eligible_ids)


def test_flexible_check_strips_whitespace():
    assert is_flexible_location("  Flexible ")
    assert not is_flexible_location(" Burnaby ")
