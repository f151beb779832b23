"""
Shared fixtures: small hand-built catalogs and a default profile.
"""

import pytest

from school_planner.catalog import Catalog, load_catalog
from school_planner.logic.contracts import FamilyProfile, SchoolRecord


def make_school(**overrides) -> SchoolRecord:
    """SchoolRecord with sensible defaults; override any field."""
    data = {
        "id": "sample-school",
        "name": "Sample School",
        "category": "public",
        "level_band": "elementary",
        "grade_range": "K-7",
        "location": "Vancouver",
        "tuition": "Free",
        "specialty_tags": [],
        "feature_tags": [],
        "description": "",
    }
    data.update(overrides)
    return SchoolRecord(**data)


@pytest.fixture
def free_public_elementary():
    return make_school(
        id="free-elementary",
        name="Free Elementary",
        location="Vancouver (East)",
        tuition="Free",
        description="Neighbourhood school with a strong community.",
    )


@pytest.fixture
def paid_independent_elementary():
    return make_school(
        id="paid-elementary",
        name="Paid Elementary",
        category="independent",
        location="Vancouver (West)",
        tuition=30000,
        specialty_tags=["Arts Integration"],
        description="Small classes and a creative program.",
    )


@pytest.fixture
def two_school_catalog(free_public_elementary, paid_independent_elementary):
    return Catalog([free_public_elementary, paid_independent_elementary])


@pytest.fixture
def mixed_catalog():
    """One school per level band, tuition variant and location style."""
    return Catalog([
        make_school(id="preschool", level_band="preschool", tuition=12000,
                    location="Vancouver (West)", description="Play-based, outdoor learning."),
        make_school(id="elementary-free", level_band="elementary", tuition="Free",
                    location="Burnaby", specialty_tags=["French Immersion"]),
        make_school(id="middle-variable", level_band="middle",
                    tuition="Starting from $9,250 (sliding scale)",
                    location="Richmond", description="Technology and science labs."),
        make_school(id="high-paid", category="private", level_band="high", tuition=42000,
                    location="West Vancouver", specialty_tags=["Academic Excellence"]),
        make_school(id="k12-paid", category="private", level_band="all_ages", tuition=25000,
                    location="Vancouver (Point Grey)", feature_tags=["Gifted stream"]),
        make_school(id="high-zero", category="charter", level_band="high", tuition=0,
                    location="Surrey"),
    ])


@pytest.fixture
def default_profile():
    return FamilyProfile(child_age=5, location_preference="Flexible", budget_ceiling=0)


@pytest.fixture(scope="session")
def shipped_catalog():
    return load_catalog()
