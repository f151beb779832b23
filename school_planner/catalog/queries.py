"""
Catalog queries used by the discovery and results views.
All return records in catalog order.
"""

from typing import Iterable, List

from ..logic.constants import Competitiveness, LevelBand, SchoolCategory
from ..logic.contracts import SchoolRecord

PRIVATE_CATEGORIES = frozenset({
    SchoolCategory.PRIVATE,
    SchoolCategory.INDEPENDENT,
    SchoolCategory.RELIGIOUS,
})

PUBLIC_CHOICE_CATEGORIES = frozenset({
    SchoolCategory.PUBLIC,
    SchoolCategory.MINI_SCHOOL,
    SchoolCategory.IB_PROGRAM,
})


def by_category(catalog: Iterable[SchoolRecord], category: SchoolCategory) -> List[SchoolRecord]:
    category = SchoolCategory(category)
    return [s for s in catalog if s.category == category]


def by_level(catalog: Iterable[SchoolRecord], level_band: LevelBand) -> List[SchoolRecord]:
    level_band = LevelBand(level_band)
    return [s for s in catalog if s.level_band == level_band]


def by_competitiveness(
    catalog: Iterable[SchoolRecord],
    competitiveness: Competitiveness
) -> List[SchoolRecord]:
    competitiveness = Competitiveness(competitiveness)
    return [s for s in catalog if s.competitiveness == competitiveness]


def private_schools(catalog: Iterable[SchoolRecord]) -> List[SchoolRecord]:
    """Private, independent and religious schools."""
    return [s for s in catalog if s.category in PRIVATE_CATEGORIES]


def public_choice_programs(catalog: Iterable[SchoolRecord]) -> List[SchoolRecord]:
    """Public programs, mini schools and IB programmes."""
    return [s for s in catalog if s.category in PUBLIC_CHOICE_CATEGORIES]


def requiring_ssat(catalog: Iterable[SchoolRecord]) -> List[SchoolRecord]:
    return [s for s in catalog if s.ssat_required]


def with_financial_aid(catalog: Iterable[SchoolRecord]) -> List[SchoolRecord]:
    return [s for s in catalog if s.financial_aid]
