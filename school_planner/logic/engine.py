"""
Eligibility Engine

Main orchestrator for school discovery.
Runs the eligibility checks over the whole catalog and reports what passed.
"""

import logging
import time
from typing import Dict, List, Optional

from .constants import ELIGIBILITY_CHECKS, ENGINE_VERSION
from .contracts import DiscoveryOutput, EligibilityVerdict, FamilyProfile, SchoolRecord
from .eligibility import evaluate_school, filter_eligible

logger = logging.getLogger(__name__)


class EligibilityEngine:
    """
    Eligibility engine over a fixed catalog.

    Pipeline flow:
    1. Evaluation - Run the four checks on every school
    2. Filtering - Keep schools passing all checks, in catalog order
    3. Output Assembly - Counts, per-check rejections and warnings

    Nothing is cached between calls; every discover() re-runs the full pass.
    """

    def __init__(self, catalog=None):
        """
        Initialize the engine.

        Args:
            catalog: Catalog or iterable of SchoolRecord (wrapped in a
                Catalog). If None, uses the shipped catalog.
        """
        from ..catalog import Catalog, get_catalog

        if catalog is None:
            catalog = get_catalog()
        elif not isinstance(catalog, Catalog):
            catalog = Catalog(catalog)
        self.catalog = catalog
        self.version = ENGINE_VERSION

    def eligible_schools(self, profile: FamilyProfile) -> List[SchoolRecord]:
        return filter_eligible(self.catalog, profile)

    def discover(self, profile: FamilyProfile) -> DiscoveryOutput:
        """
        Find the schools eligible for a family profile.

        Args:
            profile: Family profile

        Returns:
            DiscoveryOutput with eligible schools in catalog order
        """
        start_time = time.perf_counter()

        rejections: Dict[str, int] = {name: 0 for name in ELIGIBILITY_CHECKS}
        eligible: List[SchoolRecord] = []
        total = 0

        for school in self.catalog:
            total += 1
            verdict = evaluate_school(school, profile)
            if verdict.eligible:
                eligible.append(school)
            for name in verdict.failed_checks:
                rejections[name] += 1

        processing_time = (time.perf_counter() - start_time) * 1000

        warnings = []
        if not eligible:
            logger.warning(f"⚠️ No schools match profile (age {profile.child_age}, "
                           f"location {profile.location_preference!r}, budget {profile.budget_ceiling})")
            warnings.append("No schools match your criteria.")

        logger.info(f"✅ Eligible schools: {len(eligible)} of {total} ({processing_time:.2f}ms)")

        return DiscoveryOutput(
            schools=eligible,
            total_evaluated=total,
            total_eligible=len(eligible),
            rejections=rejections,
            processing_time_ms=round(processing_time, 2),
            engine_version=self.version,
            warnings=warnings,
        )

    def discover_from_dict(self, profile_data: dict) -> DiscoveryOutput:
        """
        Convenience wrapper accepting a dict instead of FamilyProfile.

        Args:
            profile_data: Dictionary matching FamilyProfile fields
        """
        return self.discover(FamilyProfile(**profile_data))

    def explain(self, profile: FamilyProfile, school_id: str) -> Optional[EligibilityVerdict]:
        """
        Report which checks a single school passes or fails.
        Returns None for ids the catalog does not hold.
        """
        school = self.catalog.get(school_id)
        if school is None:
            return None
        return evaluate_school(school, profile)


# Convenience function for simple usage
def get_eligible_schools(profile: FamilyProfile, catalog=None) -> List[SchoolRecord]:
    """
    Eligible schools for a profile against the given (or shipped) catalog.

    Args:
        profile: Family profile
        catalog: Optional catalog; defaults to the shipped one

    Returns:
        List of SchoolRecord in catalog order
    """
    engine = EligibilityEngine(catalog)
    return engine.eligible_schools(profile)
