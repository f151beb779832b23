"""
Planner Runner

Drives a full wizard session end to end:
1. Builds a family profile
2. Runs discovery over the shipped catalog
3. Shortlists schools
4. Writes the plan PDF

This is a pure orchestration layer - NO filtering rules, NO layout.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import configure_logging
from .logic.constants import MAX_SELECTED_SCHOOLS
from .wizard import WizardSession, WizardStep

logger = logging.getLogger(__name__)


def run_session(
    output_dir: Optional[Union[str, Path]] = None,
    **profile_fields
) -> WizardSession:
    """
    Walk a session from Welcome to Results and download the plan.

    The first eligible schools (up to the shortlist limit) are selected.

    Args:
        output_dir: Where to write the plan (default REPORT_OUTPUT_DIR)
        **profile_fields: FamilyProfile fields to set on the Profile step

    Returns:
        The session, left on the Results step
    """
    session = WizardSession()
    session.next_step()
    session.update_profile(**profile_fields)
    logger.info(f"🚀 Starting planning session for age {session.profile.child_age}, "
                f"location {session.profile.location_preference!r}")
    session.next_step()

    for school in session.eligible_schools[:MAX_SELECTED_SCHOOLS]:
        session.toggle_school(school.id)

    if not session.selection:
        logger.warning("⚠️ No eligible schools to shortlist")
        return session

    session.next_step()
    session.download_plan(output_dir)
    logger.info(f"✨ Plan written to {session.last_plan_path}")
    return session


# =============================================================================
# VALIDATION
# =============================================================================

def validate_runner(output_dir: Optional[Union[str, Path]] = None):
    """
    Developer sanity check - runs a full session on the shipped catalog.
    """
    configure_logging()

    print("=" * 60)
    print("RUNNER VALIDATION")
    print("=" * 60)

    session = run_session(
        output_dir=output_dir,
        child_age=13,
        location_preference="Vancouver",
        budget_ceiling=35000,
        priority_tags={"Academic Excellence"},
        parent_name="Sample Parent",
        child_name="Alex",
    )
    output = session.discovery()

    print(f"\nTotal Evaluated: {output.total_evaluated}")
    print(f"Total Eligible: {output.total_eligible}")
    print(f"Processing Time: {output.processing_time_ms:.2f}ms")
    print(f"Rejections: {output.rejections}")

    print(f"\n--- SHORTLIST ---")
    for number, school in enumerate(session.selected_schools, start=1):
        print(f"\n{number}. {school.name}")
        print(f"   Location: {school.location}")
        print(f"   Tuition: {school.tuition.display()}")
        print(f"   Deadline: {school.application_deadline}")

    if output.warnings:
        print(f"\n--- WARNINGS ---")
        for w in output.warnings:
            print(f"  ⚠️  {w}")

    if session.step == WizardStep.RESULTS:
        print(f"\nPlan: {session.last_plan_path}")

    print("\n" + "=" * 60)
    print("VALIDATION COMPLETE ✓")
    print("=" * 60)

    return session


if __name__ == "__main__":
    validate_runner()
