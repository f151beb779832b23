"""
Plan content and PDF rendering.
"""

from datetime import date

import pytest

from school_planner import config
from school_planner.logic.contracts import FamilyProfile
from school_planner.report import build_report, render_report
from school_planner.report.content import ADMISSIONS_TEST_ACTION

from .conftest import make_school


def page_count(pdf_bytes: bytes) -> int:
    return pdf_bytes.count(b"/Type /Page") - pdf_bytes.count(b"/Type /Pages")


@pytest.fixture
def profile():
    return FamilyProfile(child_age=13, location_preference="Vancouver", budget_ceiling=35000,
                         parent_name="Jordan", child_name="Riley")


class TestBuildReport:

    def test_title_block(self, profile, shipped_catalog):
        report = build_report(profile, ("collingwood",), shipped_catalog, generated_on=date(2024, 12, 5))

        assert report.title == "Education Plan for Riley"
        assert report.prepared_for == "Prepared for Jordan"
        assert report.generated_on == "December 05, 2024"

    def test_defaults_without_names(self, shipped_catalog):
        report = build_report(FamilyProfile(), (), shipped_catalog)

        assert report.title == "Education Plan for your child"
        assert report.prepared_for is None
        assert report.school_count == 0
        assert report.budget_label == "Public only (Free)"

    def test_overview(self, profile, shipped_catalog):
        report = build_report(profile, ("collingwood", "churchill-ib"), shipped_catalog)

        assert report.overview_lines == [
            "Schools selected: 2",
            "Budget: Up to $35,000/yr",
            "Child age: 13",
        ]

    def test_schools_follow_selection_order(self, profile, shipped_catalog):
        report = build_report(profile, ("churchill-ib", "collingwood"), shipped_catalog)

        first, second = report.schools
        assert first.name == "Sir Winston Churchill IB Programme"
        assert first.category_label == "IB Program"
        assert first.tuition == "Free"
        assert second.tuition == "$42,000/yr"
        assert second.location == "West Vancouver"
        assert second.grade_range == "JK-12"
        assert "Round Square" in second.specialty

    def test_unknown_ids_are_skipped(self, profile, shipped_catalog, caplog):
        report = build_report(profile, ("ghost-school", "collingwood"), shipped_catalog)

        assert [s.name for s in report.schools] == ["Collingwood School"]
        assert report.school_count == 1
        assert "ghost-school" in caplog.text

    def test_section_order(self, profile, shipped_catalog):
        report = build_report(profile, (), shipped_catalog)
        assert [s.title for s in report.sections] == ["This Week", "1–3 Months", "3–6 Months", "Long-term"]

    @pytest.mark.parametrize("age, expected", [(11, False), (12, True), (16, True)])
    def test_admissions_test_reminder_from_age_twelve(self, shipped_catalog, age, expected):
        report = build_report(FamilyProfile(child_age=age, child_name="Riley"), (), shipped_catalog)
        short_term = report.sections[1].bullets

        reminder = ADMISSIONS_TEST_ACTION.format(child="Riley")
        assert (reminder in short_term) is expected

    def test_child_placeholder_filled(self, shipped_catalog):
        report = build_report(FamilyProfile(child_age=8), (), shipped_catalog)
        bullets = [b for section in report.sections for b in section.bullets]

        assert "Prepare applications for your child" in bullets
        assert not any("{child}" in b for b in bullets)

    def test_footer(self, profile, shipped_catalog):
        report = build_report(profile, (), shipped_catalog)
        assert report.footer == f"{config.APP_NAME} • Data as of {config.DATA_AS_OF}"


class TestRenderReport:

    def test_writes_pdf(self, profile, shipped_catalog, tmp_path):
        output = tmp_path / "nested" / "plan.pdf"

        path = render_report(profile, ("collingwood",), shipped_catalog, output)

        assert path == output
        data = path.read_bytes()
        assert data.startswith(b"%PDF")
        assert page_count(data) == 1

    def test_long_plan_spans_pages(self, profile, shipped_catalog, tmp_path):
        selection = ("collingwood", "mulgrave", "st-georges", "crofton-house", "york-house")

        path = render_report(profile, selection, shipped_catalog, tmp_path / "plan.pdf")

        assert page_count(path.read_bytes()) >= 2

    def test_empty_selection_still_renders(self, shipped_catalog, tmp_path):
        path = render_report(FamilyProfile(), (), shipped_catalog, str(tmp_path / "empty.pdf"))
        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")

    def test_renders_from_plain_record_list(self, profile, tmp_path):
        schools = [make_school(id="a", name="School A"), make_school(id="b", name="School B")]

        report = build_report(profile, ("b", "a"), schools)
        path = render_report(profile, ("a",), schools, tmp_path / "list.pdf")

        assert [s.name for s in report.schools] == ["School B", "School A"]
        assert path.read_bytes().startswith(b"%PDF")
