import pytest

from school_planner.logic.constants import Competitiveness
from school_planner.logic.guidance import (
    application_timeline,
    format_budget,
    preparation_tips,
    tutoring_resources,
)


def test_timeline_has_five_phases_in_order():
    phases = application_timeline()

    assert [p.name for p in phases] == [
        "Early Planning",
        "Spring Preparation",
        "Application Season",
        "Assessment Period",
        "Decision Time",
    ]
    assert phases[2].timeframe == "September-December"
    assert all(len(p.tasks) == 4 for p in phases)


def test_timeline_is_a_fresh_copy():
    application_timeline()[0].tasks.append("extra")
    assert "extra" not in application_timeline()[0].tasks


def test_most_competitive_levels_share_tips():
    assert preparation_tips(Competitiveness.VERY_HIGH) == preparation_tips(Competitiveness.EXTREMELY_HIGH)
    assert "Consider SSAT prep tutoring" in preparation_tips("extremely_high")


@pytest.mark.parametrize("level", [None, "Very High", "unheard-of"])
def test_unknown_level_falls_back_to_moderate(level):
    assert preparation_tips(level) == preparation_tips(Competitiveness.MODERATE)


def test_low_competitiveness_tips():
    assert preparation_tips(Competitiveness.LOW)[0] == "Apply several months early"


def test_tutoring_resources():
    names = [r.name for r in tutoring_resources()]
    assert names == ["KEY Education", "Aspire Math Academy", "Test Innovators"]


@pytest.mark.parametrize("ceiling, label", [
    (0, "Public only (Free)"),
    (2500, "Up to $2,500/yr"),
    (35000, "Up to $35,000/yr"),
])
def test_format_budget(ceiling, label):
    assert format_budget(ceiling) == label
