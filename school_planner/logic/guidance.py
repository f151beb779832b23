"""
Application Guidance

Static advice shown on the results step and in the plan:
- Application timeline (five phases across the admissions year)
- Preparation tips per competitiveness level
- Tutoring and admissions-coaching resources
- Budget label
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .constants import Competitiveness, PUBLIC_ONLY_BUDGET


class TimelinePhase(BaseModel):
    """One phase of the admissions year."""
    name: str
    timeframe: str
    tasks: List[str] = Field(default_factory=list)


class TutoringResource(BaseModel):
    name: str
    specialty: str
    location: str
    services: List[str] = Field(default_factory=list)


# =============================================================================
# APPLICATION TIMELINE
# =============================================================================

_TIMELINE = [
    ("Early Planning", "January-March (year before)", [
        "Research schools and programs",
        "Attend open houses and tours",
        "Start SSAT preparation if needed",
        "Plan family budget and financial aid needs",
    ]),
    ("Spring Preparation", "April-August", [
        "Continue SSAT prep (minimum 6 weeks)",
        "Gather required documents",
        "Request recommendation letters",
        "Plan school visits and tours",
    ]),
    ("Application Season", "September-December", [
        "Attend school open houses",
        "Take SSAT exams (if required)",
        "Submit applications before deadlines",
        "Complete parent/student interviews",
    ]),
    ("Assessment Period", "January-February", [
        "Participate in school assessments",
        "Complete student interviews",
        "Submit any additional documents",
        "Wait for admission decisions",
    ]),
    ("Decision Time", "March-April", [
        "Receive admission decisions",
        "Make final school choice",
        "Submit enrollment deposits",
        "Plan for September start",
    ]),
]


def application_timeline() -> List[TimelinePhase]:
    """Admissions timeline, earliest phase first."""
    return [
        TimelinePhase(name=name, timeframe=timeframe, tasks=list(tasks))
        for name, timeframe, tasks in _TIMELINE
    ]


# =============================================================================
# PREPARATION TIPS
# =============================================================================

_INTENSIVE_TIPS = [
    "Start preparation 2+ years early",
    "Consider SSAT prep tutoring",
    "Build strong academic portfolio",
    "Develop leadership experiences",
    "Practice interview skills extensively",
]

PREPARATION_TIPS = {
    Competitiveness.EXTREMELY_HIGH: _INTENSIVE_TIPS,
    Competitiveness.VERY_HIGH: _INTENSIVE_TIPS,
    Competitiveness.HIGH: [
        "Start preparation 1-2 years early",
        "Maintain excellent grades",
        "Develop well-rounded interests",
        "Practice assessment activities",
        "Show genuine interest in school",
    ],
    Competitiveness.MODERATE: [
        "Start preparation 6-12 months early",
        "Show alignment with school values",
        "Prepare for assessment day",
        "Demonstrate child readiness",
        "Visit school multiple times",
    ],
    Competitiveness.LOW: [
        "Apply several months early",
        "Ensure basic requirements met",
        "Show interest and fit",
        "Complete application thoroughly",
    ],
}


def preparation_tips(competitiveness: Optional[str] = None) -> List[str]:
    """
    Tips for a competitiveness level.

    Accepts a Competitiveness member or its value. Unknown or missing levels
    get the moderate list.
    """
    try:
        level = Competitiveness(competitiveness)
    except ValueError:
        level = Competitiveness.MODERATE
    return list(PREPARATION_TIPS[level])


# =============================================================================
# TUTORING
# =============================================================================

def tutoring_resources() -> List[TutoringResource]:
    return [
        TutoringResource(
            name="KEY Education",
            specialty="SSAT prep, Private school admissions consulting",
            location="Vancouver",
            services=["SSAT preparation", "Admissions consulting", "Interview coaching", "Academic tutoring"],
        ),
        TutoringResource(
            name="Aspire Math Academy",
            specialty="Private school entrance coaching",
            location="West Vancouver",
            services=["SSAT preparation", "Mock interviews", "Application assistance", "Confidence building"],
        ),
        TutoringResource(
            name="Test Innovators",
            specialty="SSAT online preparation",
            location="Online",
            services=["SSAT practice tests", "Adaptive learning", "Progress tracking"],
        ),
    ]


def format_budget(ceiling: int) -> str:
    """'Public only (Free)' for a zero ceiling, else 'Up to $X,XXX/yr'."""
    if ceiling <= PUBLIC_ONLY_BUDGET:
        return "Public only (Free)"
    return f"Up to ${ceiling:,}/yr"
