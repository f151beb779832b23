"""
Plan Report Module

Builds and renders the downloadable education plan.
"""

from .content import PlanReport, ReportSchool, ReportSection, action_sections, build_report
from .renderer import render_plan, render_report

__all__ = [
    "PlanReport",
    "ReportSchool",
    "ReportSection",
    "action_sections",
    "build_report",
    "render_plan",
    "render_report",
]
