"""
Module: report.renderer

Purpose:
    Lay out a PlanReport as an A4 PDF.

Key Functions:
    - render_report(): Build and write the plan for a profile and selection
    - render_plan(): Write an already-built PlanReport

Dependencies:
    - reportlab: PDF generation
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ..logic.contracts import FamilyProfile
from .content import PlanReport, build_report

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH, A4_HEIGHT = A4
MARGIN = 50
FOOTER_HEIGHT = 30
LINE_HEIGHT = 16

BODY_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"
TITLE_SIZE = 20
HEADING_SIZE = 14
BODY_SIZE = 11
SMALL_SIZE = 9


class _PageWriter:
    """
    Top-to-bottom text cursor over a canvas.
    Starts a new page whenever the next line would reach the footer.
    """

    def __init__(self, c: canvas.Canvas, footer: str):
        self.c = c
        self.footer = footer
        self.pages = 1
        self.y = A4_HEIGHT - MARGIN
        self.width = A4_WIDTH - 2 * MARGIN

    def _draw_footer(self):
        self.c.setFont(BODY_FONT, SMALL_SIZE)
        self.c.drawCentredString(A4_WIDTH / 2, MARGIN / 2, self.footer)

    def new_page(self):
        self._draw_footer()
        self.c.showPage()
        self.pages += 1
        self.y = A4_HEIGHT - MARGIN

    def ensure_space(self, height: float):
        if self.y - height < MARGIN + FOOTER_HEIGHT:
            self.new_page()

    def text(self, value: str, font: str = BODY_FONT, size: int = BODY_SIZE, indent: float = 0):
        """Write wrapped text, paginating line by line."""
        lines = simpleSplit(value, font, size, self.width - indent) or [""]
        for line in lines:
            self.ensure_space(LINE_HEIGHT)
            self.c.setFont(font, size)
            self.c.drawString(MARGIN + indent, self.y, line)
            self.y -= LINE_HEIGHT

    def gap(self, height: float = LINE_HEIGHT / 2):
        self.y -= height

    def finish(self):
        self._draw_footer()
        self.c.showPage()
        self.c.save()


def _school_lines(school) -> List[str]:
    lines = [
        f"Type: {school.category_label}",
        f"Location: {school.location}",
        f"Tuition: {school.tuition}",
        f"Deadline: {school.deadline}",
        f"Competitiveness: {school.competitiveness}",
    ]
    if school.grade_range:
        lines.insert(2, f"Grades: {school.grade_range}")
    if school.specialty:
        lines.append(f"Specialty: {school.specialty}")
    return lines


def render_plan(report: PlanReport, output_path: Union[str, Path]) -> Path:
    """
    Write a PlanReport to a PDF file.

    Args:
        report: Plan content
        output_path: Destination file; parent directories are created

    Returns:
        Path of the written PDF
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path), pagesize=A4)
    c.setTitle(report.title)
    writer = _PageWriter(c, report.footer)

    # Title block
    writer.text(report.title, BOLD_FONT, TITLE_SIZE)
    if report.prepared_for:
        writer.text(report.prepared_for)
    writer.text(f"Generated {report.generated_on}", size=SMALL_SIZE)
    writer.gap(LINE_HEIGHT)

    # Overview
    writer.text("Overview", BOLD_FONT, HEADING_SIZE)
    for line in report.overview_lines:
        writer.text(line, indent=10)
    writer.gap(LINE_HEIGHT)

    # Selected schools
    writer.text("Selected Schools", BOLD_FONT, HEADING_SIZE)
    if not report.schools:
        writer.text("No schools selected.", indent=10)
    for number, school in enumerate(report.schools, start=1):
        writer.ensure_space(LINE_HEIGHT * 3)
        writer.text(f"{number}. {school.name}", BOLD_FONT)
        for line in _school_lines(school):
            writer.text(line, indent=15)
        writer.gap()
    writer.gap(LINE_HEIGHT)

    # Action plan
    writer.text("Your Action Plan", BOLD_FONT, HEADING_SIZE)
    for section in report.sections:
        writer.ensure_space(LINE_HEIGHT * 2)
        writer.text(section.title, BOLD_FONT)
        for bullet in section.bullets:
            writer.text(f"• {bullet}", indent=10)
        writer.gap()

    writer.finish()
    logger.info(f"Rendered plan with {writer.pages} pages to {output_path}")
    return output_path


def render_report(
    profile: FamilyProfile,
    selection: Iterable[str],
    catalog,
    output_path: Union[str, Path],
    report: Optional[PlanReport] = None
) -> Path:
    """
    Build the plan for a profile and selection and write it as a PDF.

    Example:
        >>> render_report(profile, ("collingwood",), get_catalog(), Path("plan.pdf"))
    """
    if report is None:
        report = build_report(profile, selection, catalog)
    return render_plan(report, output_path)
