import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

import click
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from university_registry.config import get_export_dir
from university_registry.university import University
from university_registry.utils.logging_config import get_logger

logger = get_logger(__name__)

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="366092", end_color="366092", fill_type="solid")

STUDENT_HEADERS = ["Student ID", "Name", "Enrolled Courses", "Previous Courses"]
COURSE_HEADERS = ["Course Code", "Name", "Prerequisites", "Enrolled Students"]


def _write_headers(ws: Worksheet, headers: List[str]) -> None:
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col)
        cell.value = header
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL


def _fit_columns(ws: Worksheet, column_count: int) -> None:
    for col in range(1, column_count + 1):
        column_letter = get_column_letter(col)
        max_length = max(
            (len(str(cell.value)) for cell in ws[column_letter] if cell.value is not None),
            default=0,
        )
        ws.column_dimensions[column_letter].width = min(max_length + 2, 50)


def build_roster_workbook(university: University) -> Workbook:
    """Build a workbook with one sheet of students and one of courses."""
    wb = Workbook()
    if wb.active:
        wb.remove(wb.active)

    students_ws = wb.create_sheet(title="Students")
    _write_headers(students_ws, STUDENT_HEADERS)
    students = sorted(university.get_students(), key=lambda s: s.student_id)
    for row, student in enumerate(students, 2):
        students_ws.cell(row=row, column=1, value=student.student_id)
        students_ws.cell(row=row, column=2, value=student.name)
        students_ws.cell(row=row, column=3, value=", ".join(sorted(student.enrolled_courses)))
        students_ws.cell(row=row, column=4, value=", ".join(sorted(student.previous_courses)))
    _fit_columns(students_ws, len(STUDENT_HEADERS))

    courses_ws = wb.create_sheet(title="Courses")
    _write_headers(courses_ws, COURSE_HEADERS)
    courses = sorted(university.get_courses(), key=lambda c: c.code)
    for row, course in enumerate(courses, 2):
        courses_ws.cell(row=row, column=1, value=course.code)
        courses_ws.cell(row=row, column=2, value=course.name)
        courses_ws.cell(row=row, column=3, value=", ".join(sorted(course.prerequisites)))
        courses_ws.cell(
            row=row,
            column=4,
            value=", ".join(str(i) for i in sorted(course.enrolled_students)),
        )
    _fit_columns(courses_ws, len(COURSE_HEADERS))

    return wb


def export_roster(
    university: University, output_dir: Optional[Union[str, Path]] = None
) -> Path:
    """Export the registry's students and courses to a timestamped Excel file."""
    output_dir = Path(output_dir or get_export_dir())
    os.makedirs(output_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    excel_path = output_dir / f"roster_{timestamp}.xlsx"

    build_roster_workbook(university).save(excel_path)
    logger.info(f"Exported roster to {excel_path}")

    click.secho(f"Successfully exported roster to: {excel_path}", fg="green")
    click.echo("\nSummary:")
    click.echo(f"- Total students: {university.student_count}")
    click.echo(f"- Total courses: {university.course_count}")
    return excel_path
