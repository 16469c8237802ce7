"""
Build a University from a JSON catalog.

The catalog lists courses (with prerequisite codes) and students (with
completed and current courses). Entries the registry rejects are logged and
skipped; a document that is structurally wrong raises CatalogError.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from university_registry.models import Course, Student
from university_registry.university import University
from university_registry.utils.logging_config import get_logger

logger = get_logger(__name__)


class CatalogError(ValueError):
    pass


@dataclass
class CatalogReport:
    """Catalog entries the registry refused."""

    skipped_courses: List[str] = field(default_factory=list)
    skipped_prerequisites: List[str] = field(default_factory=list)
    skipped_students: List[int] = field(default_factory=list)
    skipped_previous_courses: List[str] = field(default_factory=list)
    skipped_enrollments: List[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (
            self.skipped_courses
            or self.skipped_prerequisites
            or self.skipped_students
            or self.skipped_previous_courses
            or self.skipped_enrollments
        )


def _require(entry: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    if key not in entry:
        raise CatalogError(f"{where}: missing '{key}'")
    value = entry[key]
    if kind is int and isinstance(value, bool):
        raise CatalogError(f"{where}: '{key}' must be int")
    if not isinstance(value, kind):
        raise CatalogError(f"{where}: '{key}' must be {kind.__name__}")
    return value


def _codes(entry: Dict[str, Any], key: str, where: str) -> List[str]:
    values = entry.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise CatalogError(f"{where}: '{key}' must be a list of course codes")
    return values


def build_university(document: Any) -> University:
    university, _ = build_university_with_report(document)
    return university


def build_university_with_report(document: Any) -> Tuple[University, CatalogReport]:
    if not isinstance(document, dict):
        raise CatalogError("Catalog must be a JSON object")

    university = University(
        str(document.get("name", "University")), str(document.get("motto", ""))
    )
    report = CatalogReport()

    courses = document.get("courses", [])
    students = document.get("students", [])
    if not isinstance(courses, list) or not isinstance(students, list):
        raise CatalogError("'courses' and 'students' must be lists")

    parsed_courses = []
    for index, entry in enumerate(courses):
        where = f"courses[{index}]"
        if not isinstance(entry, dict):
            raise CatalogError(f"{where}: must be an object")
        code = _require(entry, "code", str, where)
        name = _require(entry, "name", str, where)
        try:
            course = Course(name, code)
        except ValueError as e:
            raise CatalogError(f"{where}: {e}") from e
        parsed_courses.append((course, _codes(entry, "prerequisites", where)))

    parsed_students = []
    for index, entry in enumerate(students):
        where = f"students[{index}]"
        if not isinstance(entry, dict):
            raise CatalogError(f"{where}: must be an object")
        student_id = _require(entry, "id", int, where)
        name = _require(entry, "name", str, where)
        previous = _codes(entry, "previous_courses", where)
        enrolled = _codes(entry, "enrolled_courses", where)
        try:
            student = Student(name, student_id)
        except ValueError as e:
            raise CatalogError(f"{where}: {e}") from e
        parsed_students.append((student, previous, enrolled))

    offered = []
    for course, prerequisites in parsed_courses:
        if not university.add_course(course):
            logger.warning(f"Skipping duplicate course {course.code}")
            report.skipped_courses.append(course.code)
            continue
        offered.append((course, prerequisites))

    for course, prerequisites in offered:
        for prerequisite in prerequisites:
            if not university.add_requisite_to_course(course.code, prerequisite):
                logger.warning(
                    f"Skipping unknown prerequisite {prerequisite} of {course.code}"
                )
                report.skipped_prerequisites.append(f"{course.code}<-{prerequisite}")

    added = []
    for student, previous, enrolled in parsed_students:
        if not university.add_student(student):
            logger.warning(f"Skipping duplicate student {student.student_id}")
            report.skipped_students.append(student.student_id)
            continue
        for code in previous:
            if not university.add_previous_course(student.student_id, code):
                logger.warning(
                    f"Ignoring unknown completed course {code} for {student.student_id}"
                )
                report.skipped_previous_courses.append(f"{student.student_id}:{code}")
        added.append((student, enrolled))

    for student, enrolled in added:
        for code in enrolled:
            if not university.enroll_student_in_course(student.student_id, code):
                check = university.check_enrollment(student.student_id, code)
                logger.warning(
                    f"Could not enroll {student.student_id} in {code}: {check.reason}"
                )
                report.skipped_enrollments.append(f"{student.student_id}:{code}")

    logger.info(
        f"Loaded catalog: {university.student_count} students, "
        f"{university.course_count} courses"
    )
    return university, report


def load_catalog(path: Union[str, Path]) -> University:
    """Read a catalog file and build the registry it describes."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e
    return build_university(document)
