from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Literal, Optional, Set

MIN_STUDENT_ID = 0
MAX_STUDENT_ID = 999999

EnrollmentReason = Literal[
    "unknown-student",
    "unknown-course",
    "already-enrolled",
    "no-prerequisites",
    "no-previous-courses",
    "unlisted-previous-course",
    "prerequisites-met",
]


class Student:
    """A student record. Relationship sets hold course codes.

    Only the owning University mutates ``enrolled_courses``; callers see
    read-only views. A record belongs to at most one University at a time.
    """

    def __init__(
        self,
        name: str,
        student_id: int,
        previous_courses: Optional[Iterable[str]] = None,
    ) -> None:
        if not name:
            raise ValueError("Student name must not be empty")
        if isinstance(student_id, bool) or not isinstance(student_id, int):
            raise ValueError(f"Student ID must be an integer, got {student_id!r}")
        if not MIN_STUDENT_ID <= student_id <= MAX_STUDENT_ID:
            raise ValueError(
                f"Student ID {student_id} outside {MIN_STUDENT_ID}-{MAX_STUDENT_ID}"
            )
        self._name = name
        self._student_id = student_id
        self._enrolled_courses: Set[str] = set()
        self._previous_courses: Set[str] = set(previous_courses or ())
        self._university: Optional[object] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def enrolled_courses(self) -> FrozenSet[str]:
        return frozenset(self._enrolled_courses)

    @property
    def previous_courses(self) -> FrozenSet[str]:
        return frozenset(self._previous_courses)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._student_id == other._student_id

    def __hash__(self) -> int:
        return hash(("student", self._student_id))

    def __repr__(self) -> str:
        return f"Student(student_id={self._student_id!r}, name={self._name!r})"


class Course:
    """A course record. Prerequisites are course codes, enrolled students are IDs."""

    def __init__(self, name: str, code: str) -> None:
        if not name:
            raise ValueError("Course name must not be empty")
        if not code:
            raise ValueError("Course code must not be empty")
        self._name = name
        self._code = code
        self._prerequisites: Set[str] = set()
        self._enrolled_students: Set[int] = set()
        self._university: Optional[object] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def code(self) -> str:
        return self._code

    @property
    def prerequisites(self) -> FrozenSet[str]:
        return frozenset(self._prerequisites)

    @property
    def enrolled_students(self) -> FrozenSet[int]:
        return frozenset(self._enrolled_students)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Course):
            return NotImplemented
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(("course", self._code))

    def __repr__(self) -> str:
        return f"Course(code={self._code!r}, name={self._name!r})"


@dataclass(frozen=True)
class EnrollmentCheck:
    """Outcome of evaluating whether a student may enroll in a course."""

    eligible: bool
    reason: EnrollmentReason
    offending: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def needs_change(self) -> bool:
        return self.eligible and self.reason != "already-enrolled"
