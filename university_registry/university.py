"""
In-memory registry of students and courses.

The University owns the student index (by ID) and the course index (by code)
and is the only place where links between entities are created or removed.
Every link is written on both sides in the same call, so a course code is in
a student's enrolled set exactly when that student's ID is in the course's
enrolled set.
"""

import threading
from typing import Dict, List, Optional

from university_registry.models import Course, EnrollmentCheck, Student
from university_registry.utils.logging_config import get_logger

logger = get_logger(__name__)


class University:
    def __init__(self, name: str, motto: str) -> None:
        self._name = name
        self._motto = motto
        self._students_by_id: Dict[int, Student] = {}
        self._courses_by_code: Dict[str, Course] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def motto(self) -> str:
        return self._motto

    @property
    def student_count(self) -> int:
        return len(self._students_by_id)

    @property
    def course_count(self) -> int:
        return len(self._courses_by_code)

    # Indexing

    def add_student(self, student: Student) -> bool:
        """Track a student.

        Returns False if the ID is already taken, the record belongs to another
        University, or a completed course is not offered here.
        """
        if not isinstance(student, Student):
            raise TypeError(f"Expected a Student, got {type(student).__name__}")
        with self._lock:
            if student.student_id in self._students_by_id:
                logger.debug(f"Student {student.student_id} already registered")
                return False
            if student._university is not None:
                logger.debug(f"Student {student.student_id} belongs to another registry")
                return False
            unknown = student._previous_courses - self._courses_by_code.keys()
            if unknown:
                logger.debug(
                    f"Student {student.student_id} completed unknown courses: "
                    f"{', '.join(sorted(unknown))}"
                )
                return False
            student._university = self
            self._students_by_id[student.student_id] = student
            logger.info(f"Registered student {student.student_id} ({student.name})")
            return True

    def add_student_by_name(self, name: str, student_id: int) -> bool:
        return self.add_student(Student(name, student_id))

    def get_student(self, student_id: int) -> Optional[Student]:
        with self._lock:
            return self._students_by_id.get(student_id)

    def get_students(self) -> List[Student]:
        with self._lock:
            return list(self._students_by_id.values())

    def add_course(self, course: Course) -> bool:
        """Offer a course.

        Returns False if a course with the same code exists or the record
        belongs to another University.
        """
        if not isinstance(course, Course):
            raise TypeError(f"Expected a Course, got {type(course).__name__}")
        with self._lock:
            if course.code in self._courses_by_code:
                logger.debug(f"Course {course.code} already offered")
                return False
            if course._university is not None:
                logger.debug(f"Course {course.code} belongs to another registry")
                return False
            self._courses_by_code[course.code] = course
            course._university = self
            logger.info(f"Added course {course.code} ({course.name})")
            return True

    def add_course_by_name(self, name: str, code: str) -> bool:
        return self.add_course(Course(name, code))

    def get_course(self, code: str) -> Optional[Course]:
        with self._lock:
            return self._courses_by_code.get(code)

    def get_courses(self) -> List[Course]:
        with self._lock:
            return list(self._courses_by_code.values())

    # Relationships

    def add_requisite_to_course(self, code: str, prerequisite_code: str) -> bool:
        """Add ``prerequisite_code`` to the prerequisites of ``code``.

        Both courses must already be offered. Cycles are not checked, so a
        course may list itself.
        """
        with self._lock:
            course = self._courses_by_code.get(code)
            if course is None or prerequisite_code not in self._courses_by_code:
                logger.debug(
                    f"Cannot link prerequisite {prerequisite_code} to {code}: unknown course"
                )
                return False
            course._prerequisites.add(prerequisite_code)
            logger.info(f"{prerequisite_code} is now a prerequisite of {code}")
            return True

    def add_previous_course(self, student_id: int, code: str) -> bool:
        """Record ``code`` as completed by the student."""
        with self._lock:
            student = self._students_by_id.get(student_id)
            if student is None or code not in self._courses_by_code:
                logger.debug(
                    f"Cannot record {code} as completed for {student_id}: unknown key"
                )
                return False
            student._previous_courses.add(code)
            return True

    def check_enrollment(self, student_id: int, code: str) -> EnrollmentCheck:
        """
        Evaluate enrollment eligibility without changing anything.

        A course without prerequisites is open to everyone. Otherwise the
        student must have completed at least one course, and every completed
        course must be one of the listed prerequisites.
        """
        with self._lock:
            student = self._students_by_id.get(student_id)
            if student is None:
                return EnrollmentCheck(False, "unknown-student")
            course = self._courses_by_code.get(code)
            if course is None:
                return EnrollmentCheck(False, "unknown-course")
            if code in student._enrolled_courses:
                return EnrollmentCheck(True, "already-enrolled")
            if not course._prerequisites:
                return EnrollmentCheck(True, "no-prerequisites")
            if not student._previous_courses:
                return EnrollmentCheck(False, "no-previous-courses")

            # NOTE: completed courses must be a subset of the prerequisites,
            # not the other way round. Kept as-is for compatibility.
            offending = frozenset(student._previous_courses - course._prerequisites)
            if offending:
                return EnrollmentCheck(False, "unlisted-previous-course", offending)
            return EnrollmentCheck(True, "prerequisites-met")

    def enroll_student_in_course(self, student_id: int, code: str) -> bool:
        """Enroll a student. Enrolling twice is a successful no-op."""
        with self._lock:
            check = self.check_enrollment(student_id, code)
            if not check.eligible:
                logger.debug(f"Enrollment of {student_id} in {code} refused: {check.reason}")
                return False
            if check.needs_change:
                self._link(self._students_by_id[student_id], self._courses_by_code[code])
                logger.info(f"Enrolled student {student_id} in {code}")
            return True

    def remove_student_from_course(self, student_id: int, code: str) -> bool:
        """Drop a student from a course they are currently enrolled in."""
        with self._lock:
            student = self._students_by_id.get(student_id)
            course = self._courses_by_code.get(code)
            if student is None or course is None:
                logger.debug(f"Cannot drop {student_id} from {code}: unknown key")
                return False
            if student_id not in course._enrolled_students:
                logger.debug(f"Student {student_id} is not enrolled in {code}")
                return False
            self._unlink(student, course)
            logger.info(f"Dropped student {student_id} from {code}")
            return True

    def get_enrolled_students(self, code: str) -> List[Student]:
        with self._lock:
            course = self._courses_by_code.get(code)
            if course is None:
                return []
            return [
                self._students_by_id[i]
                for i in course._enrolled_students
                if i in self._students_by_id
            ]

    def get_enrolled_courses(self, student_id: int) -> List[Course]:
        with self._lock:
            student = self._students_by_id.get(student_id)
            if student is None:
                return []
            return [
                self._courses_by_code[c]
                for c in student._enrolled_courses
                if c in self._courses_by_code
            ]

    def get_prerequisites(self, code: str) -> List[Course]:
        with self._lock:
            course = self._courses_by_code.get(code)
            if course is None:
                return []
            return [
                self._courses_by_code[c]
                for c in course._prerequisites
                if c in self._courses_by_code
            ]

    # Cascading removal

    def remove_student_from_university(self, student_id: int) -> bool:
        """Untrack a student and drop them from every course they attend."""
        with self._lock:
            student = self._students_by_id.get(student_id)
            if student is None:
                logger.debug(f"Student {student_id} is not registered")
                return False
            for code in student._enrolled_courses:
                course = self._courses_by_code.get(code)
                if course is not None:
                    course._enrolled_students.discard(student_id)
            student._enrolled_courses.clear()
            student._university = None
            del self._students_by_id[student_id]
            logger.info(f"Removed student {student_id} from {self._name}")
            return True

    def remove_course_from_university(self, code: str) -> bool:
        """
        Stop offering a course.

        The course is stripped from every remaining course's prerequisites and
        from every student's current enrollments. Students' completed-course
        records are history and stay untouched.
        """
        with self._lock:
            course = self._courses_by_code.pop(code, None)
            if course is None:
                logger.debug(f"Course {code} is not offered")
                return False
            for other in self._courses_by_code.values():
                other._prerequisites.discard(code)
            for student in self._students_by_id.values():
                student._enrolled_courses.discard(code)
            course._enrolled_students.clear()
            course._prerequisites.clear()
            course._university = None
            logger.info(f"Removed course {code} from {self._name}")
            return True

    def _link(self, student: Student, course: Course) -> None:
        course._enrolled_students.add(student.student_id)
        student._enrolled_courses.add(course.code)

    def _unlink(self, student: Student, course: Course) -> None:
        course._enrolled_students.discard(student.student_id)
        student._enrolled_courses.discard(course.code)

    def __str__(self) -> str:
        return (
            f"{self._name} ({self._motto})\n"
            f"Number of Students: {len(self._students_by_id)}\n"
            f"Number of Courses {len(self._courses_by_code)}"
        )

    def __repr__(self) -> str:
        return f"University(name={self._name!r}, motto={self._motto!r})"
