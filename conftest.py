import pytest

from university_registry.models import Course, Student
from university_registry.university import University


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_TO_FILE", "false")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "exports"))


@pytest.fixture
def university() -> University:
    """CS101 -> CS102 chain, student 1 completed CS101, student 2 completed nothing."""
    uni = University("Example University", "Knowledge is power")
    uni.add_course(Course("Introduction to Programming", "CS101"))
    uni.add_course(Course("Data Structures", "CS102"))
    uni.add_course(Course("Discrete Mathematics", "MATH101"))
    uni.add_requisite_to_course("CS102", "CS101")
    uni.add_student(Student("Ada Lovelace", 1, previous_courses=["CS101"]))
    uni.add_student(Student("Alan Turing", 2))
    return uni


def assert_symmetric(uni: University) -> None:
    for student in uni.get_students():
        for code in student.enrolled_courses:
            course = uni.get_course(code)
            assert course is not None
            assert student.student_id in course.enrolled_students
    for course in uni.get_courses():
        for student_id in course.enrolled_students:
            student = uni.get_student(student_id)
            assert student is not None
            assert course.code in student.enrolled_courses
