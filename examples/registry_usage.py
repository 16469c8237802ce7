"""
University Registry Usage Examples

Walks through building a registry by hand, the prerequisite rule used for
enrollment, and what happens to links when entities are removed.
"""

from university_registry.models import Course, Student
from university_registry.university import University


def demo_enrollment():
    """Demonstrate enrollment against a course with prerequisites."""
    print("=== Enrollment ===\n")

    university = University("Example University", "Knowledge is power")
    university.add_course(Course("Introduction to Programming", "CS101"))
    university.add_course(Course("Data Structures", "CS102"))
    university.add_requisite_to_course("CS102", "CS101")

    university.add_student(Student("Ada Lovelace", 1, previous_courses=["CS101"]))
    university.add_student(Student("Alan Turing", 2))

    for student_id in (1, 2):
        check = university.check_enrollment(student_id, "CS102")
        enrolled = university.enroll_student_in_course(student_id, "CS102")
        print(f"Student {student_id} -> CS102: {enrolled} ({check.reason})")

    print(f"\n{university}\n")
    return university


def demo_removal(university: University):
    """Demonstrate cascading removal of a course."""
    print("=== Removal ===\n")

    university.remove_course_from_university("CS101")
    print(f"CS102 prerequisites: {sorted(university.get_course('CS102').prerequisites)}")
    print(f"Alan may now enroll: {university.enroll_student_in_course(2, 'CS102')}")

    university.remove_student_from_university(1)
    print(f"CS102 students: {sorted(university.get_course('CS102').enrolled_students)}")


if __name__ == "__main__":
    demo_removal(demo_enrollment())
