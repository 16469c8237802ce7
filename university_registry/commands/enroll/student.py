import click

from university_registry.commands.check.enrollment import describe_check
from university_registry.university import University


def enroll_student(university: University, student_id: int, code: str) -> bool:
    check = university.check_enrollment(student_id, code)
    if not university.enroll_student_in_course(student_id, code):
        click.secho(
            f"Failed to enroll student {student_id} in {code}: {describe_check(check)}",
            fg="red",
        )
        return False

    if check.reason == "already-enrolled":
        click.secho(f"Student {student_id} is already enrolled in {code}", fg="yellow")
    else:
        click.secho(f"Successfully enrolled student {student_id} in {code}", fg="green")
    return True
