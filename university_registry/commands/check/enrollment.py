import click

from university_registry.models import EnrollmentCheck
from university_registry.university import University

REASON_MESSAGES = {
    "unknown-student": "Student is not registered",
    "unknown-course": "Course is not offered",
    "already-enrolled": "Student is already enrolled",
    "no-prerequisites": "Course has no prerequisites",
    "no-previous-courses": "Student has not completed any course",
    "unlisted-previous-course": "Completed courses are not all listed prerequisites",
    "prerequisites-met": "Completed courses are all listed prerequisites",
}


def describe_check(check: EnrollmentCheck) -> str:
    message = REASON_MESSAGES[check.reason]
    if check.offending:
        message += f": {', '.join(sorted(check.offending))}"
    return message


def check_enrollment(university: University, student_id: int, code: str) -> bool:
    """Report whether a student may enroll in a course, without enrolling them."""
    check = university.check_enrollment(student_id, code)
    if check.eligible:
        click.secho(f"Student {student_id} may enroll in {code}", fg="green")
    else:
        click.secho(f"Student {student_id} may not enroll in {code}", fg="red")
    click.echo(f"  ↳ {describe_check(check)}")
    return check.eligible
