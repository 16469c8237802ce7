import click

from university_registry.university import University


def remove_student(university: University, student_id: int) -> bool:
    """Remove a student and drop them from every course they attend."""
    courses = sorted(c.code for c in university.get_enrolled_courses(student_id))
    if not university.remove_student_from_university(student_id):
        click.secho(f"Student {student_id} not found", fg="red")
        return False

    click.secho(f"Removed student {student_id}", fg="green")
    for code in courses:
        click.echo(f"  ↳ dropped from {code}")
    return True
