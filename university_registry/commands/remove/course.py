import click

from university_registry.university import University


def remove_course(university: University, code: str) -> bool:
    """Remove a course, unlinking it as a prerequisite and from enrollments."""
    dependents = sorted(
        c.code for c in university.get_courses() if code in c.prerequisites and c.code != code
    )
    affected = sorted(s.student_id for s in university.get_enrolled_students(code))
    if not university.remove_course_from_university(code):
        click.secho(f"Course {code} not found", fg="red")
        return False

    click.secho(f"Removed course {code}", fg="green")
    if dependents:
        click.echo(f"  ↳ no longer a prerequisite of: {', '.join(dependents)}")
    if affected:
        click.echo(f"  ↳ unenrolled students: {', '.join(str(i) for i in affected)}")
    return True
