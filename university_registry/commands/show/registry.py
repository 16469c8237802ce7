import click

from university_registry.university import University


def show_summary(university: University) -> None:
    click.echo(str(university))


def show_students(university: University) -> None:
    students = sorted(university.get_students(), key=lambda s: s.student_id)
    if not students:
        click.secho("No students registered", fg="yellow")
        return
    for student in students:
        courses = ", ".join(sorted(student.enrolled_courses)) or "-"
        click.echo(f"{student.student_id:>6}  {student.name}  [{courses}]")


def show_courses(university: University) -> None:
    courses = sorted(university.get_courses(), key=lambda c: c.code)
    if not courses:
        click.secho("No courses offered", fg="yellow")
        return
    for course in courses:
        click.echo(
            f"{course.code}  {course.name}  "
            f"({len(course.enrolled_students)} enrolled)"
        )


def show_student(university: University, student_id: int) -> None:
    student = university.get_student(student_id)
    if student is None:
        click.secho(f"Student {student_id} not found", fg="red")
        return

    click.echo(f"Student: {student.name} ({student.student_id})")
    click.echo("Enrolled Courses:")
    for course in sorted(university.get_enrolled_courses(student_id), key=lambda c: c.code):
        click.echo(f"  {course.code} - {course.name}")
    click.echo("Previous Courses:")
    for code in sorted(student.previous_courses):
        click.echo(f"  {code}")


def show_course(university: University, code: str) -> None:
    course = university.get_course(code)
    if course is None:
        click.secho(f"Course {code} not found", fg="red")
        return

    click.echo(f"Course: {course.code} - {course.name}")
    click.echo("Prerequisites:")
    for prerequisite in sorted(university.get_prerequisites(code), key=lambda c: c.code):
        click.echo(f"  ↳ {prerequisite.code} - {prerequisite.name}")
    click.echo("Enrolled Students:")
    for student in sorted(
        university.get_enrolled_students(code), key=lambda s: s.student_id
    ):
        click.echo(f"  {student.student_id} - {student.name}")
