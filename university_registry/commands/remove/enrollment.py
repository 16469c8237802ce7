import click

from university_registry.university import University


def remove_enrollment(university: University, student_id: int, code: str) -> bool:
    if university.remove_student_from_course(student_id, code):
        click.secho(f"Dropped student {student_id} from {code}", fg="green")
        return True
    click.secho(f"Student {student_id} is not enrolled in {code}", fg="red")
    return False
