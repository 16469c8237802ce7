from typing import Optional

import click

from university_registry.catalog import CatalogError, load_catalog
from university_registry.commands.check.enrollment import check_enrollment
from university_registry.commands.enroll.student import enroll_student
from university_registry.commands.export.roster import export_roster
from university_registry.commands.remove.course import remove_course
from university_registry.commands.remove.enrollment import remove_enrollment
from university_registry.commands.remove.student import remove_student
from university_registry.commands.run.script import (
    ScriptError,
    read_script,
    run_operations,
)
from university_registry.commands.show.registry import (
    show_course,
    show_courses,
    show_student,
    show_students,
    show_summary,
)
from university_registry.config import get_catalog_path
from university_registry.university import University
from university_registry.utils.logging_config import configure_from_env


def get_university(ctx: click.Context) -> University:
    path = get_catalog_path(ctx.obj.get("catalog"))
    try:
        return load_catalog(path)
    except CatalogError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    help="Catalog JSON file (defaults to $UNIVERSITY_CATALOG).",
)
@click.pass_context
def cli(ctx: click.Context, catalog: Optional[str]) -> None:
    configure_from_env()
    ctx.ensure_object(dict)
    ctx.obj["catalog"] = catalog


@cli.group()
def show() -> None:
    pass


@show.command()
@click.pass_context
def summary(ctx: click.Context) -> None:
    show_summary(get_university(ctx))


@show.command()
@click.pass_context
def students(ctx: click.Context) -> None:
    show_students(get_university(ctx))


@show.command()
@click.pass_context
def courses(ctx: click.Context) -> None:
    show_courses(get_university(ctx))


@show.command()
@click.argument("student_id", type=int)
@click.pass_context
def student(ctx: click.Context, student_id: int) -> None:
    show_student(get_university(ctx), student_id)


@show.command()
@click.argument("code", type=str)
@click.pass_context
def course(ctx: click.Context, code: str) -> None:
    show_course(get_university(ctx), code)


@cli.group()
def check() -> None:
    pass


@check.command()
@click.argument("student_id", type=int)
@click.argument("code", type=str)
@click.pass_context
def enrollment(ctx: click.Context, student_id: int, code: str) -> None:
    """Check whether STUDENT_ID may enroll in course CODE."""
    check_enrollment(get_university(ctx), student_id, code)


@cli.group()
def enroll() -> None:
    pass


@enroll.command(name="student")
@click.argument("student_id", type=int)
@click.argument("code", type=str)
@click.pass_context
def enroll_student_cmd(ctx: click.Context, student_id: int, code: str) -> None:
    """Enroll STUDENT_ID in course CODE."""
    if not enroll_student(get_university(ctx), student_id, code):
        ctx.exit(1)


@cli.group()
def remove() -> None:
    pass


@remove.command(name="enrollment")
@click.argument("student_id", type=int)
@click.argument("code", type=str)
@click.pass_context
def remove_enrollment_cmd(ctx: click.Context, student_id: int, code: str) -> None:
    """Drop STUDENT_ID from course CODE."""
    if not remove_enrollment(get_university(ctx), student_id, code):
        ctx.exit(1)


@remove.command(name="student")
@click.argument("student_id", type=int)
@click.pass_context
def remove_student_cmd(ctx: click.Context, student_id: int) -> None:
    """Remove STUDENT_ID from the university."""
    if not remove_student(get_university(ctx), student_id):
        ctx.exit(1)


@remove.command(name="course")
@click.argument("code", type=str)
@click.pass_context
def remove_course_cmd(ctx: click.Context, code: str) -> None:
    """Remove course CODE from the university."""
    if not remove_course(get_university(ctx), code):
        ctx.exit(1)


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.option("--export", "export_after", is_flag=True, help="Export the resulting roster.")
@click.pass_context
def run(ctx: click.Context, script: str, export_after: bool) -> None:
    """Apply the operations in SCRIPT to the catalog."""
    university = get_university(ctx)
    try:
        operations = read_script(script)
        succeeded, failed = run_operations(university, operations)
    except ScriptError as e:
        raise click.ClickException(str(e))

    click.echo(f"\n{succeeded} succeeded, {failed} failed")
    click.echo(str(university))
    if export_after:
        export_roster(university)


@cli.group()
def export() -> None:
    pass


@export.command()
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    help="Directory for the workbook (defaults to $EXPORT_DIR).",
)
@click.pass_context
def roster(ctx: click.Context, output_dir: Optional[str]) -> None:
    """Export students and courses to Excel."""
    export_roster(get_university(ctx), output_dir)


if __name__ == "__main__":
    cli()
