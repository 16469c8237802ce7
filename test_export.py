from openpyxl import load_workbook

from university_registry.commands.export.roster import build_roster_workbook, export_roster


def test_roster_workbook_contents(university):
    university.enroll_student_in_course(1, "CS102")
    university.enroll_student_in_course(2, "CS101")
    wb = build_roster_workbook(university)

    assert wb.sheetnames == ["Students", "Courses"]

    students = list(wb["Students"].iter_rows(values_only=True))
    assert students[0] == ("Student ID", "Name", "Enrolled Courses", "Previous Courses")
    assert students[1] == (1, "Ada Lovelace", "CS102", "CS101")
    assert students[2][0] == 2
    assert students[2][2] == "CS101"

    courses = list(wb["Courses"].iter_rows(values_only=True))
    assert courses[0][0] == "Course Code"
    assert [row[0] for row in courses[1:]] == ["CS101", "CS102", "MATH101"]
    assert courses[2] == ("CS102", "Data Structures", "CS101", "1")


def test_export_roster_writes_file(university, tmp_path, capsys):
    path = export_roster(university, tmp_path / "out")

    output = capsys.readouterr().out
    assert "\nSummary:\n- Total students: 2\n- Total courses: 3" in output

    assert path.exists()
    assert path.parent == tmp_path / "out"
    assert path.name.startswith("roster_")
    assert load_workbook(path).sheetnames == ["Students", "Courses"]
