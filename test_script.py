import pytest

from conftest import assert_symmetric
from university_registry.commands.run.script import (
    ScriptError,
    parse_script,
    read_script,
    run_operations,
)

SCRIPT = """
# comments and blank lines are skipped

add-student 3 Grace Brewster Hopper
add-course CS201 Algorithms and Complexity
add-prerequisite CS201 CS102
add-previous 3 CS102
enroll 3 CS201
enroll 2 CS102
remove-course CS101
enroll 2 CS102
drop 2 CS102
remove-student 1
"""


def test_parse_script():
    operations = parse_script(SCRIPT.splitlines())

    assert [op.verb for op in operations][:3] == ["add-student", "add-course", "add-prerequisite"]
    assert operations[0].args == ("3", "Grace Brewster Hopper")
    assert operations[1].args == ("CS201", "Algorithms and Complexity")
    assert operations[0].line_num == 4
    assert str(operations[2]) == "add-prerequisite CS201 CS102"


@pytest.mark.parametrize(
    "line, message",
    [
        ("teleport 1 CS101", "Unknown operation"),
        ("enroll 1", "Wrong number of arguments"),
        ("drop 1 CS101 extra", "Wrong number of arguments"),
        ("remove-student one", "Invalid student ID"),
        ("add-student 1", "Wrong number of arguments"),
    ],
)
def test_parse_errors_name_the_line(line, message):
    with pytest.raises(ScriptError, match=message):
        parse_script(["# header", line])
    with pytest.raises(ScriptError, match="line 2"):
        parse_script(["# header", line])


def test_run_operations(university):
    succeeded, failed = run_operations(university, parse_script(SCRIPT.splitlines()))

    # "enroll 2 CS102" fails before CS101 is removed, then succeeds.
    assert (succeeded, failed) == (9, 1)
    assert university.get_student(1) is None
    assert university.get_course("CS101") is None
    assert university.get_student(3).enrolled_courses == frozenset({"CS201"})
    assert university.get_student(2).enrolled_courses == frozenset()
    assert_symmetric(university)


def test_run_operations_rejects_invalid_records(university):
    with pytest.raises(ScriptError, match="Line 1"):
        run_operations(university, parse_script(["add-student 1000000 Too Big"]))


def test_read_script(tmp_path):
    path = tmp_path / "ops.txt"
    path.write_text("enroll 1 CS102\n\n# done\n", encoding="utf-8")
    operations = read_script(path)
    assert len(operations) == 1
    assert operations[0].args == ("1", "CS102")
