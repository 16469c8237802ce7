import json

import pytest
from click.testing import CliRunner

from university_registry.main import cli

CATALOG = {
    "name": "Example University",
    "motto": "Knowledge is power",
    "courses": [
        {"code": "CS101", "name": "Intro"},
        {"code": "CS102", "name": "Data Structures", "prerequisites": ["CS101"]},
    ],
    "students": [
        {"id": 1, "name": "Ada", "previous_courses": ["CS101"], "enrolled_courses": ["CS102"]},
        {"id": 2, "name": "Alan"},
    ],
}


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return str(path)


@pytest.fixture
def runner():
    return CliRunner()


def test_help_loads(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for group in ("show", "check", "enroll", "remove", "run", "export"):
        assert group in result.output


def test_show_summary(runner, catalog):
    result = runner.invoke(cli, ["--catalog", catalog, "show", "summary"])
    assert result.exit_code == 0
    assert "Example University (Knowledge is power)" in result.output
    assert "Number of Students: 2" in result.output


def test_show_student_and_course(runner, catalog):
    result = runner.invoke(cli, ["--catalog", catalog, "show", "student", "1"])
    assert "Student: Ada (1)" in result.output
    assert "CS102 - Data Structures" in result.output

    result = runner.invoke(cli, ["--catalog", catalog, "show", "course", "CS102"])
    assert "CS101 - Intro" in result.output
    assert "1 - Ada" in result.output

    result = runner.invoke(cli, ["--catalog", catalog, "show", "course", "NOPE"])
    assert "Course NOPE not found" in result.output


def test_catalog_from_environment(runner, catalog, monkeypatch):
    monkeypatch.setenv("UNIVERSITY_CATALOG", catalog)
    result = runner.invoke(cli, ["show", "students"])
    assert result.exit_code == 0
    assert "Ada" in result.output
    assert "Alan" in result.output


def test_check_enrollment(runner, catalog):
    result = runner.invoke(cli, ["--catalog", catalog, "check", "enrollment", "2", "CS102"])
    assert result.exit_code == 0
    assert "may not enroll" in result.output
    assert "has not completed any course" in result.output


def test_enroll_and_remove_exit_codes(runner, catalog):
    result = runner.invoke(cli, ["--catalog", catalog, "enroll", "student", "2", "CS101"])
    assert result.exit_code == 0
    assert "Successfully enrolled" in result.output

    result = runner.invoke(cli, ["--catalog", catalog, "enroll", "student", "2", "CS102"])
    assert result.exit_code == 1

    result = runner.invoke(cli, ["--catalog", catalog, "remove", "enrollment", "2", "CS102"])
    assert result.exit_code == 1

    result = runner.invoke(cli, ["--catalog", catalog, "remove", "course", "CS101"])
    assert result.exit_code == 0
    assert "no longer a prerequisite of: CS102" in result.output

    result = runner.invoke(cli, ["--catalog", catalog, "remove", "student", "1"])
    assert result.exit_code == 0
    assert "dropped from CS102" in result.output


def test_run_script(runner, catalog, tmp_path):
    script = tmp_path / "ops.txt"
    script.write_text("enroll 2 CS102\nremove-course CS101\nenroll 2 CS102\n", encoding="utf-8")

    result = runner.invoke(cli, ["--catalog", catalog, "run", str(script), "--export"])
    assert result.exit_code == 0
    assert "2 succeeded, 1 failed" in result.output
    assert "Number of Courses 1" in result.output
    assert list((tmp_path / "exports").glob("roster_*.xlsx"))


def test_run_script_error(runner, catalog, tmp_path):
    script = tmp_path / "ops.txt"
    script.write_text("enroll 2\n", encoding="utf-8")
    result = runner.invoke(cli, ["--catalog", catalog, "run", str(script)])
    assert result.exit_code == 1
    assert "line 1" in result.output


def test_export_roster(runner, catalog, tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(cli, ["--catalog", catalog, "export", "roster", "--output-dir", str(out)])
    assert result.exit_code == 0
    assert len(list(out.glob("roster_*.xlsx"))) == 1


def test_missing_catalog(runner, tmp_path):
    result = runner.invoke(cli, ["--catalog", str(tmp_path / "none.json"), "show", "summary"])
    assert result.exit_code == 1
    assert "Catalog file not found" in result.output
