"""
Run a text script of registry operations against a loaded University.

One operation per line:

    add-student 7 Ada Lovelace
    add-course CS101 Introduction to Programming
    add-prerequisite CS102 CS101
    add-previous 7 CS101
    enroll 7 CS102
    drop 7 CS102
    remove-student 7
    remove-course CS101

Empty lines and lines starting with # are ignored.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import click

from university_registry.models import Course, Student
from university_registry.university import University
from university_registry.utils.logging_config import get_logger

logger = get_logger(__name__)


class ScriptError(ValueError):
    pass


@dataclass
class Operation:
    line_num: int
    verb: str
    args: Tuple[str, ...]

    def __str__(self) -> str:
        return " ".join((self.verb,) + self.args)


# verb -> (minimum args, maximum args or None for "rest of line")
VERBS: Dict[str, Tuple[int, Union[int, None]]] = {
    "add-student": (2, None),
    "add-course": (2, None),
    "add-prerequisite": (2, 2),
    "add-previous": (2, 2),
    "enroll": (2, 2),
    "drop": (2, 2),
    "remove-student": (1, 1),
    "remove-course": (1, 1),
}

# verbs whose first argument is a student ID
STUDENT_FIRST = {"add-student", "add-previous", "enroll", "drop", "remove-student"}


def parse_script(lines: List[str]) -> List[Operation]:
    operations = []
    for line_num, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        verb, *args = line.split()
        if verb not in VERBS:
            raise ScriptError(f"Unknown operation '{verb}' on line {line_num}")
        minimum, maximum = VERBS[verb]
        if len(args) < minimum or (maximum is not None and len(args) > maximum):
            raise ScriptError(f"Wrong number of arguments for '{verb}' on line {line_num}")
        if verb in STUDENT_FIRST:
            try:
                int(args[0])
            except ValueError:
                raise ScriptError(
                    f"Invalid student ID '{args[0]}' on line {line_num}"
                )
        if verb in ("add-student", "add-course"):
            args = [args[0], " ".join(args[1:])]
        operations.append(Operation(line_num, verb, tuple(args)))
    return operations


def read_script(file_path: Union[str, Path]) -> List[Operation]:
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_script(f.readlines())


def _handlers(university: University) -> Dict[str, Callable[..., bool]]:
    return {
        "add-student": lambda sid, name: university.add_student(Student(name, int(sid))),
        "add-course": lambda code, name: university.add_course(Course(name, code)),
        "add-prerequisite": university.add_requisite_to_course,
        "add-previous": lambda sid, code: university.add_previous_course(int(sid), code),
        "enroll": lambda sid, code: university.enroll_student_in_course(int(sid), code),
        "drop": lambda sid, code: university.remove_student_from_course(int(sid), code),
        "remove-student": lambda sid: university.remove_student_from_university(int(sid)),
        "remove-course": university.remove_course_from_university,
    }


def run_operations(university: University, operations: List[Operation]) -> Tuple[int, int]:
    """Apply operations in order. Returns (succeeded, failed) counts."""
    handlers = _handlers(university)
    succeeded = failed = 0

    for operation in operations:
        try:
            ok = handlers[operation.verb](*operation.args)
        except ValueError as e:
            raise ScriptError(f"Line {operation.line_num}: {e}") from e

        if ok:
            succeeded += 1
            click.secho(f"{operation.line_num:>4}) {operation}  ok", fg="green")
        else:
            failed += 1
            click.secho(f"{operation.line_num:>4}) {operation}  failed", fg="red")
            logger.debug(f"Operation on line {operation.line_num} returned False")

    return succeeded, failed
