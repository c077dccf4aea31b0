"""Reading student CSV files and comparing match lists."""

from __future__ import annotations

import os
import re
from typing import Iterable

from .models import Preferences, Student

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_ufid(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid ufid: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"ufid out of range: {text!r}")
    return value


def _split_courses(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("|")
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_student_line(line: str) -> Student:
    """Parse one ``ufid,courses,environment,group_size,study_style`` row.

    Courses are separated by ``|``. Missing fields are empty, extra fields ignored.
    """
    fields = line.rstrip("\r\n").split(",")
    fields += [""] * (5 - len(fields))
    ufid_text, courses_text, environment, group_size, study_style = fields[:5]
    return Student(
        _parse_ufid(ufid_text),
        _split_courses(courses_text),
        Preferences(environment, group_size, study_style),
    )


def load_students(filename: str | os.PathLike[str]) -> list[Student]:
    """Read every student from a CSV file, skipping its header line."""
    with open(filename, encoding="utf-8") as handle:
        next(handle, None)
        return [parse_student_line(line) for line in handle]


def jaccard_similarity(
    a: Iterable[tuple[int, int]], b: Iterable[tuple[int, int]]
) -> float:
    """Jaccard index of the ufids in two match lists; 0.0 when both are empty."""
    ids_a = {ufid for ufid, _ in a}
    ids_b = {ufid for ufid, _ in b}
    union = ids_a | ids_b
    if not union:
        return 0.0
    return len(ids_a & ids_b) / len(union)