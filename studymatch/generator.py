"""Random student datasets."""

from __future__ import annotations

import csv
import os
import random
from typing import Iterator

from .models import Preferences, Student

COURSE_POOL = (
    "COP3502", "MAC2311", "PHY2048", "CIS4930", "STA2023",
    "COP3530", "CDA3101", "CEN3031", "EEL3701", "COP4600",
)
ENVIRONMENTS = ("quiet", "moderate", "lively")
GROUP_SIZES = ("small", "medium", "large")
STUDY_STYLES = ("focused", "casual", "interactive")

FIRST_UFID = 10000000
CSV_HEADER = ("ufid", "courses", "environment", "group_size", "study_style")


def _random_records(
    count: int, rng: random.Random
) -> Iterator[tuple[int, list[str], Preferences]]:
    for i in range(count):
        courses = rng.sample(COURSE_POOL, 3 + rng.randrange(3))
        prefs = Preferences(
            rng.choice(ENVIRONMENTS), rng.choice(GROUP_SIZES), rng.choice(STUDY_STYLES)
        )
        yield FIRST_UFID + i, courses, prefs


def generate_students(count: int = 50, rng: random.Random | None = None) -> Iterator[Student]:
    """Yield ``count`` random students with consecutive ufids."""
    rng = rng if rng is not None else random.Random()
    for ufid, courses, prefs in _random_records(count, rng):
        yield Student(ufid, courses, prefs)


def generate_data_csv(
    filename: str | os.PathLike[str], count: int = 50, rng: random.Random | None = None
) -> int:
    """Write ``count`` random students to a CSV file and return how many were written."""
    rng = rng if rng is not None else random.Random()
    with open(filename, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        written = 0
        for ufid, courses, prefs in _random_records(count, rng):
            writer.writerow(
                (ufid, "|".join(courses), prefs.environment, prefs.group_size, prefs.study_style)
            )
            written += 1
    return written