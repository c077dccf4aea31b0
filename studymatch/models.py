"""Student records and their study preferences."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterable


@dataclass(frozen=True)
class Preferences:
    """How a student likes to study."""

    environment: str
    group_size: str
    study_style: str

    def shared_with(self, other: Preferences) -> list[str]:
        """Names of the preferences both sides agree on, in field order."""
        return [
            f.name
            for f in fields(self)
            if getattr(self, f.name) == getattr(other, f.name)
        ]


@dataclass(frozen=True)
class Student:
    """A student: identifier, enrolled courses and preferences."""

    ufid: int
    courses: frozenset[str] = field(default_factory=frozenset)
    prefs: Preferences = field(default_factory=lambda: Preferences("", "", ""))

    def __init__(
        self, ufid: int, courses: Iterable[str] = (), prefs: Preferences | None = None
    ) -> None:
        object.__setattr__(self, "ufid", ufid)
        object.__setattr__(self, "courses", frozenset(courses))
        object.__setattr__(self, "prefs", prefs if prefs is not None else Preferences("", "", ""))

    def shared_courses(self, other: Student) -> list[str]:
        """Courses taken by both students, in sorted order."""
        return sorted(self.courses & other.courses)