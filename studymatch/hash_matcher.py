"""Matching by a course index and direct overlap scoring."""

from __future__ import annotations

from collections import defaultdict

from .models import Student

COURSE_WEIGHT = 10
PREF_WEIGHT = 5


class HashMatcher:
    """Scores candidates that share at least one course with the target."""

    def __init__(self) -> None:
        self._course_index: defaultdict[str, set[int]] = defaultdict(set)
        self._students: dict[int, Student] = {}

    def add_student(self, student: Student) -> None:
        """Register a student, replacing any earlier record with the same ufid."""
        self._students[student.ufid] = student
        for course in student.courses:
            self._course_index[course].add(student.ufid)

    def find_top_matches(self, ufid: int, top_n: int = 5) -> list[tuple[int, int]]:
        """Best (ufid, score) pairs for a student, highest score first.

        Unknown students have no matches. A negative ``top_n`` keeps every match.
        """
        target = self._students.get(ufid)
        if target is None:
            return []

        candidates = {
            other
            for course in target.courses
            for other in self._course_index.get(course, ())
            if other != ufid
        }

        result = [
            (cand, self._score(target, self._students[cand])) for cand in candidates
        ]
        result.sort(key=lambda pair: (-pair[1], pair[0]))
        return result[:top_n] if top_n >= 0 else result

    @staticmethod
    def _score(a: Student, b: Student) -> int:
        course_overlap = len(a.courses & b.courses)
        pref_overlap = len(a.prefs.shared_with(b.prefs))
        return course_overlap * COURSE_WEIGHT + pref_overlap * PREF_WEIGHT