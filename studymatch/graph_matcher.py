"""Matching by a weighted graph built as students are added."""

from __future__ import annotations

from collections import defaultdict

from .models import Student

COURSE_WEIGHT = 10
PREF_WEIGHT = 5


class GraphMatcher:
    """Keeps weighted edges between every pair of students with anything in common."""

    def __init__(self) -> None:
        self._students: dict[int, Student] = {}
        self._edges: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
        self._course_index: defaultdict[str, list[int]] = defaultdict(list)
        self._env_index: defaultdict[str, list[int]] = defaultdict(list)
        self._group_index: defaultdict[str, list[int]] = defaultdict(list)
        self._style_index: defaultdict[str, list[int]] = defaultdict(list)

    def _pref_indexes(self, student: Student):
        prefs = student.prefs
        yield self._env_index, prefs.environment
        yield self._group_index, prefs.group_size
        yield self._style_index, prefs.study_style

    def add_student(self, student: Student) -> None:
        """Add a student and connect it to everyone already added."""
        weights: defaultdict[int, int] = defaultdict(int)
        for course in sorted(student.courses):
            for other in self._course_index.get(course, ()):
                weights[other] += COURSE_WEIGHT
        for index, value in self._pref_indexes(student):
            for other in index.get(value, ()):
                weights[other] += PREF_WEIGHT

        for other, weight in weights.items():
            if weight > 0:
                self._edges[student.ufid].append((other, weight))
                self._edges[other].append((student.ufid, weight))

        for course in student.courses:
            self._course_index[course].append(student.ufid)
        for index, value in self._pref_indexes(student):
            index[value].append(student.ufid)

        self._students[student.ufid] = student

    def find_top_matches(self, ufid: int, top_n: int = 5) -> list[tuple[int, int]]:
        """Heaviest (ufid, weight) edges of a student, highest first.

        A student without edges has no matches. A negative ``top_n`` keeps every edge.
        """
        edges = self._edges.get(ufid)
        if not edges:
            return []
        result = sorted(edges, key=lambda pair: (-pair[1], pair[0]))
        return result[:top_n] if top_n >= 0 else result