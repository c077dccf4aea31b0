import random

from studymatch.generator import generate_students
from studymatch.graph_matcher import COURSE_WEIGHT, PREF_WEIGHT, GraphMatcher
from studymatch.hash_matcher import HashMatcher
from studymatch.models import Preferences, Student

SAME = Preferences("quiet", "small", "focused")
OTHER = Preferences("lively", "large", "casual")


def _matcher(*students):
    m = GraphMatcher()
    for s in students:
        m.add_student(s)
    return m


def test_unknown_ufid_gives_nothing():
    m = _matcher(Student(1, ["A"], SAME), Student(2, ["A"], SAME))
    assert m.find_top_matches(42) == []


def test_lone_student_has_no_matches():
    m = _matcher(Student(1, ["A"], SAME))
    assert m.find_top_matches(1) == []


def test_unrelated_students_not_connected():
    m = _matcher(Student(1, ["A"], SAME), Student(2, ["B"], OTHER))
    assert m.find_top_matches(1) == []
    assert m.find_top_matches(2) == []


def test_preferences_alone_create_edge():
    m = _matcher(Student(1, ["A"], SAME), Student(2, ["B"], SAME))
    assert m.find_top_matches(1) == [(2, 3 * PREF_WEIGHT)]


def test_edges_are_symmetric():
    m = _matcher(
        Student(1, ["A", "B"], SAME),
        Student(2, ["B", "C"], Preferences("quiet", "large", "casual")),
    )
    assert m.find_top_matches(1) == [(2, COURSE_WEIGHT + PREF_WEIGHT)]
    assert m.find_top_matches(2) == [(1, COURSE_WEIGHT + PREF_WEIGHT)]


def test_descending_order_and_truncation():
    students = [Student(1, ["A", "B"], SAME)]
    students += [Student(i, ["A"], SAME if i % 2 else OTHER) for i in range(2, 10)]
    m = _matcher(*students)
    result = m.find_top_matches(1, 3)
    assert len(result) == 3
    weights = [w for _, w in result]
    assert weights == sorted(weights, reverse=True)
    assert len(m.find_top_matches(1)) == 5
    assert len(m.find_top_matches(1, -1)) == 8


def test_agrees_with_hash_matcher_on_course_sharers():
    students = list(generate_students(60, random.Random(7)))
    graph = _matcher(*students)
    hashed = HashMatcher()
    for s in students:
        hashed.add_student(s)

    target = students[0].ufid
    graph_scores = dict(graph.find_top_matches(target, -1))
    hash_scores = dict(hashed.find_top_matches(target, -1))
    assert hash_scores
    for ufid, score in hash_scores.items():
        assert graph_scores[ufid] == score
    assert set(hash_scores) <= set(graph_scores)