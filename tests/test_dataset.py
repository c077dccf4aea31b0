import pytest

from studymatch.dataset import jaccard_similarity, load_students, parse_student_line
from studymatch.models import Preferences, Student


def test_parse_full_line():
    s = parse_student_line("10000000,COP3502|MAC2311|PHY2048,quiet,small,focused")
    assert s == Student(
        10000000, ["COP3502", "MAC2311", "PHY2048"], Preferences("quiet", "small", "focused")
    )


def test_parse_strips_line_ending():
    s = parse_student_line("10000001,COP3530,lively,large,casual\r\n")
    assert s.prefs.study_style == "casual"


def test_parse_missing_fields_are_empty():
    s = parse_student_line("10000002,COP3502")
    assert s.courses == frozenset({"COP3502"})
    assert s.prefs == Preferences("", "", "")


def test_parse_extra_fields_ignored():
    s = parse_student_line("10000003,CEN3031,quiet,medium,interactive,extra")
    assert s.prefs == Preferences("quiet", "medium", "interactive")


def test_parse_trailing_separator_and_empty_courses():
    assert parse_student_line("10000004,COP3502|,quiet,small,focused").courses == frozenset(
        {"COP3502"}
    )
    assert parse_student_line("10000005,,quiet,small,focused").courses == frozenset()


def test_parse_ufid_leading_number():
    assert parse_student_line(" 10000006abc,COP3502,quiet,small,focused").ufid == 10000006


@pytest.mark.parametrize("ufid", ["", "abc", "99999999999"])
def test_parse_bad_ufid_raises(ufid):
    with pytest.raises(ValueError):
        parse_student_line(f"{ufid},COP3502,quiet,small,focused")


def test_load_students_skips_header(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "ufid,courses,environment,group_size,study_style\n"
        "10000000,COP3502|MAC2311,quiet,small,focused\n"
        "10000001,PHY2048,lively,large,casual\n",
        encoding="utf-8",
    )
    students = load_students(path)
    assert [s.ufid for s in students] == [10000000, 10000001]
    assert students[1].courses == frozenset({"PHY2048"})


def test_load_header_only(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("ufid,courses,environment,group_size,study_style\n", encoding="utf-8")
    assert load_students(path) == []


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_students(tmp_path / "nope.csv")


def test_jaccard_identical_ids():
    assert jaccard_similarity([(1, 30), (2, 20)], [(2, 5), (1, 9)]) == 1.0


def test_jaccard_disjoint():
    assert jaccard_similarity([(1, 30)], [(2, 30)]) == 0.0


def test_jaccard_both_empty():
    assert jaccard_similarity([], []) == 0.0


def test_jaccard_partial_overlap():
    assert jaccard_similarity([(1, 10), (2, 10)], [(2, 10), (3, 10)]) == pytest.approx(1 / 3)


def test_jaccard_symmetric_and_bounded():
    a = [(1, 1), (2, 2), (5, 5)]
    b = [(2, 2), (7, 7)]
    value = jaccard_similarity(a, b)
    assert value == jaccard_similarity(b, a)
    assert 0.0 <= value <= 1.0