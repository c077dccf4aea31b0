"""Interactive menu for generating data, comparing matchers and searching students."""

from __future__ import annotations

import argparse
import re
import sys
import time
from typing import Sequence, TextIO

from .dataset import jaccard_similarity, load_students
from .generator import generate_data_csv
from .graph_matcher import GraphMatcher
from .hash_matcher import HashMatcher
from .models import Student

DATA_FILE = "data.csv"

_INT_PREFIX = re.compile(r"[+-]?\d+")


def _read_token(stream: TextIO) -> str:
    """Read one whitespace-delimited token, raising EOFError if none is left."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise EOFError("no more input")
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def _read_int(stream: TextIO) -> int:
    """Read an integer token; a token that does not start with one reads as 0."""
    match = _INT_PREFIX.match(_read_token(stream))
    return int(match.group()) if match else 0


def _load_or_empty(filename: str) -> list[Student]:
    try:
        return load_students(filename)
    except OSError:
        return []


def _print_matches(matches: list[tuple[int, int]], stdout: TextIO) -> None:
    for ufid, score in matches:
        print(f"  UFID: {ufid}, Score: {score}", file=stdout)


def generate_data_flow(stdin: TextIO, stdout: TextIO) -> int:
    """Ask how many students to generate and write them to the data file."""
    stdout.write("Enter the number of random students to generate: ")
    stdout.flush()
    count = _read_int(stdin)
    generate_data_csv(DATA_FILE, count)
    print(f"\u2705 Generated {count} entries in {DATA_FILE}", file=stdout)
    print(f"Generated {count} students and saved to {DATA_FILE}!\n", file=stdout)
    return count


def compare_matchers_flow(filename: str, stdout: TextIO) -> float | None:
    """Run both matchers on the first student of a file and report the results.

    Returns the Jaccard similarity of the two top-match lists, or None when
    no students could be loaded.
    """
    students = _load_or_empty(filename)
    if not students:
        print(f"Failed to load students from {filename}", file=sys.stderr)
        return None

    test_ufid = students[0].ufid

    hash_matcher = HashMatcher()
    start_a = time.perf_counter()
    for student in students:
        hash_matcher.add_student(student)
    matches_a = hash_matcher.find_top_matches(test_ufid)
    end_a = time.perf_counter()

    graph_matcher = GraphMatcher()
    start_b = time.perf_counter()
    for student in students:
        graph_matcher.add_student(student)
    matches_b = graph_matcher.find_top_matches(test_ufid)
    end_b = time.perf_counter()

    print(f"\nComparing matchers on student {test_ufid}\n", file=stdout)
    print("HashMatcher Top Matches:", file=stdout)
    _print_matches(matches_a, stdout)
    print("\nGraphMatcher Top Matches:", file=stdout)
    _print_matches(matches_b, stdout)

    print(f"\nHashMatcher Time: {int((end_a - start_a) * 1000)} ms", file=stdout)
    print(f"GraphMatcher Time: {int((end_b - start_b) * 1000)} ms", file=stdout)

    similarity = jaccard_similarity(matches_a, matches_b)
    print(f"\nJaccard Similarity of Top Matches: {similarity:g}\n", file=stdout)
    return similarity


def _joined_or_none(items: list[str]) -> str:
    return ", ".join(items) if items else "(none)"


def search_single_ufid(
    students: Sequence[Student], stdin: TextIO, stdout: TextIO
) -> list[tuple[int, int]]:
    """Ask for a matcher and a ufid, then describe that student's top matches.

    Returns the matches shown, or an empty list when nothing was shown.
    """
    if not students:
        print("No students loaded.", file=sys.stderr)
        return []

    by_ufid = {student.ufid: student for student in students}

    hash_matcher = HashMatcher()
    graph_matcher = GraphMatcher()
    for student in students:
        hash_matcher.add_student(student)
        graph_matcher.add_student(student)

    print("\nChoose matcher:", file=stdout)
    print("1. HashMatcher", file=stdout)
    print("2. GraphMatcher", file=stdout)
    stdout.write("Enter choice: ")
    stdout.flush()
    matcher_choice = _read_int(stdin)

    stdout.write("Enter UFID to find matches for: ")
    stdout.flush()
    ufid = _read_int(stdin)

    student = by_ufid.get(ufid)
    if student is None:
        print("UFID not found in the dataset.", file=sys.stderr)
        return []

    print("\nStudent Info:", file=stdout)
    print(f"UFID: {student.ufid}", file=stdout)
    print(f"Courses: {', '.join(sorted(student.courses))}", file=stdout)
    print("Preferences:", file=stdout)
    print(f"  - Environment: {student.prefs.environment}", file=stdout)
    print(f"  - Group Size : {student.prefs.group_size}", file=stdout)
    print(f"  - Study Style: {student.prefs.study_style}", file=stdout)

    print("\nTop Matches:", file=stdout)
    if matcher_choice == 1:
        matches = hash_matcher.find_top_matches(ufid)
        print("Using HashMatcher:", file=stdout)
    elif matcher_choice == 2:
        matches = graph_matcher.find_top_matches(ufid)
        print("Using GraphMatcher:", file=stdout)
    else:
        print("Invalid matcher choice.", file=stdout)
        return []

    for match_ufid, score in matches:
        match = by_ufid[match_ufid]
        print(f"\nUFID: {match_ufid}, Score: {score}", file=stdout)
        print(
            f"   Shared Courses: {_joined_or_none(student.shared_courses(match))}",
            file=stdout,
        )
        print(
            "   Shared Preferences: "
            f"{_joined_or_none(student.prefs.shared_with(match.prefs))}",
            file=stdout,
        )
    return matches


def _print_menu(stdout: TextIO) -> None:
    print("Select an option:", file=stdout)
    print("1. Generate random student data", file=stdout)
    print("2. Compare HashMatcher and GraphMatcher", file=stdout)
    print("3. Search Student (HashMatcher or GraphMatcher)", file=stdout)
    print("4. Exit", file=stdout)
    print("==============================", file=stdout)
    stdout.write("Enter choice: ")
    stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="studymatch",
        description=f"Find study partners among the students in {DATA_FILE}.",
    )
    parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    students: list[Student] = []
    data_loaded = False

    try:
        while True:
            _print_menu(stdout)
            choice = _read_int(stdin)

            if choice == 1:
                generate_data_flow(stdin, stdout)
                students = _load_or_empty(DATA_FILE)
                data_loaded = True
            elif choice == 2:
                if not data_loaded:
                    students = _load_or_empty(DATA_FILE)
                    data_loaded = True
                compare_matchers_flow(DATA_FILE, stdout)
            elif choice == 3:
                if not data_loaded:
                    students = _load_or_empty(DATA_FILE)
                    data_loaded = True
                search_single_ufid(students, stdin, stdout)
            elif choice == 4:
                print("Exiting...", file=stdout)
                break
            else:
                print("Invalid choice. Please try again.\n", file=stdout)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())