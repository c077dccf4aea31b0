# studymatch

studymatch pairs students as study partners. Two students score higher
the more courses they share and the more study preferences they have in
common. The preferences are environment, group size and study style.
Each shared course adds 10 points and each shared preference adds 5
points.

There are two matchers:

- `HashMatcher` (`studymatch.hash_matcher`) indexes students by course.
  It scores only candidates who share at least one course with the
  student.
- `GraphMatcher` (`studymatch.graph_matcher`) builds a weighted graph as
  students are added. It links each new student to every student already
  added who shares a course or any preference with them.

Both have `add_student(student)` and `find_top_matches(ufid, top_n=5)`.
`find_top_matches` returns a list of `(ufid, score)` pairs. The list is
sorted by highest score first, and equal scores are sorted by lower ufid
first. A negative `top_n` keeps every match. An unknown ufid, or a
student with nothing in common with anyone, gets an empty list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
studymatch
```

This opens an interactive menu that reads and writes `data.csv` in the
current directory:

1. Generate random student data. You are asked how many students to
   create, and they are written to `data.csv`.
2. Compare `HashMatcher` and `GraphMatcher`. Both matchers are run on
   the first student in the file. The output shows each matcher's top 5
   matches, the time each matcher took in milliseconds, and the Jaccard
   similarity of the two result lists.
3. Search for a student. You choose a matcher (1 or 2) and enter a UFID.
   The output shows that student's courses and preferences, then the top
   matches. Each match lists the courses and preferences it shares with
   the student.
4. Exit.

The menu also ends when input runs out. Errors such as a missing or
empty `data.csv` or an unknown UFID are reported on standard error.
`studymatch --help` prints a short usage message. The command has no
other options.

## CSV format

```
ufid,courses,environment,group_size,study_style
10000000,COP3502|MAC2311|PHY2048,quiet,small,focused
```

The first line is a header and is skipped when the file is read.
Courses are separated by `|`. Missing fields are read as empty and
extra fields are ignored. The generator picks 3 to 5 distinct courses
from a fixed pool of ten. It numbers ufids from 10000000 upward and
draws preferences from these values:

| Preference  | Values                       |
|-------------|------------------------------|
| environment | quiet, moderate, lively      |
| group_size  | small, medium, large         |
| study_style | focused, casual, interactive |

## Library use

```python
import random

from studymatch.dataset import jaccard_similarity, load_students
from studymatch.generator import generate_data_csv
from studymatch.graph_matcher import GraphMatcher
from studymatch.hash_matcher import HashMatcher

generate_data_csv("data.csv", 200, random.Random(1))
students = load_students("data.csv")

by_hash = HashMatcher()
by_graph = GraphMatcher()
for student in students:
    by_hash.add_student(student)
    by_graph.add_student(student)

target = students[0].ufid
a = by_hash.find_top_matches(target, 5)   # [(ufid, score), ...]
b = by_graph.find_top_matches(target, 5)
print(jaccard_similarity(a, b))
```

Other pieces:

- `studymatch.models`: `Student(ufid, courses, prefs)` and
  `Preferences(environment, group_size, study_style)` are frozen
  dataclasses. `Student.shared_courses(other)` returns the courses two
  students have in common, sorted. `Preferences.shared_with(other)`
  returns the names of the preferences that match, in field order.
- `studymatch.generator`: `generate_students(count=50, rng=None)` yields
  random `Student` objects without writing a file.
  `generate_data_csv(filename, count=50, rng=None)` writes them to a CSV
  file and returns how many it wrote.
- `studymatch.dataset`: `parse_student_line(line)` parses one CSV row.
  `load_students(filename)` reads a whole file.
  `jaccard_similarity(a, b)` compares the ufids of two match lists and
  returns 0.0 when both lists are empty.