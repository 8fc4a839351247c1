import random

from course_catalog.course import Course
from course_catalog.sorter import quicksort


def numbers(courses):
    return [c.number for c in courses]


def test_sorts_by_number():
    courses = [Course(n, n) for n in ["CS300", "CS100", "MATH201", "CS200"]]
    quicksort(courses)
    assert numbers(courses) == ["CS100", "CS200", "CS300", "MATH201"]


def test_empty_and_single():
    empty = []
    quicksort(empty)
    assert empty == []
    one = [Course("CS100", "Basics")]
    quicksort(one)
    assert numbers(one) == ["CS100"]


def test_sorted_and_reversed_input():
    expected = [f"CS{i:03d}" for i in range(50)]
    forward = [Course(n, n) for n in expected]
    backward = list(reversed(forward))
    quicksort(forward)
    quicksort(backward)
    assert numbers(forward) == expected
    assert numbers(backward) == expected


def test_random_input_keeps_every_course():
    rng = random.Random(300)
    source = [f"C{rng.randint(0, 999):03d}" for _ in range(200)]
    courses = [Course(n, n) for n in source]
    quicksort(courses)
    assert numbers(courses) == sorted(source)


def test_sorts_subrange_only():
    courses = [Course(n, n) for n in ["Z", "C", "B", "A", "Y"]]
    quicksort(courses, 1, 3)
    assert numbers(courses) == ["Z", "A", "B", "C", "Y"]
