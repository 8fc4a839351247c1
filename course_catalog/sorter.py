from typing import Callable, List, Optional

from course_catalog.course import Course


def by_number(course: Course) -> str:
    return course.number


def _partition(courses, low, high, key):
    # pivot compared by value; its element may be swapped away
    pivot = key(courses[low + (high - low) // 2])

    while True:
        while key(courses[low]) < pivot:
            low += 1
        while pivot < key(courses[high]):
            high -= 1

        if low >= high:
            return high

        courses[low], courses[high] = courses[high], courses[low]
        low += 1
        high -= 1


def quicksort(
    courses: List[Course],
    low: int = 0,
    high: Optional[int] = None,
    key: Callable[[Course], str] = by_number,
) -> None:
    """Sort ``courses[low:high + 1]`` in place, ascending by ``key``.

    Not stable; course numbers are expected to be unique.
    """
    if high is None:
        high = len(courses) - 1
    if low >= high:
        return

    low_end = _partition(courses, low, high, key)
    quicksort(courses, low, low_end, key)
    quicksort(courses, low_end + 1, high, key)
