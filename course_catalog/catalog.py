import logging

from course_catalog.hash_table import DEFAULT_SIZE, HashTable
from course_catalog.parser import FIELD_DELIMITER, parse_line
from course_catalog.sorter import quicksort
from course_catalog.validator import read_lines, validate_file

logger = logging.getLogger(__name__)


class CourseCatalog:
    def __init__(self, capacity=DEFAULT_SIZE, delimiter=FIELD_DELIMITER):
        self.delimiter = delimiter
        self.construct_table(capacity)

    @classmethod
    def from_file(cls, path, delimiter=FIELD_DELIMITER):
        """Validate ``path`` and return an empty catalog sized to its rows."""
        row_count = cls.validate(path, delimiter)
        return cls(max(row_count, 1), delimiter)

    @staticmethod
    def validate(path, delimiter=FIELD_DELIMITER):
        return validate_file(path, delimiter)

    def construct_table(self, capacity):
        self.table = HashTable(capacity)
        logger.debug("Constructed table with %d slots", capacity)

    def __len__(self):
        return len(self.table)

    def load(self, path):
        # appends on every call; loading the same file twice stores each course twice
        # the whole file is read before the table is touched
        courses = [parse_line(line, self.delimiter) for _, line in read_lines(path)]
        for course in courses:
            self.table.insert(course)
        count = len(courses)
        logger.info("Loaded %d courses from %s", count, path)
        return count

    def list_sorted(self):
        courses = self.table.export()
        quicksort(courses)
        return courses

    def find(self, number):
        return self.table.search(number)

    def remove(self, number):
        self.table.remove(number)
