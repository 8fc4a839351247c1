import logging

from course_catalog.errors import (
    CatalogFileError,
    DanglingPrerequisiteError,
    MalformedRowError,
)
from course_catalog.parser import FIELD_DELIMITER, tokenize

logger = logging.getLogger(__name__)

MIN_FIELDS = 2


def read_lines(path):
    """Yield ``(line_number, line)`` for every row of ``path``.

    A byte order mark at the start of the file is dropped.
    """
    try:
        with open(path, encoding="utf-8-sig") as f:
            for line_number, line in enumerate(f, 1):
                yield line_number, line
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogFileError(path, e) from e


def validate_file(path, delimiter=FIELD_DELIMITER):
    """Check that every row of a course file is usable.

    Each row needs a course number and a title, and every prerequisite named
    anywhere in the file must also appear as a course number. Nothing is
    built; returns the number of rows so the table can be sized to it.
    """
    numbers = set()
    prerequisites = set()
    row_count = 0

    for line_number, line in read_lines(path):
        fields = tokenize(line, delimiter)
        if len(fields) < MIN_FIELDS:
            raise MalformedRowError(line_number, len(fields))
        numbers.add(fields[0])
        prerequisites.update(fields[2:])
        row_count += 1

    missing = sorted(prerequisites - numbers)
    if missing:
        raise DanglingPrerequisiteError(missing[0])

    logger.info("Validated %s: %d courses", path, row_count)
    return row_count
