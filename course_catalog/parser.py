from typing import List

from course_catalog.course import Course

FIELD_DELIMITER = ","


def tokenize(line: str, delimiter: str = FIELD_DELIMITER) -> List[str]:
    """Split one row into its non-empty fields.

    Empty fields (two delimiters in a row, or a trailing delimiter) are
    dropped, so they never shift the position of the fields after them.
    """
    row = line.rstrip("\r\n")
    return [field for field in row.split(delimiter) if field]


def parse_line(line: str, delimiter: str = FIELD_DELIMITER) -> Course:
    fields = tokenize(line, delimiter)
    # missing number/title stay empty; rows like that never pass validation
    number = fields[0] if len(fields) > 0 else ""
    title = fields[1] if len(fields) > 1 else ""
    return Course(number, title, tuple(fields[2:]))
