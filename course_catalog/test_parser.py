from course_catalog.course import Course
from course_catalog.parser import parse_line, tokenize


def test_tokenize_drops_empty_fields():
    assert tokenize("CS200,,Data Structures,,CS100,\n") == ["CS200", "Data Structures", "CS100"]


def test_tokenize_keeps_final_field_without_delimiter():
    assert tokenize("CS100,Basics") == ["CS100", "Basics"]


def test_tokenize_strips_crlf():
    assert tokenize("CS100,Basics\r\n") == ["CS100", "Basics"]


def test_parse_line_positional_fields():
    course = parse_line("CS300,Algorithms,CS200,MATH201\n")
    assert course == Course("CS300", "Algorithms", ("CS200", "MATH201"))


def test_parse_line_no_prerequisites():
    course = parse_line("CS100,Basics\n")
    assert course.prerequisites == ()


def test_empty_prerequisite_is_not_kept():
    course = parse_line("CS300,Algorithms,,CS200")
    assert course.prerequisites == ("CS200",)


def test_malformed_line_leaves_missing_fields_empty():
    course = parse_line("CS100\n")
    assert course.number == "CS100"
    assert course.title == ""


def test_course_str():
    course = Course("CS300", "Algorithms", ("CS200", "MATH201"))
    assert str(course) == "Number: CS300\nTitle: Algorithms\nPrerequisites: CS200, MATH201"
    assert str(Course("CS100", "Basics")).endswith("Prerequisites: ")
