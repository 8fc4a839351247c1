import argparse
import logging
import sys

from course_catalog.catalog import CourseCatalog
from course_catalog.config import parse_table_size, settings
from course_catalog.errors import CatalogError, ConfigError

logger = logging.getLogger(__name__)

MENU = (
    "Menu:\n"
    "\t1. Load Courses\n"
    "\t2. Print Courses in Order\n"
    "\t3. Find and Print Course\n"
    "\t9. Exit\n"
    "Selection: "
)
UNKNOWN_OPTION = "Menu option unknown. Please select a valid option (1, 2, 3, 9)."

LOAD, PRINT_ALL, FIND, EXIT = 1, 2, 3, 9


def handle_choice(choice, catalog, path, prompt=None):
    """Run one menu selection against ``catalog``. Returns False on exit."""
    prompt = prompt or input
    if choice == EXIT:
        return False

    if choice == LOAD:
        try:
            catalog.load(path)
        except CatalogError as e:
            logger.error("Load failed: %s", e)
            print(f"Could not load courses from file: {path}")
    elif choice == PRINT_ALL:
        for course in catalog.list_sorted():
            print(course)
    elif choice == FIND:
        number = prompt("Course number: ").strip()
        course = catalog.find(number)
        if course is None:
            print(f"Could not find course with number: {number}")
        else:
            print(course)
    else:
        print(UNKNOWN_OPTION)
    return True


def read_choice(prompt=None):
    prompt = prompt or input
    raw = prompt(MENU)
    try:
        return int(raw.strip())
    except ValueError:
        return None


def run(catalog, path, prompt=None):
    prompt = prompt or input
    while True:
        try:
            choice = read_choice(prompt)
            if choice is None:
                print(UNKNOWN_OPTION)
                continue
            if not handle_choice(choice, catalog, path, prompt):
                break
        except EOFError:
            print()
            break


def table_capacity(row_count, configured):
    size = parse_table_size(configured)
    return size if size > 0 else max(row_count, 1)


def build_parser():
    parser = argparse.ArgumentParser(description="Look up courses from a course catalog file")
    parser.add_argument("path", nargs="?", default=settings.CATALOG_PATH, help="Comma separated course file")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        row_count = CourseCatalog.validate(args.path)
    except CatalogError as e:
        logger.error("%s", e)
        print(f"Could not validate data in file: {args.path}")
        return 1

    try:
        capacity = table_capacity(row_count, settings.TABLE_SIZE)
    except ConfigError as e:
        logger.error("%s", e)
        print(f"Invalid configuration: {e}")
        return 1

    catalog = CourseCatalog(capacity)
    run(catalog, args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
