from course_catalog.catalog import CourseCatalog
from course_catalog.course import Course
from course_catalog.errors import CatalogError

__all__ = ["CourseCatalog", "Course", "CatalogError"]
