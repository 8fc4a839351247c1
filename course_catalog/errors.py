"""Exceptions raised while reading and validating a course file."""


class CatalogError(Exception):
    pass


class CatalogFileError(CatalogError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to open file: {path} ({reason})")


class ValidationError(CatalogError):
    pass


class MalformedRowError(ValidationError):
    def __init__(self, line_number, field_count):
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(
            f"Line {line_number}: there must be at minimum a course number and title, "
            f"but only {field_count} values were found."
        )


class DanglingPrerequisiteError(ValidationError):
    def __init__(self, number):
        self.number = number
        super().__init__(f"No entry found for listed prerequisite: {number}")


class ConfigError(CatalogError):
    pass
