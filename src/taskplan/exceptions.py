"""Custom exceptions for taskplan."""


class TaskplanError(Exception):
    """Base exception for all taskplan errors."""

    pass


class ValidationError(TaskplanError):
    """Raised when validation fails."""

    pass


class TaskValidationError(ValidationError):
    """Raised when a task has an invalid duration or priority."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when a dependency would close a cycle."""

    pass


class MissingReferenceError(ValidationError):
    """Raised when a referenced task ID does not exist."""

    pass


class SelfDependencyError(ValidationError):
    """Raised when a task is made to depend on itself."""

    pass


class DuplicateDependencyError(ValidationError):
    """Raised when the same dependency edge is added twice."""

    pass


class ParseError(TaskplanError):
    """Raised when YAML parsing fails."""

    pass
