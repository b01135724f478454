"""
Lesson-related exceptions.
"""

from .base import DiscStoreException


class LessonException(DiscStoreException):
    """Base exception for lesson-related errors."""
    pass


class InvalidLessonDateException(LessonException):
    """Raised when a date string matches none of the accepted formats."""

    def __init__(self, value: str):
        super().__init__(
            f"Invalid date: {value!r}",
            details={'value': value}
        )
        self.value = value
