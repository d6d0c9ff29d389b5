"""
Typed errors raised by the outline, admission and review services.

Views catch ``LogbookError`` and render it with
``logbook_project.utils.error_response``; nothing here is retried.
"""
from rest_framework import status


class LogbookError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "error"
    default_message = "The request could not be processed."

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(LogbookError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Record not found."


class CourseNotFoundError(NotFoundError):
    code = "course_not_found"
    default_message = "Course not found."


class NotAuthorizedError(LogbookError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "not_authorized"
    default_message = "You are not authorized to perform this action."


class InvalidTransitionError(LogbookError):
    code = "invalid_transition"
    default_message = "Invalid review status provided."


class WindowClosedError(LogbookError):
    """Raised by the timetabled submission path; ``details`` holds the window bounds."""
    code = "window_closed"
    default_message = "Logbook entry window closed."


class DuplicateEntryError(LogbookError):
    status_code = status.HTTP_409_CONFLICT
    code = "duplicate_entry"
    default_message = "A logbook entry for this course and time slot already exists."


class MissingFieldError(LogbookError):
    code = "missing_field"
    default_message = "Missing required fields."


class ValidationError(LogbookError):
    code = "validation_error"
    default_message = "Validation failed."
