"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    SKILL_NOT_FOUND = "SKILL_NOT_FOUND"
    MESSAGE_NOT_FOUND = "MESSAGE_NOT_FOUND"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Upstream errors (502)
    STORAGE_ERROR = "STORAGE_ERROR"

    # Server errors (500 / 503)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class InvalidArgumentError(AppException):
    """A field value is outside its allowed domain."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            status_code=400,
            details={"field": field},
        )


class ProjectNotFoundError(AppException):
    """Project not found."""

    def __init__(self, project_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROJECT_NOT_FOUND,
            message=f"Project not found: {project_id}",
            status_code=404,
            details={"project_id": project_id},
        )


class SkillNotFoundError(AppException):
    """Skill not found."""

    def __init__(self, skill_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SKILL_NOT_FOUND,
            message=f"Skill not found: {skill_id}",
            status_code=404,
            details={"skill_id": skill_id},
        )


class ContactMessageNotFoundError(AppException):
    """Contact message not found."""

    def __init__(self, message_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.MESSAGE_NOT_FOUND,
            message=f"Contact message not found: {message_id}",
            status_code=404,
            details={"message_id": message_id},
        )


class StorageError(AppException):
    """The file storage backend failed or answered unexpectedly."""

    def __init__(
        self,
        message: str = "File storage request failed",
        error_code: ErrorCode = ErrorCode.STORAGE_ERROR,
        status_code: int = 502,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status_code,
            details=details,
        )


class StoredFileNotFoundError(StorageError):
    """A file reference points at an object that no longer exists."""

    def __init__(self, file_id: str) -> None:
        super().__init__(
            message=f"Stored file not found: {file_id}",
            error_code=ErrorCode.FILE_NOT_FOUND,
            status_code=404,
            details={"file_id": file_id},
        )
