"""
Error taxonomy shared by the storage and API layers.

Every error carries the HTTP status it maps to; the handlers installed by
``wedding_photos.main.create_app`` turn them into ``{"error": message}``.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed field in a request."""
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"

    @classmethod
    def for_entity(cls, entity: str) -> "NotFoundError":
        return cls(f"{entity} not found")


class UploadRejected(AppError):
    """Zero files, too many files, a disallowed type, or an oversized file."""
    status_code = 400
    default_message = "Upload rejected"


class InternalError(AppError):
    status_code = 500
