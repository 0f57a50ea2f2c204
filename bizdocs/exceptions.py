"""Application error taxonomy.

Services raise these; the handlers registered in ``bizdocs.main`` turn them
into HTTP responses. Anything else escaping a request is a 500.
"""


class AppError(Exception):
    """Base class for errors the API knows how to present."""

    status_code = 500
    message = "Something went wrong. Please try again later."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class AuthenticationFailure(AppError):
    """Bad credentials or a missing, expired or revoked token."""

    status_code = 401
    message = "Unauthenticated."


class NotFound(AppError):
    """The referenced entity does not exist or is not visible to the caller."""

    status_code = 404
    message = "Resource not found."

    def __init__(self, resource: str | None = None):
        super().__init__(f"{resource} not found." if resource else None)
        self.resource = resource


class ValidationFailure(AppError):
    """Caller input failed a declared constraint.

    ``errors`` maps a field name to the list of messages for that field.
    """

    status_code = 422
    message = "The given data was invalid."

    def __init__(self, errors: dict[str, list[str]], message: str | None = None):
        super().__init__(message)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailure":
        return cls({field: [message]})

    def to_dict(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class StorageFailure(AppError):
    """Object storage or relational store I/O failed.

    The message given here is for logs only; callers always see the generic text.
    """

    status_code = 500

    def __init__(self, detail: str):
        super().__init__()
        self.detail = detail

    def __str__(self) -> str:
        return self.detail
