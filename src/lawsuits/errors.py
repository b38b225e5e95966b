"""Typed errors raised by the query core and translated at the HTTP boundary."""


class ApiError(Exception):
    """Error carrying a stable code and the HTTP status it maps to."""

    def __init__(self, code: str, message: str, status_code: int = 400):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code

    def to_dict(self):
        return {"code": self.code, "message": self.message}


class NotFoundError(ApiError):
    def __init__(self, message: str = "Resource not found"):
        super().__init__("NOT_FOUND", message, 404)


class BadRequestError(ApiError):
    def __init__(self, message: str = "Invalid request"):
        super().__init__("BAD_REQUEST", message, 400)


class InvalidInputError(ValueError):
    """Precondition violation inside the core (e.g. a case without proceedings)."""

    code = "INVALID_INPUT"


class DatasetLoadError(RuntimeError):
    pass
