from werkzeug.exceptions import HTTPException


class FlatshareError(HTTPException):
    """
    Base class for domain errors.
    Subclasses carry an HTTP status code and a `data` payload, so flask-restful
    and the app-level error handler both render them as JSON.
    """
    code = 500
    description = "Internal server error"

    def __init__(self, message=None, **extra):
        super().__init__(description=message or self.description)
        self.data = {"message": self.description, **extra}


class ValidationError(FlatshareError):
    code = 400
    description = "Invalid request"

    def __init__(self, message=None, errors=None):
        if errors is None:
            errors = [message] if message else []
        super().__init__(message, errors=errors)
        self.errors = errors


class AuthError(FlatshareError):
    code = 401
    description = "Authentication failed"


class ForbiddenError(FlatshareError):
    code = 403
    description = "Access denied"


class NotFoundError(FlatshareError):
    code = 404
    description = "Not found"


class ConflictError(FlatshareError):
    code = 409
    description = "Conflict"
