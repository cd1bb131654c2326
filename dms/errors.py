"""Application errors.

Every error carries the HTTP status it maps to; the handlers registered in
``dms.main`` turn them into the ``{message, body}`` envelope.
"""


class DMSError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500
    default_message = "Oops! Something Went Wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(DMSError):
    status_code = 400
    default_message = "Failed Operation"


class InvalidToken(DMSError):
    status_code = 400
    default_message = "Invalid token"


class Unauthenticated(DMSError):
    status_code = 401
    default_message = "You cannot access this resource, please provide a valid token"


class NotAuthorized(DMSError):
    """The caller is authenticated but does not own the resource."""

    status_code = 401
    default_message = "You are not authorized to perform this action"


class Forbidden(DMSError):
    status_code = 403
    default_message = "You do not have the required role to access this resource"


class NotFound(DMSError):
    status_code = 404
    default_message = "Request Not Found"


class InternalError(DMSError):
    pass
