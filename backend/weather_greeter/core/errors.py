class GreeterError(Exception):
    """Base error carrying the HTTP status it is reported with."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(GreeterError):
    """A required query parameter or body field is missing or malformed."""
    status_code = 400


class NotFoundError(GreeterError):
    """No place, photo or location exists for the request."""
    status_code = 404


class UpstreamError(GreeterError):
    """A third-party call failed at the transport, status or parse level."""
    status_code = 500
