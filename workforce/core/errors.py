class WorkforceError(Exception):
    """Base class for domain failures raised by the service layer."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(WorkforceError):
    status_code = 400


class NotFoundError(WorkforceError):
    status_code = 404


class ConflictError(WorkforceError):
    status_code = 409
