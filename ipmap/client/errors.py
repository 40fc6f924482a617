"""
Client-side error taxonomy.

All of these are recovered where they occur (a transient notice, no
retry); none should end the process.
"""


class ClientError(Exception):
    """Base class for client failures surfaced to the user."""

    #: Text of the notice shown for this failure
    notice = "Something went wrong"


class SubjectValidationError(ClientError, ValueError):
    """Lookup subject is not a dotted quad. No request was made."""

    notice = "Invalid IP address"

    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(f"Not a dotted-quad address: {subject!r}")


class NetworkError(ClientError):
    """Transport failure, non-2xx status or unusable payload."""

    notice = "Error fetching IP info"


class LoginFailedError(ClientError):
    """Login was rejected or could not be completed."""

    notice = "Invalid email or password"


class NotAuthenticatedError(ClientError):
    """An authenticated action was attempted without a stored session."""

    notice = "Please log in first"
