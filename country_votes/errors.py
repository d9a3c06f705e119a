"""Application errors and the HTTP status each one maps to."""


class VoteAppError(Exception):
    """Base error for the voting API."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(self.message)


class ValidationError(VoteAppError):
    """A required vote field is missing or empty."""

    status_code = 400

    def __init__(self, message: str = "Missing required data"):
        super().__init__(message)


class DuplicateVoteError(VoteAppError):
    """The email has already been used to vote."""

    status_code = 400

    def __init__(self, message: str = "Vote already exists"):
        super().__init__(message)


class UpstreamError(VoteAppError):
    """The country API failed or returned data we could not parse."""

    status_code = 500


class StorageError(VoteAppError):
    """The vote file could not be read or written."""

    status_code = 500
