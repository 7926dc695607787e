"""Domain errors raised inside transactions and mapped to StatusResult values."""


class LibraryError(Exception):
    """Base class for library domain errors."""

    code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LibraryError):
    """A referenced row does not exist."""

    code = 404


class ValidationError(LibraryError):
    """Input failed a business rule check."""

    code = 400


class ConflictError(LibraryError):
    """The operation conflicts with the current state of a book or record."""

    code = 409
