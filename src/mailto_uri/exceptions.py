"""Custom exceptions for mailto-uri."""


class MailtoError(Exception):
    """Base exception for all mailto-uri errors."""


class ParseError(MailtoError):
    """Exception raised when a string is not a mailto URI.

    Attributes:
        response: Human-readable description of the failure.
    """

    def __init__(self, response: str) -> None:
        super().__init__(response)
        self.response = response
