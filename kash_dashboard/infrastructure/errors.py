"""Errors raised by the Kash API adapter."""


class KashApiError(RuntimeError):
    """Raised when an API call fails or returns an unsuccessful envelope.

    Attributes:
        status_code: HTTP status of the response, None for transport errors.
        message: Message returned by the API or describing the failure.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


__all__ = ["KashApiError"]
