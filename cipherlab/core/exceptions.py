from typing import Any


class CipherError(Exception):
    """
    Raised when a cipher key or text fails validation.

    The only error raised by the cipher engines. When it is raised the
    operation did not take place; there are no partial results.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
