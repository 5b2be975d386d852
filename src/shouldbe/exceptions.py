"""Exception raised when an assertion's expectation is not met."""


class AssertionFailedException(AssertionError):
    """A failed assertion, carrying the fully rendered message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message
