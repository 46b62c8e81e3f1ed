"""Error type raised for invalid input or unknown operations."""


class PushSwapError(ValueError):
    """Raised wherever the program would report ``Error`` and stop."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message