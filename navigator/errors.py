class InvalidArgument(ValueError):
    """Raised by a tool when it is called with unusable input."""


class CompletionServiceError(RuntimeError):
    """The model provider could not be reached or failed to answer."""


class AssistantUnavailableError(RuntimeError):
    """The single user-facing error raised when no answer can be produced at all."""

    GENERIC_MESSAGE = "Nizhal is unable to respond right now."

    def __init__(self, details: str):
        self.details = details
        super().__init__(f"{self.GENERIC_MESSAGE} Details: {details}")
