"""
Domain errors.

Every error raised on purpose by the brainstormer derives from
BrainstormError, so routes can map them without touching provider types.
"""


class BrainstormError(Exception):
    """Base class for all brainstormer errors."""


class ConfigurationError(BrainstormError):
    """Required configuration is missing. Fatal at startup."""


class ValidationError(BrainstormError):
    """User input rejected (no modality selected, unknown id, bad level)."""


class GenerationInProgress(BrainstormError):
    """A generation is already running for this session."""

    def __init__(self, message: str = "A use case is already being generated."):
        super().__init__(message)


class ProviderError(BrainstormError):
    """Raised by provider adapters for transport / provider-side failures."""


class GenerationError(BrainstormError):
    """Base for failures on the generation path."""


class MalformedResponse(GenerationError):
    def __init__(self, message: str = "API response does not match expected structure."):
        super().__init__(message)


class GenerationFailed(GenerationError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to generate use case: {detail}")


class UnknownError(GenerationError):
    def __init__(self, message: str = "An unknown error occurred while generating the use case."):
        super().__init__(message)
