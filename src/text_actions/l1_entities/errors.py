"""Domain error types."""


class TextActionError(Exception):
    """Base class for every failure raised while processing a text action."""


class ActionValidationError(TextActionError):
    """Raised when an action request or template fails validation before any I/O."""


class PromptNotFoundError(TextActionError):
    """Raised when an action ID or prompt category is not in the catalog."""


class ConfigurationError(TextActionError):
    """Raised when the active provider or model is not configured properly."""


class SettingsLoadError(TextActionError):
    """Raised when the settings snapshot cannot be loaded or validated."""


class CompletionTransportError(TextActionError):
    """Raised when a model-list or completion HTTP round trip fails."""


class InvalidResponseError(TextActionError):
    """Raised when the completion backend answers with an unusable payload."""


class ActionProcessingError(TextActionError):
    """Raised by the controller when an action fails end to end."""


class PromptCatalogError(TextActionError):
    """Raised when the prompt catalog file cannot be read or has the wrong shape."""
