"""Exceptions raised by writing agents and their collaborators."""


class AgentError(Exception):
    """Base class for agent lifecycle and generation failures."""

    pass


class ConfigurationError(AgentError):
    """Raised when a required credential or setting is missing or invalid."""

    pass


class UnsupportedPlatformError(AgentError):
    """Raised when an agent is requested for a platform that has no implementation."""

    pass


class TransientFetchError(AgentError):
    """Raised when an attachment cannot be downloaded or parsed.

    Always recovered locally: the attachment contributes no text.
    """

    pass


class ModelInvocationError(AgentError):
    """Raised when the model stream fails or reports an error event."""

    pass
