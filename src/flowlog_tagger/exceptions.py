"""Custom exceptions for the :mod:`flowlog_tagger` package."""


class FlowLogTaggerError(Exception):
    """Base class for all custom ``flowlog_tagger`` exceptions.

    Parameters
    ----------
    message:
        Short description of the failure.
    context:
        Optional additional information about where/why the error occurred.
    suggestion:
        Optional hint that may help recover from the error.
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context = context
        self.suggestion = suggestion

    def describe(self) -> str:
        """Return the message followed by context and suggestion when present."""
        text = str(self)
        if self.context:
            text = f"{text} ({self.context})"
        if self.suggestion:
            text = f"{text}. {self.suggestion}"
        return text


class ReferenceFileError(FlowLogTaggerError):
    """Raised when the lookup table or protocol-number file cannot be read."""


class FlowLogReadError(FlowLogTaggerError):
    """Raised when the flow log file cannot be read."""


class ReportGenerationError(FlowLogTaggerError):
    """Raised when a count report cannot be written."""


class ConfigurationError(FlowLogTaggerError):
    """Raised when a configuration file is missing, unreadable or invalid."""
