from diff_annotator.core.application.exceptions.application_errors import (
    ApplicationError,
    ConfigurationError,
    DiffParseError,
    PublishFailedError,
    WorkflowExecutionError,
    WorkflowHaltedException,
)
from diff_annotator.core.application.exceptions.provider_error import (
    MalformedModelOutputError,
    ModelRefusalError,
    ProviderError,
    SuggestionRequestFailedError,
    TooManyTokensError,
    UnsupportedBackendError,
)

__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "DiffParseError",
    "MalformedModelOutputError",
    "ModelRefusalError",
    "ProviderError",
    "PublishFailedError",
    "SuggestionRequestFailedError",
    "TooManyTokensError",
    "UnsupportedBackendError",
    "WorkflowExecutionError",
    "WorkflowHaltedException",
]
