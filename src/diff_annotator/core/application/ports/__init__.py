from diff_annotator.core.application.ports.diff_parser_port import DiffParserPort
from diff_annotator.core.application.ports.retry_port import OnRetry, RetryNotice, RetryPort
from diff_annotator.core.application.ports.suggestion_provider_port import SuggestionProviderPort
from diff_annotator.core.application.ports.vcs_port import VcsPort

__all__ = ["DiffParserPort", "OnRetry", "RetryNotice", "RetryPort", "SuggestionProviderPort", "VcsPort"]
