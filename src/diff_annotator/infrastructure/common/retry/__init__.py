from diff_annotator.infrastructure.common.retry.retry_policy import (
    DEFAULT_NON_RETRYABLE_MARKERS,
    RetryPolicy,
)

__all__ = ["DEFAULT_NON_RETRYABLE_MARKERS", "RetryPolicy"]
