"""
canvelete 클라이언트 라이브러리

Canvelete 디자인/렌더링 API 클라이언트, 에러 분류, 재시도, 완료 대기,
웹훅 서명 검증 제공.
"""

from .client import SDK_VERSION, CanveleteClient
from .config import ClientConfig, ConfigurationError
from .errors import (
    AuthenticationError,
    CanveleteError,
    ErrorKind,
    InsufficientScopeError,
    NotFoundError,
    OperationCancelledError,
    RateLimitError,
    RenderJobFailedError,
    RequestTimeoutError,
    ServerError,
    ValidationError,
    WaitTimeoutError,
    WebhookSignatureError,
    format_error,
    map_http_error,
)
from .polling import wait_for_batch, wait_for_completion
from .retry import (
    DEFAULT_RETRY_POLICY,
    RetryPolicy,
    create_retry_wrapper,
    execute_with_retry,
    retry_on_rate_limit,
)
from .types import (
    AsyncRenderResponse,
    BatchRenderResponse,
    BatchStatus,
    JobStatus,
    RenderFormat,
    RenderRecord,
    WebhookEvent,
)
from .validation import (
    validate_canvas_dimensions,
    validate_color,
    validate_element,
    validate_render_options,
)
from .webhooks import (
    construct_webhook_event,
    generate_webhook_signature,
    parse_webhook_payload,
    verify_webhook_signature,
)

__version__ = SDK_VERSION

__all__ = [
    # Client
    "CanveleteClient",
    "ClientConfig",
    "ConfigurationError",
    # Errors
    "AuthenticationError",
    "CanveleteError",
    "ErrorKind",
    "InsufficientScopeError",
    "NotFoundError",
    "OperationCancelledError",
    "RateLimitError",
    "RenderJobFailedError",
    "RequestTimeoutError",
    "ServerError",
    "ValidationError",
    "WaitTimeoutError",
    "WebhookSignatureError",
    "format_error",
    "map_http_error",
    # Retry
    "DEFAULT_RETRY_POLICY",
    "RetryPolicy",
    "create_retry_wrapper",
    "execute_with_retry",
    "retry_on_rate_limit",
    # Polling
    "wait_for_batch",
    "wait_for_completion",
    # Webhooks
    "construct_webhook_event",
    "generate_webhook_signature",
    "parse_webhook_payload",
    "verify_webhook_signature",
    # Validation
    "validate_canvas_dimensions",
    "validate_color",
    "validate_element",
    "validate_render_options",
    # Types
    "AsyncRenderResponse",
    "BatchRenderResponse",
    "BatchStatus",
    "JobStatus",
    "RenderFormat",
    "RenderRecord",
    "WebhookEvent",
]
