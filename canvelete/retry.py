"""
지수 백오프 재시도

에러 kind 태그가 정책의 retryable_kinds에 포함될 때만 재시도한다.
재시도 소진 시 마지막 실제 에러를 그대로 전파한다.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterator, TypeVar

from .errors import (
    RETRYABLE_KINDS,
    ErrorKind,
    OperationCancelledError,
    RateLimitError,
    format_error,
    is_retryable,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    """재시도 정책 (불변, 동시 사용 안전)

    시간 단위는 초.
    """

    max_attempts: int = 3
    backoff_factor: float = 2.0
    initial_delay: float = 1.0
    max_delay: float = 60.0
    retryable_kinds: frozenset[ErrorKind] = field(default=RETRYABLE_KINDS)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1: {self.max_attempts}")
        if self.backoff_factor < 1:
            raise ValueError(f"backoff_factor must be >= 1: {self.backoff_factor}")
        if self.initial_delay < 0:
            raise ValueError(f"initial_delay must be >= 0: {self.initial_delay}")
        if self.max_delay < self.initial_delay:
            raise ValueError(
                f"max_delay ({self.max_delay}) must be >= initial_delay "
                f"({self.initial_delay})"
            )
        # set/list로 넘겨도 불변 집합으로 고정
        object.__setattr__(self, "retryable_kinds", frozenset(self.retryable_kinds))

    def backoff_schedule(self) -> Iterator[float]:
        """서버 힌트가 없을 때의 대기 시간 시퀀스 (max_attempts - 1개)"""
        delay = self.initial_delay
        for _ in range(self.max_attempts - 1):
            yield delay
            delay = min(delay * self.backoff_factor, self.max_delay)


DEFAULT_RETRY_POLICY = RetryPolicy()

RATE_LIMIT_RETRY_POLICY = RetryPolicy(max_attempts=5, backoff_factor=2.0)


def _check_cancelled(cancel_event: asyncio.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledError("재시도가 취소되었습니다")


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    sleep: Sleep = asyncio.sleep,
    cancel_event: asyncio.Event | None = None,
) -> T:
    """작업을 재시도 정책에 따라 실행

    Args:
        operation: 인자 없는 비동기 작업
        policy: 재시도 정책 (None이면 DEFAULT_RETRY_POLICY)
        sleep: 대기 함수 (테스트에서 가짜 sleep 주입)
        cancel_event: set 되면 다음 시도/대기 전에 중단

    Returns:
        작업 결과

    Raises:
        CanveleteError: 재시도 불가 에러 또는 소진 시 마지막 에러
        OperationCancelledError: cancel_event가 set 된 경우
    """
    policy = policy or DEFAULT_RETRY_POLICY
    attempt = 0
    delay = policy.initial_delay

    while True:
        _check_cancelled(cancel_event)

        try:
            return await operation()
        except Exception as error:
            attempt += 1

            if not is_retryable(error, policy.retryable_kinds):
                raise
            if attempt >= policy.max_attempts:
                logger.error(
                    f"Giving up after {attempt}/{policy.max_attempts} attempts: "
                    f"{format_error(error)}"
                )
                raise

            # 서버 힌트는 백오프 시퀀스와 독립 (delay를 덮어쓰지 않음)
            if isinstance(error, RateLimitError) and error.retry_after is not None:
                wait = float(error.retry_after)
                logger.warning(
                    f"Rate limited. Retrying after {wait}s "
                    f"(attempt {attempt}/{policy.max_attempts})"
                )
            else:
                wait = delay
                logger.warning(
                    f"Attempt {attempt}/{policy.max_attempts} failed: "
                    f"{format_error(error)}. Retrying in {wait}s..."
                )

        _check_cancelled(cancel_event)
        await sleep(wait)
        delay = min(delay * policy.backoff_factor, policy.max_delay)


async def retry_on_rate_limit(
    operation: Callable[[], Awaitable[T]],
    *,
    sleep: Sleep = asyncio.sleep,
) -> T:
    """rate limit/서버 에러에 대해 최대 5회 시도"""
    return await execute_with_retry(operation, RATE_LIMIT_RETRY_POLICY, sleep=sleep)


def create_retry_wrapper(
    policy: RetryPolicy | None = None,
    *,
    sleep: Sleep = asyncio.sleep,
) -> Callable[[Callable[[], Awaitable[T]]], Awaitable[T]]:
    """정책이 고정된 재시도 래퍼 생성

    사용법:
        ```python
        retry = create_retry_wrapper(RetryPolicy(max_attempts=5))
        design = await retry(lambda: client.designs.get("design-123"))
        ```
    """

    def wrapper(operation: Callable[[], Awaitable[T]]) -> Awaitable[T]:
        return execute_with_retry(operation, policy, sleep=sleep)

    return wrapper
