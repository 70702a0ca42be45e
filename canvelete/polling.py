"""
렌더링 작업 완료 대기

상태 조회 함수를 주기적으로 호출하여 종료 상태 또는 타임아웃까지 대기한다.
시계/대기 함수를 주입받으므로 가짜 시계로 결정적으로 테스트할 수 있다.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable

from .errors import OperationCancelledError, RenderJobFailedError, WaitTimeoutError
from .types import BatchStatus, RenderRecord

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]

DEFAULT_JOB_TIMEOUT = 300.0  # 5분
DEFAULT_JOB_POLL_INTERVAL = 2.0
DEFAULT_BATCH_TIMEOUT = 600.0  # 10분
DEFAULT_BATCH_POLL_INTERVAL = 5.0


def _check_cancelled(cancel_event: asyncio.Event | None) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledError("완료 대기가 취소되었습니다")


async def wait_for_completion(
    fetch_status: Callable[[], Awaitable[RenderRecord]],
    *,
    timeout: float = DEFAULT_JOB_TIMEOUT,
    poll_interval: float = DEFAULT_JOB_POLL_INTERVAL,
    clock: Clock = time.monotonic,
    sleep: Sleep = asyncio.sleep,
    cancel_event: asyncio.Event | None = None,
    on_status: Callable[[RenderRecord], None] | None = None,
) -> RenderRecord:
    """단일 작업이 종료될 때까지 폴링

    경과 시간은 매 폴링 직전과 대기 직전에 확인한다. 느린 조회 도중 기한이
    지나면 추가 폴링이나 대기 없이 타임아웃으로 끝난다.

    Args:
        fetch_status: 작업 상태 조회 함수
        timeout: 최대 대기 시간 (초)
        poll_interval: 폴링 주기 (초)
        clock: 단조 시계
        sleep: 대기 함수
        cancel_event: set 되면 다음 폴링/대기 전에 중단
        on_status: 매 조회 결과 콜백

    Returns:
        RenderRecord: completed 상태의 작업 레코드

    Raises:
        RenderJobFailedError: 작업이 failed 상태
        WaitTimeoutError: 타임아웃 초과
        OperationCancelledError: cancel_event가 set 된 경우
    """
    started = clock()

    while clock() - started < timeout:
        _check_cancelled(cancel_event)

        record = await fetch_status()
        if on_status:
            on_status(record)

        if record.is_completed:
            return record
        if record.is_failed:
            raise RenderJobFailedError(record.error or "Unknown error", record)

        if clock() - started >= timeout:
            break
        logger.debug(f"Render job {record.id} is {record.status}, polling again")
        _check_cancelled(cancel_event)
        await sleep(poll_interval)

    raise WaitTimeoutError(f"렌더링 작업 타임아웃 ({timeout}초 초과)", timeout)


async def wait_for_batch(
    fetch_batch_status: Callable[[], Awaitable[BatchStatus]],
    *,
    timeout: float = DEFAULT_BATCH_TIMEOUT,
    poll_interval: float = DEFAULT_BATCH_POLL_INTERVAL,
    clock: Clock = time.monotonic,
    sleep: Sleep = asyncio.sleep,
    cancel_event: asyncio.Event | None = None,
    on_status: Callable[[BatchStatus], None] | None = None,
) -> list[RenderRecord]:
    """배치 전체가 완료될 때까지 폴링

    종료 조건은 서버의 all_completed 플래그뿐이다. 개별 작업이 failed여도
    루프를 중단하지 않는다.

    Returns:
        list[RenderRecord]: 서버가 반환한 순서의 작업 상태 목록

    Raises:
        WaitTimeoutError: 타임아웃 초과
        OperationCancelledError: cancel_event가 set 된 경우
    """
    started = clock()

    while clock() - started < timeout:
        _check_cancelled(cancel_event)

        status = await fetch_batch_status()
        if on_status:
            on_status(status)

        if status.all_completed is True:
            return status.jobs

        failed = sum(1 for job in status.jobs if job.is_failed)
        if failed:
            logger.warning(
                f"Batch has {failed}/{len(status.jobs)} failed jobs, "
                "waiting for server completion flag"
            )

        if clock() - started >= timeout:
            break
        _check_cancelled(cancel_event)
        await sleep(poll_interval)

    raise WaitTimeoutError(f"배치 렌더링 타임아웃 ({timeout}초 초과)", timeout)
