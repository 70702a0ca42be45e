"""
웹훅 이벤트 디스패처

이벤트 타입별 핸들러를 등록하고 검증된 이벤트를 전달합니다.
"""

import inspect
import logging
from typing import Any, Callable

from canvelete.types import WebhookEvent

logger = logging.getLogger(__name__)

WILDCARD = "*"

EventHandler = Callable[[WebhookEvent], Any]


class WebhookDispatcher:
    """이벤트 타입 → 핸들러 목록

    사용법:
        ```python
        dispatcher = WebhookDispatcher()

        @dispatcher.on("render.completed")
        async def handle_render(event: WebhookEvent) -> None:
            ...
        ```
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, event_type: str) -> Callable[[EventHandler], EventHandler]:
        """핸들러 등록 데코레이터 ("*"는 모든 이벤트)"""

        def decorator(handler: EventHandler) -> EventHandler:
            self.add_handler(event_type, handler)
            return handler

        return decorator

    def add_handler(self, event_type: str, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def remove_handler(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers_for(self, event_type: str) -> list[EventHandler]:
        return self._handlers.get(event_type, []) + self._handlers.get(WILDCARD, [])

    async def dispatch(self, event: WebhookEvent) -> int:
        """이벤트를 등록된 핸들러에 전달

        핸들러 하나의 실패가 다른 핸들러 실행을 막지 않는다.

        Returns:
            int: 성공한 핸들러 수
        """
        handlers = self.handlers_for(event.type)
        if not handlers:
            logger.info(f"[Webhook] 핸들러 없음: {event.type} ({event.id})")
            return 0

        succeeded = 0
        for handler in handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
                succeeded += 1
            except Exception as e:
                logger.error(f"[Webhook] 핸들러 실행 실패 ({event.type}): {e}")

        return succeeded
