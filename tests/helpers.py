"""
테스트 공용 헬퍼 (MockTransport, 응답 생성)
"""

import json
from typing import Any, Callable

import httpx

BASE_URL = "https://api.test.canvelete.com"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """요청을 기록하는 MockTransport

    handler가 반환한 응답을 그대로 돌려주고 모든 요청을 requests에 남긴다.
    """

    def __init__(self, handler: Handler):
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def json_response(data: Any, status_code: int = 200, **kwargs: Any) -> httpx.Response:
    """JSON 응답 생성 헬퍼"""
    return httpx.Response(status_code, json=data, **kwargs)
