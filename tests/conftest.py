"""
Pytest 설정 및 공통 Fixture
"""

from typing import Callable

import pytest

from canvelete import CanveleteClient, ClientConfig
from tests.helpers import BASE_URL, Handler, RecordingTransport


@pytest.fixture
def client_config() -> ClientConfig:
    """테스트용 ClientConfig

    환경변수 대신 하드코딩된 값 사용.
    """
    return ClientConfig(
        api_key="cvt_test_key",
        base_url=BASE_URL,
        timeout=10.0,
        max_retries=0,
        webhook_secret="whsec_test",
        webhook_tolerance=300,
    )


@pytest.fixture
def make_client(client_config: ClientConfig) -> Callable[[Handler], tuple[CanveleteClient, RecordingTransport]]:
    """handler로 응답하는 클라이언트 팩토리

    사용법:
        client, transport = make_client(lambda request: json_response({...}))
    """

    def factory(handler: Handler) -> tuple[CanveleteClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return CanveleteClient.from_config(client_config, transport=transport), transport

    return factory


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """CANVELETE_* 환경변수 제거"""
    for name in (
        "CANVELETE_API_KEY",
        "CANVELETE_BASE_URL",
        "CANVELETE_TIMEOUT",
        "CANVELETE_MAX_RETRIES",
        "CANVELETE_WEBHOOK_SECRET",
        "CANVELETE_WEBHOOK_TOLERANCE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
