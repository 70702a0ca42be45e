"""
클라이언트 설정

환경변수 또는 YAML 파일 기반 설정 관리.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.canvelete.com"


class ConfigurationError(Exception):
    """설정 오류 예외"""

    pass


@dataclass
class ClientConfig:
    """클라이언트 설정"""

    # 인증
    api_key: str = ""

    # API 서버
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # 초

    # 재시도 (0이면 재시도 안 함)
    max_retries: int = 0

    # 웹훅 수신
    webhook_secret: str = ""
    webhook_tolerance: int = 300  # 초

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """환경변수에서 설정 로드"""
        return cls(
            api_key=os.getenv("CANVELETE_API_KEY", ""),
            base_url=os.getenv("CANVELETE_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("CANVELETE_TIMEOUT", "30")),
            max_retries=int(os.getenv("CANVELETE_MAX_RETRIES", "0")),
            webhook_secret=os.getenv("CANVELETE_WEBHOOK_SECRET", ""),
            webhook_tolerance=int(os.getenv("CANVELETE_WEBHOOK_TOLERANCE", "300")),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """YAML 파일에서 설정 로드

        최상위 또는 ``canvelete:`` 섹션 아래의 키를 읽는다.
        알 수 없는 키는 경고 후 무시한다.

        Raises:
            ConfigurationError: 파일 없음 또는 YAML 형식 오류
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"설정 파일 없음: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                raw: Any = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"YAML 파싱 실패: {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"잘못된 설정 형식: {config_path}")

        section = raw.get("canvelete", raw)
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in section.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"[Config] 알 수 없는 설정 키 무시: {key}")

        return cls(**values)

    def validate(self, strict: bool = True) -> list[str]:
        """설정값 검증

        Args:
            strict: True면 오류 시 예외 발생, False면 경고만

        Returns:
            list[str]: 검증 경고/오류 메시지 목록

        Raises:
            ConfigurationError: strict=True이고 오류가 있을 때
        """
        errors = []
        warnings = []

        if not self.api_key:
            errors.append("필수 환경변수 누락: CANVELETE_API_KEY")

        if not self.base_url.startswith("http"):
            errors.append(f"잘못된 CANVELETE_BASE_URL 형식: {self.base_url}")

        if self.timeout <= 0:
            errors.append(f"잘못된 timeout 값: {self.timeout}")
        elif self.timeout > 300:
            warnings.append(f"요청 타임아웃이 너무 김: {self.timeout}초")

        if self.max_retries < 0:
            errors.append(f"잘못된 max_retries 값: {self.max_retries}")
        if self.max_retries > 10:
            warnings.append(f"max_retries가 너무 큼: {self.max_retries}")

        if self.webhook_tolerance < 0:
            errors.append(f"잘못된 webhook_tolerance 값: {self.webhook_tolerance}")

        for warning in warnings:
            logger.warning(f"[Config] {warning}")

        if errors:
            for error in errors:
                logger.error(f"[Config] {error}")
            if strict:
                raise ConfigurationError(
                    f"설정 검증 실패: {len(errors)}개 오류\n" + "\n".join(errors)
                )

        return errors + warnings

    @classmethod
    def from_env_validated(cls, strict: bool = True) -> "ClientConfig":
        """환경변수에서 설정 로드 및 검증

        Raises:
            ConfigurationError: strict=True이고 오류가 있을 때
        """
        config = cls.from_env()
        config.validate(strict=strict)
        return config
