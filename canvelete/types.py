"""
공용 타입 정의

렌더링 작업/배치 상태, 웹훅 이벤트 등 Enum과 Pydantic 모델.
와이어 포맷은 camelCase이며 파이썬 쪽은 snake_case 속성으로 접근한다.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class JobStatus(str, Enum):
    """렌더링 작업 상태"""

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"  # 종료 상태
    FAILED = "failed"  # 종료 상태


TERMINAL_STATUSES = frozenset({JobStatus.COMPLETED, JobStatus.FAILED})


class RenderFormat(str, Enum):
    """출력 포맷"""

    PNG = "png"
    JPG = "jpg"
    JPEG = "jpeg"
    PDF = "pdf"
    SVG = "svg"


class DesignStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ARCHIVED = "ARCHIVED"


class Visibility(str, Enum):
    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    TEAM = "TEAM"


class AssetType(str, Enum):
    IMAGE = "IMAGE"
    FONT = "FONT"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"


class CamelModel(BaseModel):
    """camelCase 와이어 포맷 공통 설정 (알 수 없는 필드 보존)"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class RenderRecord(CamelModel):
    """렌더링 작업 레코드 (/api/v1/render/status/{id})

    status는 str로 유지한다. 서버가 모르는 상태값을 보내도 파싱이 실패하지
    않고, 대기 루프에서는 비종료 상태로 취급된다.
    """

    id: str
    design_id: str | None = None
    format: str | None = None
    status: str = JobStatus.PENDING.value
    output_url: str | None = None
    file_size: int | None = None
    created_at: str | None = None
    completed_at: str | None = None
    error: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == JobStatus.COMPLETED.value

    @property
    def is_failed(self) -> bool:
        return self.status == JobStatus.FAILED.value

    @property
    def is_terminal(self) -> bool:
        """completed/failed와 정확히 일치할 때만 종료 상태"""
        return self.is_completed or self.is_failed


class AsyncRenderResponse(CamelModel):
    """비동기 렌더링 제출 응답"""

    job_id: str
    status: str = JobStatus.PENDING.value
    estimated_time: float | None = None


class BatchRenderResponse(CamelModel):
    """배치 렌더링 제출 응답"""

    batch_id: str
    jobs: list[AsyncRenderResponse] = Field(default_factory=list)
    total_jobs: int = 0


class BatchStatus(CamelModel):
    """배치 상태 (/api/v1/render/batch/{id}/status)

    all_completed는 서버가 판단한 값이며 jobs 상태로 재계산하지 않는다.
    (서버는 failed 작업도 완료로 셀 수 있음)
    """

    jobs: list[RenderRecord] = Field(default_factory=list)
    all_completed: bool = Field(default=False, alias="completed")


class WebhookEvent(CamelModel):
    """검증된 웹훅 이벤트"""

    id: str
    type: str
    timestamp: str | int
    data: dict[str, Any] = Field(default_factory=dict)
