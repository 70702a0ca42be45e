"""
API 리소스

CanveleteClient에 속성으로 연결되는 엔드포인트 래퍼.
"""

from .api_keys import APIKeysResource
from .assets import AssetsResource
from .billing import BillingResource
from .canvas import CanvasResource
from .designs import DesignsResource
from .render import RenderResource
from .templates import TemplatesResource
from .usage import UsageResource

__all__ = [
    "APIKeysResource",
    "AssetsResource",
    "BillingResource",
    "CanvasResource",
    "DesignsResource",
    "RenderResource",
    "TemplatesResource",
    "UsageResource",
]
