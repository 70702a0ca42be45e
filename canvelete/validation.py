"""
클라이언트 측 검증

요청 전에 캔버스 요소, 캔버스 크기, 렌더링 옵션을 확인한다.
모든 오류를 모아 하나의 ValidationError로 보고한다.
"""

import re
from typing import Any

from .errors import ValidationError
from .types import RenderFormat

VALID_ELEMENT_TYPES = [
    "rectangle",
    "circle",
    "text",
    "image",
    "line",
    "polygon",
    "star",
    "svg",
    "bezier",
    "container",
    "table",
    "qr",
    "barcode",
]

MAX_CANVAS_SIZE = 10000  # px

NAMED_COLORS = [
    "transparent",
    "black",
    "white",
    "red",
    "green",
    "blue",
    "yellow",
    "orange",
    "purple",
    "pink",
    "gray",
    "grey",
]

HEX_COLOR = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
RGB_COLOR = re.compile(r"^rgba?\(\s*\d+\s*,\s*\d+\s*,\s*\d+(,\s*[\d.]+)?\s*\)$")
HSL_COLOR = re.compile(r"^hsla?\(\s*\d+\s*,\s*\d+%\s*,\s*\d+%(,\s*[\d.]+)?\s*\)$")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_element(element: dict[str, Any]) -> None:
    """캔버스 요소 검증

    Raises:
        ValidationError: 검증 실패 (모든 오류 포함)
    """
    errors: list[str] = []

    element_type = element.get("type")
    if not element_type:
        errors.append("Element type is required")
    elif element_type not in VALID_ELEMENT_TYPES:
        errors.append(
            f"Invalid element type: {element_type}. "
            f"Valid types: {', '.join(VALID_ELEMENT_TYPES)}"
        )

    if not _is_number(element.get("x")):
        errors.append("Element x position must be a number")
    if not _is_number(element.get("y")):
        errors.append("Element y position must be a number")

    # 타입별 필수값
    if element_type == "text" and not element.get("text"):
        errors.append("Text element requires text content")
    if element_type == "image" and not element.get("src"):
        errors.append("Image element requires src URL")

    # 숫자 범위
    opacity = element.get("opacity")
    if opacity is not None:
        if not _is_number(opacity):
            errors.append("Opacity must be a number")
        elif not 0 <= opacity <= 1:
            errors.append("Opacity must be between 0 and 1")

    font_size = element.get("fontSize")
    if font_size is not None:
        if not _is_number(font_size):
            errors.append("Font size must be a number")
        elif font_size <= 0:
            errors.append("Font size must be positive")

    stroke_width = element.get("strokeWidth")
    if stroke_width is not None:
        if not _is_number(stroke_width):
            errors.append("Stroke width must be a number")
        elif stroke_width < 0:
            errors.append("Stroke width cannot be negative")

    border_radius = element.get("borderRadius")
    if border_radius is not None:
        if not _is_number(border_radius):
            errors.append("Border radius must be a number")
        elif border_radius < 0:
            errors.append("Border radius cannot be negative")

    if errors:
        raise ValidationError(f"Element validation failed: {'; '.join(errors)}")


def validate_canvas_dimensions(width: Any, height: Any) -> None:
    """캔버스 크기 검증 (1 ~ 10000px)"""
    errors: list[str] = []

    if not _is_number(width) or width <= 0:
        errors.append("Width must be a positive number")
    elif width > MAX_CANVAS_SIZE:
        errors.append(f"Width cannot exceed {MAX_CANVAS_SIZE} pixels")

    if not _is_number(height) or height <= 0:
        errors.append("Height must be a positive number")
    elif height > MAX_CANVAS_SIZE:
        errors.append(f"Height cannot exceed {MAX_CANVAS_SIZE} pixels")

    if errors:
        raise ValidationError(f"Canvas validation failed: {'; '.join(errors)}")


def validate_render_options(options: dict[str, Any]) -> None:
    """렌더링 옵션 검증 (snake_case/camelCase 키 모두 허용)"""
    errors: list[str] = []

    design_id = options.get("design_id") or options.get("designId")
    template_id = options.get("template_id") or options.get("templateId")
    if not design_id and not template_id:
        errors.append("Either designId or templateId is required")

    valid_formats = [f.value for f in RenderFormat]
    render_format = options.get("format")
    if render_format and render_format not in valid_formats:
        errors.append(f"Invalid format. Valid formats: {', '.join(valid_formats)}")

    quality = options.get("quality")
    if quality is not None:
        if not _is_number(quality):
            errors.append("Quality must be a number")
        elif not 1 <= quality <= 100:
            errors.append("Quality must be between 1 and 100")

    if errors:
        raise ValidationError(
            f"Render options validation failed: {'; '.join(errors)}"
        )


def validate_color(color: str) -> bool:
    """색상 문자열 형식 확인 (hex, rgb(a), hsl(a), 기본 색상명)"""
    if HEX_COLOR.match(color) or RGB_COLOR.match(color) or HSL_COLOR.match(color):
        return True
    return color.lower() in NAMED_COLORS
