"""
클라이언트 측 검증 테스트
"""

import pytest

from canvelete.errors import ValidationError
from canvelete.validation import (
    validate_canvas_dimensions,
    validate_color,
    validate_element,
    validate_render_options,
)


class TestValidateElement:
    """캔버스 요소 검증 테스트"""

    def test_valid_rectangle(self):
        validate_element({"type": "rectangle", "x": 0, "y": 10.5, "width": 100})

    def test_valid_text(self):
        validate_element({"type": "text", "x": 1, "y": 2, "text": "Hello", "fontSize": 24})

    def test_missing_type(self):
        with pytest.raises(ValidationError, match="Element type is required"):
            validate_element({"x": 0, "y": 0})

    def test_invalid_type(self):
        with pytest.raises(ValidationError, match="Invalid element type: sphere"):
            validate_element({"type": "sphere", "x": 0, "y": 0})

    def test_position_must_be_number(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_element({"type": "circle", "x": "10", "y": None})

        assert "x position" in exc_info.value.message
        assert "y position" in exc_info.value.message

    def test_bool_is_not_number(self):
        with pytest.raises(ValidationError):
            validate_element({"type": "circle", "x": True, "y": 0})

    def test_text_requires_content(self):
        with pytest.raises(ValidationError, match="requires text content"):
            validate_element({"type": "text", "x": 0, "y": 0})

    def test_image_requires_src(self):
        with pytest.raises(ValidationError, match="requires src URL"):
            validate_element({"type": "image", "x": 0, "y": 0})

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("opacity", 1.5, "Opacity must be between 0 and 1"),
            ("opacity", -0.1, "Opacity must be between 0 and 1"),
            ("fontSize", 0, "Font size must be positive"),
            ("strokeWidth", -1, "Stroke width cannot be negative"),
            ("borderRadius", -2, "Border radius cannot be negative"),
        ],
    )
    def test_numeric_ranges(self, field, value, message):
        with pytest.raises(ValidationError, match=message):
            validate_element({"type": "rectangle", "x": 0, "y": 0, field: value})

    @pytest.mark.parametrize(
        "field, message",
        [
            ("opacity", "Opacity must be a number"),
            ("fontSize", "Font size must be a number"),
            ("strokeWidth", "Stroke width must be a number"),
            ("borderRadius", "Border radius must be a number"),
        ],
    )
    def test_non_numeric_values(self, field, message):
        """문자열 숫자는 TypeError 없이 ValidationError로 보고"""
        with pytest.raises(ValidationError, match=message):
            validate_element({"type": "rectangle", "x": 0, "y": 0, field: "0.5"})

    def test_all_errors_collected(self):
        """여러 오류를 하나의 메시지로 보고"""
        with pytest.raises(ValidationError) as exc_info:
            validate_element({"type": "text", "opacity": 2})

        message = exc_info.value.message
        assert message.startswith("Element validation failed: ")
        assert message.count(";") >= 3


class TestValidateCanvasDimensions:
    def test_valid(self):
        validate_canvas_dimensions(1920, 1080)
        validate_canvas_dimensions(10000, 1)

    def test_too_large(self):
        with pytest.raises(ValidationError, match="Width cannot exceed 10000 pixels"):
            validate_canvas_dimensions(10001, 100)

    def test_non_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_canvas_dimensions(0, -5)

        assert "Width must be a positive number" in exc_info.value.message
        assert "Height must be a positive number" in exc_info.value.message

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            validate_canvas_dimensions("100", 100)


class TestValidateRenderOptions:
    def test_design_id(self):
        validate_render_options({"design_id": "d1", "format": "png", "quality": 90})

    def test_camel_case_keys(self):
        validate_render_options({"templateId": "t1"})

    def test_missing_target(self):
        with pytest.raises(ValidationError, match="Either designId or templateId is required"):
            validate_render_options({"format": "png"})

    def test_invalid_format(self):
        with pytest.raises(ValidationError, match="Invalid format"):
            validate_render_options({"design_id": "d1", "format": "gif"})

    @pytest.mark.parametrize("quality", [0, 101])
    def test_quality_range(self, quality):
        with pytest.raises(ValidationError, match="Quality must be between 1 and 100"):
            validate_render_options({"design_id": "d1", "quality": quality})

    @pytest.mark.parametrize("quality", ["high", "90", True])
    def test_quality_non_numeric(self, quality):
        with pytest.raises(ValidationError, match="Quality must be a number"):
            validate_render_options({"design_id": "d1", "quality": quality})


class TestValidateColor:
    @pytest.mark.parametrize(
        "color",
        ["#fff", "#FFFFFF", "#00000080", "rgb(0, 0, 0)", "rgba(1,2,3,0.5)", "hsl(120, 50%, 50%)", "Transparent", "red"],
    )
    def test_valid_colors(self, color):
        assert validate_color(color)

    @pytest.mark.parametrize("color", ["#ffff", "fff", "rgb(0,0)", "chartreuse", ""])
    def test_invalid_colors(self, color):
        assert not validate_color(color)
