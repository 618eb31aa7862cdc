"""Tests for cropping transparent margins and re-centering glyph images."""

import pytest
from PIL import Image, ImageDraw

from conftest import RED
from fa2png.trimmer import (
    BoundingBox,
    center_offset,
    center_on_canvas,
    compute_bounding_box,
    crop,
    trim_and_center,
)


def _alpha_bbox(img):
    """PIL getbbox of the alpha band (exclusive right/bottom), None if empty."""
    return img.getchannel("A").getbbox()


class TestBoundingBox:
    def test_dimensions_are_inclusive(self):
        box = BoundingBox(5, 10, 15, 20)
        assert box.width == 11
        assert box.height == 11

    def test_as_box_is_exclusive(self):
        assert BoundingBox(5, 10, 15, 20).as_box() == (5, 10, 16, 21)

    def test_single_pixel(self):
        box = BoundingBox(3, 3, 3, 3)
        assert (box.width, box.height) == (1, 1)


class TestComputeBoundingBox:
    def test_fully_transparent_returns_none(self, transparent_image):
        assert compute_bounding_box(transparent_image) is None

    def test_single_pixel(self, single_pixel_image):
        assert compute_bounding_box(single_pixel_image) == BoundingBox(32, 32, 32, 32)

    def test_square(self, square_image):
        assert compute_bounding_box(square_image) == BoundingBox(5, 10, 15, 20)

    def test_faint_pixel_counts_as_content(self, gradient_glyph_image):
        # Alpha 1 at (14, 12) is not fully transparent
        box = compute_bounding_box(gradient_glyph_image)
        assert box == BoundingBox(3, 2, 14, 12)

    def test_threshold_ignores_faint_pixels(self, gradient_glyph_image):
        box = compute_bounding_box(gradient_glyph_image, threshold=1)
        assert box == BoundingBox(3, 2, 11, 8)

    def test_box_is_minimal(self, gradient_glyph_image):
        box = compute_bounding_box(gradient_glyph_image)
        alpha = gradient_glyph_image.getchannel("A")
        w, h = alpha.size

        # Every pixel outside the box is transparent
        for y in range(h):
            for x in range(w):
                if not (box.min_x <= x <= box.max_x and box.min_y <= y <= box.max_y):
                    assert alpha.getpixel((x, y)) == 0

        # Each border row/column holds at least one visible pixel
        assert any(alpha.getpixel((box.min_x, y)) > 0 for y in range(h))
        assert any(alpha.getpixel((box.max_x, y)) > 0 for y in range(h))
        assert any(alpha.getpixel((x, box.min_y)) > 0 for x in range(w))
        assert any(alpha.getpixel((x, box.max_y)) > 0 for x in range(w))

    def test_opaque_color_with_zero_alpha_is_transparent(self):
        img = Image.new("RGBA", (10, 10), (255, 255, 255, 0))
        assert compute_bounding_box(img) is None

    def test_la_mode(self):
        img = Image.new("LA", (10, 10), (0, 0))
        img.putpixel((2, 7), (128, 255))
        assert compute_bounding_box(img) == BoundingBox(2, 7, 2, 7)

    def test_full_image(self):
        img = Image.new("RGBA", (8, 6), RED)
        assert compute_bounding_box(img) == BoundingBox(0, 0, 7, 5)

    def test_image_without_alpha_rejected(self):
        with pytest.raises(ValueError, match="alpha"):
            compute_bounding_box(Image.new("RGB", (10, 10)))


class TestCrop:
    def test_single_pixel_crop(self, single_pixel_image):
        cropped = crop(single_pixel_image, BoundingBox(32, 32, 32, 32))
        assert cropped.size == (1, 1)
        assert cropped.getpixel((0, 0)) == RED

    def test_square_crop_size(self, square_image):
        cropped = crop(square_image, compute_bounding_box(square_image))
        assert cropped.size == (11, 11)
        assert cropped.mode == "RGBA"

    def test_pixels_preserved_exactly(self, gradient_glyph_image):
        box = compute_bounding_box(gradient_glyph_image)
        cropped = crop(gradient_glyph_image, box)
        for y in range(box.height):
            for x in range(box.width):
                expected = gradient_glyph_image.getpixel((box.min_x + x, box.min_y + y))
                assert cropped.getpixel((x, y)) == expected

    def test_no_transparent_border(self, gradient_glyph_image):
        cropped = crop(gradient_glyph_image, compute_bounding_box(gradient_glyph_image))
        alpha = cropped.getchannel("A")
        w, h = alpha.size
        assert any(alpha.getpixel((0, y)) for y in range(h))
        assert any(alpha.getpixel((w - 1, y)) for y in range(h))
        assert any(alpha.getpixel((x, 0)) for x in range(w))
        assert any(alpha.getpixel((x, h - 1)) for x in range(w))

    def test_box_outside_image_rejected(self, square_image):
        with pytest.raises(ValueError, match="outside"):
            crop(square_image, BoundingBox(60, 60, 70, 70))

    def test_inverted_box_rejected(self, square_image):
        with pytest.raises(ValueError):
            crop(square_image, BoundingBox(10, 10, 5, 5))


class TestCenterOffset:
    def test_even_difference(self):
        assert center_offset((10, 20), (64, 64)) == (27, 22)

    def test_odd_difference_floors(self):
        assert center_offset((1, 1), (64, 64)) == (31, 31)
        assert center_offset((11, 11), (64, 64)) == (26, 26)

    def test_oversized_content_negative(self):
        assert center_offset((70, 64), (64, 64)) == (-3, 0)


class TestCenterOnCanvas:
    def test_single_pixel_at_floor_offset(self):
        pixel = Image.new("RGBA", (1, 1), RED)
        canvas = center_on_canvas(pixel, (64, 64))
        assert canvas.size == (64, 64)
        assert canvas.getpixel((31, 31)) == RED
        assert _alpha_bbox(canvas) == (31, 31, 32, 32)

    def test_canvas_starts_transparent(self):
        canvas = center_on_canvas(Image.new("RGBA", (2, 2), RED), (10, 10))
        assert canvas.getpixel((0, 0)) == (0, 0, 0, 0)
        assert canvas.getpixel((9, 9)) == (0, 0, 0, 0)

    def test_copies_without_blending(self):
        half = Image.new("RGBA", (4, 4), (10, 20, 30, 128))
        canvas = center_on_canvas(half, (8, 8))
        assert canvas.getpixel((2, 2)) == (10, 20, 30, 128)

    @pytest.mark.parametrize("content_w,canvas_w", [(11, 64), (10, 64), (1, 2), (63, 64)])
    def test_margins_symmetric(self, content_w, canvas_w):
        content = Image.new("RGBA", (content_w, 1), RED)
        canvas = center_on_canvas(content, (canvas_w, 1))
        left, _, right, _ = _alpha_bbox(canvas)
        left_margin = left
        right_margin = canvas_w - right
        assert left_margin <= right_margin <= left_margin + 1

    def test_oversized_content_is_clipped_and_centered(self):
        content = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
        draw = ImageDraw.Draw(content)
        draw.rectangle((4, 4, 5, 5), fill=RED)
        canvas = center_on_canvas(content, (6, 6))
        assert canvas.size == (6, 6)
        # Offset is (-2, -2): the 2x2 core lands in the middle
        assert _alpha_bbox(canvas) == (2, 2, 4, 4)

    def test_keeps_mode(self):
        content = Image.new("LA", (3, 3), (200, 255))
        canvas = center_on_canvas(content, (9, 9))
        assert canvas.mode == "LA"
        assert canvas.getpixel((3, 3)) == (200, 255)
        assert canvas.getpixel((0, 0)) == (0, 0)

    @pytest.mark.parametrize("size", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(ValueError, match="positive"):
            center_on_canvas(Image.new("RGBA", (1, 1), RED), size)


class TestTrimAndCenter:
    def test_fully_transparent_returns_transparent_canvas(self, transparent_image):
        result = trim_and_center(transparent_image, (64, 64))
        assert result.size == (64, 64)
        assert result.mode == "RGBA"
        assert _alpha_bbox(result) is None

    def test_fully_transparent_uses_requested_size(self, transparent_image):
        result = trim_and_center(transparent_image, (32, 48))
        assert result.size == (32, 48)
        assert _alpha_bbox(result) is None

    def test_single_pixel_scenario(self, single_pixel_image):
        result = trim_and_center(single_pixel_image, (64, 64))
        assert result.getpixel((31, 31)) == RED
        assert _alpha_bbox(result) == (31, 31, 32, 32)

    def test_square_scenario(self, square_image):
        result = trim_and_center(square_image, (64, 64))
        # 11x11 content at offset (26, 26)
        assert _alpha_bbox(result) == (26, 26, 37, 37)
        assert result.getpixel((26, 26)) == RED
        assert result.getpixel((36, 36)) == RED

    def test_default_size_is_input_size(self, square_image):
        assert trim_and_center(square_image).size == (64, 64)

    def test_idempotent(self, gradient_glyph_image):
        once = trim_and_center(gradient_glyph_image, (40, 30))
        twice = trim_and_center(once, (40, 30))
        assert once.tobytes() == twice.tobytes()

    def test_input_not_modified(self, square_image):
        before = square_image.tobytes()
        trim_and_center(square_image, (64, 64))
        assert square_image.tobytes() == before

    def test_content_pixels_survive(self, gradient_glyph_image):
        box = compute_bounding_box(gradient_glyph_image)
        result = trim_and_center(gradient_glyph_image, (40, 30))
        off_x, off_y = center_offset((box.width, box.height), (40, 30))
        assert result.getpixel((off_x, off_y)) == gradient_glyph_image.getpixel(
            (box.min_x, box.min_y)
        )

    def test_smaller_canvas_clips(self, square_image):
        result = trim_and_center(square_image, (5, 5))
        assert result.size == (5, 5)
        assert _alpha_bbox(result) == (0, 0, 5, 5)

    def test_invalid_size_rejected(self, square_image):
        with pytest.raises(ValueError):
            trim_and_center(square_image, (0, 0))

    def test_invalid_size_rejected_for_transparent_input(self, transparent_image):
        with pytest.raises(ValueError):
            trim_and_center(transparent_image, (-1, 64))
