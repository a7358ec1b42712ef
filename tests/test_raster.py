import math

import pytest

from ttf2sfont.errors import GlyphNotFoundError, UnsupportedSegmentError
from ttf2sfont.font import Segment, SegmentOp
from ttf2sfont.pack import pack_row
from ttf2sfont.raster import Rasterizer, draw_outline, rasterize_glyph


def square(r, x0, y0, x1, y1, clockwise=True):
    r.move_to(x0, y0)
    if clockwise:
        r.line_to(x1, y0)
        r.line_to(x1, y1)
        r.line_to(x0, y1)
    else:
        r.line_to(x0, y1)
        r.line_to(x1, y1)
        r.line_to(x1, y0)


def test_blank_raster():
    img = Rasterizer(16, 24).draw()
    assert img.mode == "L"
    assert img.size == (16, 24)
    assert img.getextrema() == (0, 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        Rasterizer(0, 8)


def row(img, y):
    return [img.getpixel((x, y)) for x in range(img.size[0])]


def test_filled_square():
    r = Rasterizer(8, 8)
    square(r, 2, 2, 6, 6)
    img = r.draw()
    assert row(img, 1) == [0] * 8
    assert row(img, 2) == [0, 0, 255, 255, 255, 255, 0, 0]
    assert row(img, 5) == [0, 0, 255, 255, 255, 255, 0, 0]
    assert row(img, 6) == [0] * 8


def test_partial_coverage_is_exact():
    r = Rasterizer(8, 4)
    square(r, 2, 0, 2.2, 4)
    square(r, 4.5, 0, 6.25, 4)
    img = r.draw()
    assert row(img, 1) == [0, 0, 51, 0, 128, 255, 64, 0]
    assert pack_row(row(img, 1)) == b"\x0e"


def test_diagonal_edge_splits_pixels():
    r = Rasterizer(4, 4)
    r.move_to(0, 0)
    r.line_to(4, 4)
    r.line_to(0, 4)
    img = r.draw()
    assert row(img, 0) == [128, 0, 0, 0]
    assert row(img, 3) == [255, 255, 255, 128]


def test_open_contour_is_closed():
    r = Rasterizer(8, 8)
    r.move_to(2, 2)
    r.line_to(6, 2)
    r.line_to(6, 6)
    r.line_to(2, 6)
    assert row(r.draw(), 4) == [0, 0, 255, 255, 255, 255, 0, 0]


def test_pentagram_center_is_filled():
    r = Rasterizer(20, 20)
    points = [(10 + 8 * math.cos(math.radians(-90 + 144 * k)),
               10 + 8 * math.sin(math.radians(-90 + 144 * k))) for k in range(5)]
    r.move_to(*points[0])
    for p in points[1:]:
        r.line_to(*p)
    img = r.draw()
    assert img.getpixel((9, 9)) == 255
    assert img.getpixel((10, 10)) == 255
    assert img.getpixel((0, 0)) == 0


def test_contour_winding_twice_is_filled():
    r = Rasterizer(12, 12)
    r.move_to(2, 2)
    for _ in range(2):
        r.line_to(10, 2)
        r.line_to(10, 10)
        r.line_to(2, 10)
        r.line_to(2, 2)
    img = r.draw()
    assert img.getpixel((5, 5)) == 255
    assert row(img, 6) == [0, 0] + [255] * 8 + [0, 0]


def test_draw_is_repeatable():
    r = Rasterizer(8, 8)
    square(r, 2, 2, 6, 6)
    assert r.draw().tobytes() == r.draw().tobytes()


def test_clipped_at_cell_edges():
    r = Rasterizer(4, 4)
    square(r, -2, -2, 2, 6)
    square(r, 3, 1, 9, 2)
    img = r.draw()
    assert row(img, 0) == [255, 255, 0, 0]
    assert row(img, 1) == [255, 255, 0, 255]
    assert row(img, 3) == [255, 255, 0, 0]


def test_opposite_orientation_cuts_hole():
    r = Rasterizer(12, 12)
    square(r, 1, 1, 11, 11, clockwise=True)
    square(r, 4, 4, 8, 8, clockwise=False)
    img = r.draw()
    assert img.getpixel((2, 2)) == 255
    assert img.getpixel((5, 5)) == 0
    assert img.getpixel((9, 9)) == 255


def test_same_orientation_overlap_stays_filled():
    r = Rasterizer(12, 12)
    square(r, 1, 1, 8, 8)
    square(r, 4, 4, 11, 11)
    img = r.draw()
    assert img.getpixel((5, 5)) == 255


def test_curves_reach_end_point():
    r = Rasterizer(16, 16)
    r.move_to(2, 14)
    r.quad_to(8, -6, 14, 14)
    r.cube_to(12, 16, 4, 16, 2, 14)
    img = r.draw()
    assert img.getpixel((8, 8)) == 255
    assert img.getpixel((0, 0)) == 0


def test_draw_outline_translates_fixed_point():
    segments = [
        Segment(SegmentOp.MOVE_TO, ((128, 128),)),
        Segment(SegmentOp.LINE_TO, ((384, 128),)),
        Segment(SegmentOp.LINE_TO, ((384, 384),)),
        Segment(SegmentOp.LINE_TO, ((128, 384),)),
    ]
    r = Rasterizer(8, 8)
    draw_outline(r, segments, 1.0, 0.0)
    img = r.draw()
    assert img.getpixel((4, 3)) == 255
    assert img.getpixel((5, 4)) == 255
    assert img.getpixel((1, 3)) == 0


def test_draw_outline_rejects_unknown_segment():
    segments = [Segment(SegmentOp.MOVE_TO, ((0, 0),)), Segment("arc", ((64, 64),))]
    with pytest.raises(UnsupportedSegmentError) as e:
        draw_outline(Rasterizer(4, 4), segments, 0, 0)
    assert e.value.op == "arc"


class EmptyFont:

    def glyph_index(self, codepoint):
        return 0

    def load_outline(self, index, ppem):
        raise AssertionError("outline of an unmapped glyph requested")


def test_rasterize_missing_glyph():
    with pytest.raises(GlyphNotFoundError) as e:
        rasterize_glyph(EmptyFont(), 100, 24, 16, 24)
    assert e.value.codepoint == 100


class SquareFont:

    def glyph_index(self, codepoint):
        return 1

    def load_outline(self, index, ppem):
        return [
            Segment(SegmentOp.MOVE_TO, ((0, 0),)),
            Segment(SegmentOp.LINE_TO, ((0, -256),)),
            Segment(SegmentOp.LINE_TO, ((256, -256),)),
            Segment(SegmentOp.LINE_TO, ((256, 0),)),
        ]


def test_rasterize_glyph_size_and_origin():
    img = rasterize_glyph(SquareFont(), 65, 24, 16, 10, origin_x=2, origin_y=8)
    assert img.size == (16, 10)
    assert img.getpixel((3, 5)) == 255
    assert img.getpixel((3, 9)) == 0
    assert img.getpixel((0, 5)) == 0
