#-------------------------------------------------------------------------
#
#    TTF2SFONT - TTF font to C bitmap font table converter for dot based
#    displays
#
#    Derived from the TTF2BMH software package
#    (C) 2019, jdmorise@yahoo.com
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU General Public License as published by
#    the Free Software Foundation, either version 3 of the License, or
#    (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU General Public License for more details.
#
#    You should have received a copy of the GNU General Public License
#    along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
#-------------------------------------------------------------------------

"""Glyph rasterization into fixed size coverage bitmaps."""

import logging
import math

import numpy
from PIL import Image

from .errors import GlyphNotFoundError, UnsupportedSegmentError
from .font import FIXED_ONE, SegmentOp

log = logging.getLogger(__name__)


def _subdivisions(dev_sq):
    # dev_sq is the squared deviation of the control points from the chord, in pixels
    if dev_sq < 1 / 3:
        return 1
    return 1 + int(math.sqrt(math.sqrt(3 * dev_sq)))


def _accumulate(acc, x0, y0, x1, y1):
    """Add the signed area a line leaves to its right, row by row, into acc.

    acc has two spare columns past the right edge of the raster. Running
    sums along a row then give the exact winding weighted coverage of every
    pixel. Parts of the line outside the raster are clipped per row.
    """
    if y0 == y1:
        return
    direction = 1.0
    if y0 > y1:
        direction = -1.0
        x0, y0, x1, y1 = x1, y1, x0, y0
    height, width = acc.shape[0], acc.shape[1] - 2
    dxdy = (x1 - x0) / (y1 - y0)

    for row in range(max(0, math.floor(y0)), min(height, math.ceil(y1))):
        top = max(row, y0)
        bottom = min(row + 1, y1)
        d = (bottom - top) * direction
        xa = min(max(x0 + dxdy * (top - y0), 0.0), width)
        xb = min(max(x0 + dxdy * (bottom - y0), 0.0), width)
        if xa > xb:
            xa, xb = xb, xa

        xa_floor = math.floor(xa)
        i0 = int(xa_floor)
        i1 = int(math.ceil(xb))
        line = acc[row]
        if i1 <= i0 + 1:
            # the line stays within one pixel column
            xmf = 0.5 * (xa + xb) - xa_floor
            line[i0] += d - d * xmf
            line[i0 + 1] += d * xmf
            continue

        s = 1.0 / (xb - xa)
        x0f = xa - xa_floor
        a0 = 0.5 * s * (1.0 - x0f) ** 2
        x1f = xb - i1 + 1.0
        am = 0.5 * s * x1f ** 2
        line[i0] += d * a0
        if i1 == i0 + 2:
            line[i0 + 1] += d * (1.0 - a0 - am)
        else:
            a1 = s * (1.5 - x0f)
            line[i0 + 1] += d * (a1 - a0)
            line[i0 + 2:i1 - 1] += d * s
            a2 = a1 + (i1 - i0 - 3) * s
            line[i1 - 1] += d * (1.0 - a2 - am)
        line[i1] += d * am


class Rasterizer:
    """Fills closed paths with the non-zero winding rule.

    Every line adds the area it covers to a per pixel accumulation buffer,
    signed by its direction. Curves are flattened into lines first. A pixel
    is opaque where the accumulated winding reaches one in either direction,
    so overlapping and self intersecting contours stay filled and contours of
    opposite orientation cut holes. Open contours are closed implicitly.
    """

    def __init__(self, width, height):
        if width < 1 or height < 1:
            raise ValueError(f"invalid raster size {width}x{height}")
        self.width = width
        self.height = height
        self._acc = numpy.zeros((height, width + 2), dtype=numpy.float64)
        self._start = (0.0, 0.0)
        self._pen = (0.0, 0.0)

    def _close(self, acc):
        if self._pen != self._start:
            _accumulate(acc, *self._pen, *self._start)

    def move_to(self, x, y):
        self._close(self._acc)
        self._start = self._pen = (x, y)

    def line_to(self, x, y):
        _accumulate(self._acc, *self._pen, x, y)
        self._pen = (x, y)

    def quad_to(self, bx, by, cx, cy):
        ax, ay = self._pen
        n = _subdivisions((ax - 2 * bx + cx) ** 2 + (ay - 2 * by + cy) ** 2)
        for i in range(1, n):
            t = i / n
            mt = 1 - t
            self.line_to(mt * mt * ax + 2 * mt * t * bx + t * t * cx,
                         mt * mt * ay + 2 * mt * t * by + t * t * cy)
        self.line_to(cx, cy)

    def cube_to(self, bx, by, cx, cy, dx, dy):
        ax, ay = self._pen
        n = _subdivisions(max(
            (ax - 2 * bx + cx) ** 2 + (ay - 2 * by + cy) ** 2,
            (bx - 2 * cx + dx) ** 2 + (by - 2 * cy + dy) ** 2,
        ))
        for i in range(1, n):
            t = i / n
            mt = 1 - t
            self.line_to(
                mt * mt * mt * ax + 3 * mt * mt * t * bx + 3 * mt * t * t * cx + t * t * t * dx,
                mt * mt * mt * ay + 3 * mt * mt * t * by + 3 * mt * t * t * cy + t * t * t * dy,
            )
        self.line_to(dx, dy)

    def draw(self):
        """Return the coverage of all contours as an ``L`` mode image."""
        acc = self._acc.copy()
        self._close(acc)
        winding = numpy.cumsum(acc[:, :self.width], axis=1)
        coverage = numpy.minimum(numpy.abs(winding), 1.0)
        return Image.fromarray(numpy.rint(coverage * 255).astype(numpy.uint8))


def draw_outline(rasterizer, segments, origin_x, origin_y):
    """Feed outline segments to a rasterizer, shifted by the origin."""

    def point(p):
        return origin_x + p[0] / FIXED_ONE, origin_y + p[1] / FIXED_ONE

    for seg in segments:
        if seg.op == SegmentOp.MOVE_TO:
            rasterizer.move_to(*point(seg.points[0]))
        elif seg.op == SegmentOp.LINE_TO:
            rasterizer.line_to(*point(seg.points[0]))
        elif seg.op == SegmentOp.QUAD_TO:
            rasterizer.quad_to(*point(seg.points[0]), *point(seg.points[1]))
        elif seg.op == SegmentOp.CUBE_TO:
            rasterizer.cube_to(*point(seg.points[0]), *point(seg.points[1]), *point(seg.points[2]))
        else:
            raise UnsupportedSegmentError(seg.op)


def rasterize_glyph(font, codepoint, ppem, width, height, origin_x=0.0, origin_y=0.0):
    """Render one codepoint into a width x height coverage image."""
    index = font.glyph_index(codepoint)
    if index == 0:
        raise GlyphNotFoundError(codepoint)
    segments = font.load_outline(index, ppem)
    rasterizer = Rasterizer(width, height)
    draw_outline(rasterizer, segments, origin_x, origin_y)
    log.debug("rasterized %r (glyph %d, %d segments)", chr(codepoint), index, len(segments))
    return rasterizer.draw()
