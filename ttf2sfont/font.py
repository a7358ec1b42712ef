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

"""Font backend: glyph lookup, metrics and outline extraction.

Outlines come from FreeType, table level metrics (cap height, family name)
from fontTools. Coordinates handed out by ``load_outline`` are 26.6 fixed
point pixels with the y axis pointing down, the baseline at y=0 and
ascenders at negative y.
"""

import enum
import io
import logging
from dataclasses import dataclass

import freetype
from fontTools.ttLib import TTFont, TTLibError

from .errors import FontParseError, FontReadError

log = logging.getLogger(__name__)

# 26.6 fixed point: 1 pixel == 64 units
FIXED_ONE = 64

LOAD_FLAGS = freetype.FT_LOAD_NO_BITMAP | freetype.FT_LOAD_NO_HINTING


class SegmentOp(enum.Enum):
    MOVE_TO = "move"
    LINE_TO = "line"
    QUAD_TO = "quad"
    CUBE_TO = "cube"


@dataclass(frozen=True)
class Segment:
    op: SegmentOp
    points: tuple


@dataclass(frozen=True)
class FontMetrics:
    """Global metrics in pixels at one ppem. Descent is positive."""
    ppem: int
    ascent: float
    descent: float
    cap_height: float
    height: float


class Font:
    """A parsed vector font, immutable for the duration of a run."""

    def __init__(self, data, path="<memory>"):
        self.path = str(path)
        try:
            self._ttfont = TTFont(io.BytesIO(data))
            self.units_per_em = self._ttfont["head"].unitsPerEm
        except (TTLibError, KeyError) as e:
            raise FontParseError(f"{self.path}: {e}") from e
        try:
            self._face = freetype.Face(io.BytesIO(data))
        except freetype.ft_errors.FT_Exception as e:
            raise FontParseError(f"{self.path}: {e}") from e
        self._ppem = None

    @property
    def family_name(self):
        name = self._ttfont["name"].getBestFamilyName() if "name" in self._ttfont else None
        return name or self._face.family_name.decode("utf-8", "replace")

    def _set_size(self, ppem):
        if ppem != self._ppem:
            self._face.set_pixel_sizes(ppem, ppem)
            self._ppem = ppem

    def glyph_index(self, codepoint):
        """Return the glyph index for a codepoint, 0 when it is unmapped."""
        return self._face.get_char_index(codepoint)

    def metrics(self, ppem):
        self._set_size(ppem)
        size = self._face.size
        return FontMetrics(
            ppem=ppem,
            ascent=size.ascender / FIXED_ONE,
            descent=-size.descender / FIXED_ONE,
            cap_height=self._cap_height(ppem),
            height=size.height / FIXED_ONE,
        )

    def _cap_height(self, ppem):
        os2 = self._ttfont["OS/2"] if "OS/2" in self._ttfont else None
        if os2 is not None and os2.version >= 2 and os2.sCapHeight > 0:
            return os2.sCapHeight * ppem / self.units_per_em
        # no usable OS/2 value, measure the capital H instead
        index = self.glyph_index(ord("H"))
        if index == 0:
            log.debug("%s: no cap height available", self.path)
            return 0.0
        self._set_size(ppem)
        self._face.load_glyph(index, LOAD_FLAGS)
        return self._face.glyph.metrics.horiBearingY / FIXED_ONE

    def load_outline(self, index, ppem):
        """Return the outline of a glyph as a list of Segments."""
        self._set_size(ppem)
        try:
            self._face.load_glyph(index, LOAD_FLAGS)
        except freetype.ft_errors.FT_Exception as e:
            raise FontParseError(f"{self.path}: glyph {index}: {e}") from e
        slot = self._face.glyph
        if slot.format != freetype.FT_GLYPH_FORMAT_OUTLINE:
            raise FontParseError(f"{self.path}: glyph {index} has no outline")

        def move_to(a, segments):
            segments.append(Segment(SegmentOp.MOVE_TO, ((a.x, -a.y),)))

        def line_to(a, segments):
            segments.append(Segment(SegmentOp.LINE_TO, ((a.x, -a.y),)))

        def conic_to(b, c, segments):
            segments.append(Segment(SegmentOp.QUAD_TO, ((b.x, -b.y), (c.x, -c.y))))

        def cubic_to(b, c, d, segments):
            segments.append(Segment(SegmentOp.CUBE_TO, ((b.x, -b.y), (c.x, -c.y), (d.x, -d.y))))

        segments = []
        slot.outline.decompose(segments, move_to=move_to, line_to=line_to,
                               conic_to=conic_to, cubic_to=cubic_to)
        return segments


def load_font(path):
    """Read a font file fully into memory and parse it."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FontReadError(f"{path}: {e.strerror or e}") from e
    log.debug("read %d bytes from %s", len(data), path)
    return Font(data, path)
