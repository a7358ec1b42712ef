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

"""Threshold coverage bitmaps and pack them into MSB-first rows."""

from dataclasses import dataclass

# coverage values at or above this become set pixels
ALPHA_THRESHOLD = 64


@dataclass(frozen=True)
class GlyphBitmap:
    codepoint: int
    rows: tuple

    @property
    def char(self):
        return chr(self.codepoint)


def row_bytes(width):
    """Number of bytes needed to hold a row of width pixels."""
    return (width + 7) // 8


def pack_row(coverage, threshold=ALPHA_THRESHOLD):
    packed = bytearray(row_bytes(len(coverage)))
    for x, alpha in enumerate(coverage):
        if alpha >= threshold:
            packed[x // 8] |= 0x80 >> (x % 8)
    return bytes(packed)


def pack_bitmap(image, threshold=ALPHA_THRESHOLD):
    """Pack an ``L`` mode coverage image into one bytes object per pixel row."""
    width, height = image.size
    pixels = image.tobytes()
    return tuple(
        pack_row(pixels[y * width:(y + 1) * width], threshold)
        for y in range(height)
    )


def render_row(packed, width):
    """Render a packed row as '.' and '#' characters, one per pixel."""
    return "".join(
        "#" if packed[x // 8] & (0x80 >> (x % 8)) else "."
        for x in range(width)
    )
