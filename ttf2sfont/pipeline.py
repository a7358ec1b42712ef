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

"""Drive the conversion: font backend -> rasterizer -> packer -> emitter."""

import logging

from .config import resolve_layout
from .emit import emit_table
from .font import load_font
from .pack import GlyphBitmap, pack_bitmap
from .raster import rasterize_glyph

log = logging.getLogger(__name__)

# printable ASCII only
FIRST_CODEPOINT = 32
LAST_CODEPOINT = 126
CODEPOINTS = range(FIRST_CODEPOINT, LAST_CODEPOINT + 1)


def build_glyphs(font, config, layout):
    """Rasterize and pack every printable codepoint, in ascending order."""
    glyphs = []
    for codepoint in CODEPOINTS:
        coverage = rasterize_glyph(
            font, codepoint, config.ppem,
            config.pixel_width, layout.height,
            layout.origin_x, layout.origin_y,
        )
        glyphs.append(GlyphBitmap(codepoint, pack_bitmap(coverage)))
    return glyphs


def log_settings(font, config, metrics, layout):
    log.debug("font:       %s (%s)", config.font_path, font.family_name)
    log.debug("ppem:       %d", config.ppem)
    log.debug("ascent:     %.2f", metrics.ascent)
    log.debug("cap height: %.2f", metrics.cap_height)
    log.debug("descent:    %.2f", metrics.descent)
    log.debug("height:     %.2f", metrics.height)
    log.debug("layout:     %s", config.layout)
    log.debug("cell:       %dx%d px (%d bytes per row)", config.pixel_width, layout.height, config.width_bytes)
    log.debug("origin:     (%.2f, %.2f)", layout.origin_x, layout.origin_y)


def convert(config, font=None):
    """Convert a font into C table text.

    Returns the table text together with the packed glyphs and the resolved
    layout. Nothing is written here, so a failure half way through never
    leaves a truncated table behind.
    """
    if font is None:
        font = load_font(config.font_path)
    metrics = font.metrics(config.ppem)
    layout = resolve_layout(config, metrics)
    log_settings(font, config, metrics, layout)

    glyphs = build_glyphs(font, config, layout)
    log.debug("packed %d glyphs", len(glyphs))
    text = emit_table(glyphs, config.width_bytes, layout.height, config.font_path, config.name)
    return text, glyphs, layout
