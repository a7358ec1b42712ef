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

"""Format packed glyph rows as a C font table for sFONT based display drivers."""

from .pack import render_row

TABLE_HEADER = """\
#include "fonts.h"
#if defined(__AVR__) || defined(ARDUINO_ARCH_SAMD)
#include <avr/pgmspace.h>
#elif defined(ESP8266) || defined(ESP32)
#include <pgmspace.h>
#endif

const uint8_t {name}_Table [] PROGMEM =
{{
"""

DESCRIPTOR = """\
sFONT {name} = {{
  {name}_Table,
  {width}, /* Width */
  {height}, /* Height */
}};
"""


def format_row(packed, width):
    hex_bytes = "".join(f"0x{byte:02X}, " for byte in packed)
    return f"  {hex_bytes} // {render_row(packed, width)}"


def emit_table(glyphs, width_bytes, height, font_path, name="FontCustom"):
    """Return the complete C source text for a list of GlyphBitmaps.

    Every glyph contributes a comment line with its character and codepoint
    followed by one line per pixel row. The rows carry a '.'/'#' picture of
    the packed bits so the table can be checked by eye.
    """
    width = width_bytes * 8
    lines = [TABLE_HEADER.format(name=name)]
    for glyph in glyphs:
        lines.append(f"  // {glyph.char} {glyph.codepoint}")
        lines.extend(format_row(row, width) for row in glyph.rows)
    lines.append("};")
    lines.append("")
    lines.append(f"/* Based on font {font_path} */")
    lines.append(DESCRIPTOR.format(name=name, width=width_bytes, height=height))
    return "\n".join(lines)
