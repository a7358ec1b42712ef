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

"""Exceptions raised while converting a font into a bitmap table."""


class FontConverterError(Exception):
    """Base class for every fatal conversion error."""


class ConfigError(FontConverterError):
    """Invalid or inconsistent configuration."""


class FontReadError(FontConverterError):
    """The font file could not be read."""


class FontParseError(FontConverterError):
    """The font file could not be parsed or holds no usable outlines."""


class GlyphNotFoundError(FontConverterError):

    def __init__(self, codepoint):
        self.codepoint = codepoint
        super().__init__(f"no glyph index found for the rune {chr(codepoint)!r} ({codepoint})")


class UnsupportedSegmentError(FontConverterError):

    def __init__(self, op):
        self.op = op
        super().__init__(f"unsupported outline segment: {op!r}")
