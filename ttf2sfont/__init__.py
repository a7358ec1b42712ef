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

"""Convert vector fonts into fixed cell monochrome C font tables."""

from .config import Config, Layout, resolve_layout
from .errors import (ConfigError, FontConverterError, FontParseError, FontReadError,
                     GlyphNotFoundError, UnsupportedSegmentError)
from .font import Font, FontMetrics, Segment, SegmentOp, load_font
from .pipeline import convert

__version__ = '1.0'
