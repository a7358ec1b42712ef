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

"""Run configuration and glyph cell layout."""

import math
import re
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

LAYOUT_EXPLICIT = "explicit"
LAYOUT_METRICS = "metrics"
LAYOUTS = (LAYOUT_EXPLICIT, LAYOUT_METRICS)

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")


@dataclass(frozen=True)
class Config:
    font_path: str
    width_bytes: int = 2
    ppem: int = 24
    layout: str = LAYOUT_EXPLICIT
    height: int = 24
    x_offset: float = 0.0
    y_offset: float = 18.0
    reduced_height: int = -1
    name: str = "FontCustom"
    output: Optional[str] = None
    preview: Optional[str] = None
    debug: bool = False

    def __post_init__(self):
        if self.width_bytes < 1:
            raise ConfigError(f"width must be at least 1 byte, got {self.width_bytes}")
        if self.ppem < 1:
            raise ConfigError(f"ppem must be at least 1, got {self.ppem}")
        if self.layout not in LAYOUTS:
            raise ConfigError(f"unknown layout {self.layout!r}, expected one of {', '.join(LAYOUTS)}")
        if self.layout == LAYOUT_EXPLICIT and self.height < 1:
            raise ConfigError(f"height must be at least 1 row, got {self.height}")
        if not _IDENTIFIER.match(self.name):
            raise ConfigError(f"{self.name!r} is not a valid C identifier")

    @property
    def pixel_width(self):
        return self.width_bytes * 8


@dataclass(frozen=True)
class Layout:
    """Cell height in rows and the pixel position of the glyph origin."""
    height: int
    origin_x: float
    origin_y: float


def resolve_layout(config, metrics):
    if config.layout == LAYOUT_EXPLICIT:
        return Layout(config.height, config.x_offset, config.y_offset)

    height = math.ceil(metrics.height)
    if config.reduced_height >= 0:
        height -= config.reduced_height
    else:
        # legacy default, roughly cuts the line gap and most of the descender
        height = height * 3 // 4 + 1
    if height < 1:
        raise ConfigError(f"reduced height leaves no rows (line height {math.ceil(metrics.height)})")
    return Layout(height, config.x_offset, math.floor(metrics.cap_height) + 1)
