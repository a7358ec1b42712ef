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

"""PNG preview sheet of a packed font table."""

import logging

from PIL import Image, ImageDraw, ImageFont

from .pack import render_row

log = logging.getLogger(__name__)

FG_COLOR = (255, 255, 255)
BG_COLOR = (0, 0, 0)
LABEL_COLOR = (255, 255, 0)
SCALE = 3
COLUMNS = 16


def render_glyph(glyph, width, height):
    img = Image.new("RGB", (width, height), BG_COLOR)
    for y, row in enumerate(glyph.rows):
        for x, pixel in enumerate(render_row(row, width)):
            if pixel == "#":
                img.putpixel((x, y), FG_COLOR)
    return img


def create_preview(glyphs, width, height, preview_image):
    """Save the packed glyphs as a labelled grid, scaled up for clarity."""
    label_font = ImageFont.load_default()
    label_height = 12
    spacing = 4

    cell_width = max(width * SCALE, 24)
    cell_height = height * SCALE + label_height
    rows = (len(glyphs) + COLUMNS - 1) // COLUMNS

    preview = Image.new("RGB", (COLUMNS * (cell_width + spacing), rows * (cell_height + spacing)), BG_COLOR)
    draw = ImageDraw.Draw(preview)

    for i, glyph in enumerate(glyphs):
        x = (i % COLUMNS) * (cell_width + spacing)
        y = (i // COLUMNS) * (cell_height + spacing)

        img = render_glyph(glyph, width, height).resize((width * SCALE, height * SCALE), Image.NEAREST)
        preview.paste(img, (x, y))
        draw.rectangle([x, y, x + width * SCALE - 1, y + height * SCALE - 1], outline=(80, 80, 80))
        draw.text((x + 2, y + height * SCALE + 1), f"{glyph.codepoint}", font=label_font, fill=LABEL_COLOR)

    preview.save(preview_image)
    log.info("preview saved to %s", preview_image)
    return preview
