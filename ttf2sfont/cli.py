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

"""Command line front end.

Usage:
    ttf2sfont -f <font_file> [-w <bytes>] [-s <ppem>] [--height <rows>]
              [-x <px>] [-y <px>] [-l explicit|metrics] [-r <rows>]
              [-n <name>] [-o <file>] [-p <png>] [-d]

The generated C table goes to standard output unless --output is given.
Diagnostics go to standard error.
"""

import argparse
import logging
import sys

from . import __version__
from .config import LAYOUT_EXPLICIT, LAYOUTS, Config
from .errors import FontConverterError
from .pipeline import convert
from .preview import create_preview

log = logging.getLogger("ttf2sfont")


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on usage errors, the converter reports 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = ArgumentParser(prog="ttf2sfont", description='TTF to C bitmap font table converter.')
    parser.add_argument('-f', '--font', dest='font_path', required=True, help='Path to the font file.')
    parser.add_argument('-w', '--width', dest='width_bytes', type=int, default=2, help='Font width in bytes (default: 2).')
    parser.add_argument('-s', '--ppem', type=int, default=24, help='Font size in pixels per em (default: 24).')
    parser.add_argument('-l', '--layout', choices=LAYOUTS, default=LAYOUT_EXPLICIT,
                        help='Cell layout: explicit offsets, or derived from the font metrics (default: explicit).')
    parser.add_argument('--height', type=int, default=24, help='Cell height in rows, explicit layout (default: 24).')
    parser.add_argument('-x', '--x-offset', type=float, default=0.0, help='Horizontal origin in pixels (default: 0).')
    parser.add_argument('-y', '--y-offset', type=float, default=18.0,
                        help='Baseline row in pixels, explicit layout (default: 18).')
    parser.add_argument('-r', '--reduced-height', type=int, default=-1,
                        help='Rows cut off the bottom of the line height, metrics layout. '
                             'Negative picks a default of 3/4 of the line height plus one.')
    parser.add_argument('-n', '--name', default='FontCustom', help='C name of the font (default: FontCustom).')
    parser.add_argument('-o', '--output', help='Write the table to this file instead of standard output.')
    parser.add_argument('-p', '--preview', help='Also save a PNG preview of the table.')
    parser.add_argument('-d', '--debug', action='store_true', help='Print font metrics and configuration.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def write_output(text, output):
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        log.info("table written to %s", output)
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(levelname)s: %(message)s')

    try:
        config = Config(**vars(args))
        text, glyphs, layout = convert(config)
    except FontConverterError as e:
        log.error("%s", e)
        return 1

    try:
        write_output(text, config.output)
        if config.preview:
            create_preview(glyphs, config.pixel_width, layout.height, config.preview)
    except (OSError, ValueError) as e:
        # ValueError is Pillow's answer to an unknown image extension
        log.error("%s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
