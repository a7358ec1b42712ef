import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

# 1024 units per em: at 16 ppem one font unit is exactly 1/64 pixel
UNITS_PER_EM = 1024
CAP_HEIGHT = 704

# every printable char without a dedicated shape gets this box,
# 2..6 px wide and 8 px tall at 16 ppem
BOX = [[("line", (128, 0)), ("line", (128, 512)), ("line", (384, 512)), ("line", (384, 0))]]

# trapezoid with a triangular counter of the opposite orientation; at 24 ppem
# one font unit is 3/128 pixel and every edge runs a quarter pixel per row
LETTER_A = [
    [("line", (64, 0)), ("line", (192, 512)), ("line", (320, 512)), ("line", (448, 0))],
    [("line", (192, 128)), ("line", (320, 128)), ("line", (256, 384))],
]

# ring made of quadratic arcs: outer radius 256, inner radius 128, centered at (256, 256)
LETTER_O = [
    [("line", (256, 0)), ("quad", (0, 0), (0, 256)), ("quad", (0, 512), (256, 512)),
     ("quad", (512, 512), (512, 256)), ("quad", (512, 0), (256, 0))],
    [("line", (256, 128)), ("quad", (384, 128), (384, 256)), ("quad", (384, 384), (256, 384)),
     ("quad", (128, 384), (128, 256)), ("quad", (128, 128), (256, 128))],
]

SHAPES = {" ": [], "A": LETTER_A, "O": LETTER_O}


def draw_shape(contours):
    pen = TTGlyphPen(None)
    for contour in contours:
        (_, start), rest = contour[0], contour[1:]
        pen.moveTo(start)
        for op, *points in rest:
            if op == "line":
                pen.lineTo(points[0])
            else:
                pen.qCurveTo(*points)
        pen.closePath()
    return pen.glyph()


def glyph_name(codepoint):
    return "space" if codepoint == 32 else f"uni{codepoint:04X}"


def build_font(path, unmapped=()):
    glyph_order = [".notdef"]
    cmap = {}
    glyphs = {".notdef": draw_shape(BOX)}
    metrics = {".notdef": (512, 128)}
    for codepoint in range(32, 127):
        name = glyph_name(codepoint)
        contours = SHAPES.get(chr(codepoint), BOX)
        glyph_order.append(name)
        glyphs[name] = draw_shape(contours)
        xs = [p[0] for contour in contours for _, *points in contour for p in points]
        metrics[name] = (576, min(xs) if xs else 0)
        if codepoint not in unmapped:
            cmap[codepoint] = name

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=896, descent=-128)
    fb.setupNameTable({"familyName": "TestSans", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=896, sTypoDescender=-128, usWinAscent=896, usWinDescent=128,
                sCapHeight=CAP_HEIGHT, sxHeight=512)
    fb.setupPost()
    fb.save(str(path))
    return str(path)


@pytest.fixture(scope="session")
def font_path(tmp_path_factory):
    return build_font(tmp_path_factory.mktemp("fonts") / "TestSans.ttf")


@pytest.fixture(scope="session")
def font_without_d(tmp_path_factory):
    return build_font(tmp_path_factory.mktemp("fonts") / "NoD.ttf", unmapped=(ord("d"),))
