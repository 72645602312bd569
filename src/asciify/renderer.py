import logging

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

MARGIN = 5
TRANSPARENT = (0, 0, 0, 0)


def measure_text(text: str, font: ImageFont.ImageFont | ImageFont.FreeTypeFont) -> tuple[int, int]:
    """Width and height the multiline text occupies when drawn from the origin."""
    with Image.new("RGBA", (1, 1)) as scratch:
        draw = ImageDraw.Draw(scratch)
        _, _, right, bottom = draw.multiline_textbbox((0, 0), text, font=font)
    return max(int(right), 0), max(int(bottom), 0)


def render_text(
    text: str,
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
    colour: str | tuple[int, ...],
    size_hint: tuple[int, int] | None = None,
) -> Image.Image:
    """Draw text onto a transparent canvas sized to fit it with a 5px margin."""
    width, height = measure_text(text, font)
    canvas_size = (width + 2 * MARGIN, height + 2 * MARGIN)
    logger.debug("rendering %d lines onto %dx%d canvas (source %s)", text.count("\n") + 1, *canvas_size, size_hint)

    canvas = Image.new("RGBA", canvas_size, TRANSPARENT)
    draw = ImageDraw.Draw(canvas)
    draw.fontmode = "L"  # anti-aliased glyphs
    draw.multiline_text((MARGIN, MARGIN), text, fill=colour, font=font)
    return canvas
