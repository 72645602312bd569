import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, ImageColor, ImageFont

from asciify.charsets import PALETTE, SIMPLE_PALETTE
from asciify.converter import convert_to_ascii_image, convert_to_ascii_text
from asciify.errors import AsciifyError


def parse_block_size(value: str) -> tuple[int, int]:
    """Parse ``WxH`` (or a single number for square blocks)."""
    parts = value.lower().split("x")
    try:
        sizes = [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid block size: {value!r}") from None
    if len(sizes) == 1:
        sizes *= 2
    if len(sizes) != 2 or min(sizes) <= 0:
        raise argparse.ArgumentTypeError(f"invalid block size: {value!r}")
    return sizes[0], sizes[1]


def parse_colour(value: str) -> tuple[int, ...]:
    try:
        return ImageColor.getrgb(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown colour: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert an image to ASCII text or ASCII art")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-b", "--block-size", type=parse_block_size, default=(8, 8), help="Pixels per character as WxH (default: 8x8)"
    )
    parser.add_argument(
        "-s",
        "--scale",
        type=float,
        default=1.0,
        help="Scale factor. Applied to the source before text conversion, or to the rendered art with -o.",
    )
    parser.add_argument("-o", "--output", default=None, help="Render the art to this image file instead of printing")
    parser.add_argument("--font", default=None, help="TrueType font for rendering (default: Pillow's built-in font)")
    parser.add_argument("--font-size", type=int, default=12, help="Font size in points (default: 12)")
    parser.add_argument("--colour", type=parse_colour, default="black", help="Text colour (default: black)")
    parser.add_argument("--simple", action="store_true", default=False, help="Use the wider 22-glyph palette")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log pipeline details to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    palette = SIMPLE_PALETTE if args.simple else PALETTE
    try:
        image = Image.open(image_path)
    except OSError as e:  # includes UnidentifiedImageError
        parser.error(f"cannot read image {image_path}: {e}")
    with image:
        try:
            if args.output is None:
                # Joined text already ends with a line break
                print(convert_to_ascii_text(image, args.block_size, args.scale, palette=palette), end="")
            else:
                if args.font is not None:
                    font = ImageFont.truetype(args.font, args.font_size)
                else:
                    font = ImageFont.load_default(args.font_size)
                art = convert_to_ascii_image(image, args.block_size, font, args.colour, args.scale, palette=palette)
                art.save(args.output)
        except AsciifyError as e:
            parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
