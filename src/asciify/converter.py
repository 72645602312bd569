import logging
from dataclasses import dataclass
from functools import cached_property

from PIL import Image, ImageFont

from asciify.assembler import assemble_rows, join_rows
from asciify.charsets import PALETTE
from asciify.errors import NotInitializedError
from asciify.renderer import render_text
from asciify.sampling import average_regions, sample_pixels, validate_block_size
from asciify.scaling import scale_image, validate_scale

logger = logging.getLogger(__name__)


def image_to_rows(image: Image.Image, block_size, palette: str = PALETTE) -> list[str]:
    """Sample, average and map ``image`` into text rows (no scaling)."""
    grid = sample_pixels(image)
    regions = average_regions(grid, block_size)
    rows = assemble_rows(regions, palette=palette)
    logger.debug("%dx%d image became %d text rows", image.width, image.height, len(rows) - 1)
    return rows


def convert_to_ascii_text(image: Image.Image, block_size, scale: float = 1.0, palette: str = PALETTE) -> str:
    validate_block_size(block_size)
    scaled = scale_image(image, scale)
    return join_rows(image_to_rows(scaled, block_size, palette))


def convert_to_ascii_image(
    image: Image.Image,
    block_size,
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
    colour: str | tuple[int, ...],
    scale: float = 1.0,
    palette: str = PALETTE,
) -> Image.Image:
    """Render ``image`` as ASCII art, then scale the rendering by ``scale``.

    Unlike convert_to_ascii_text the source is sampled at full size; the
    scale applies to the rendered art.
    """
    validate_block_size(block_size)
    validate_scale(scale)
    rows = image_to_rows(image, block_size, palette)
    art = render_text(join_rows(rows), font, colour, size_hint=image.size)
    return scale_image(art, scale)


@dataclass(frozen=True)
class AsciiConversion:
    """One conversion request whose results are computed on first access.

    Build a new instance (``dataclasses.replace``) to convert with other
    settings; results are never shared between instances.
    """

    image: Image.Image | None = None
    block_size: tuple[int, int] | None = None
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont | None = None
    colour: str | tuple[int, ...] = "black"
    scale: float = 1.0
    palette: str = PALETTE

    def _require_inputs(self) -> None:
        if self.image is None or self.block_size is None:
            raise NotInitializedError("AsciiConversion needs an image and a block size before producing results")

    @cached_property
    def rows(self) -> list[str]:
        """Text rows of the pre-scaled source, ending with an empty row."""
        self._require_inputs()
        validate_block_size(self.block_size)
        return image_to_rows(scale_image(self.image, self.scale), self.block_size, self.palette)

    @cached_property
    def text(self) -> str:
        return join_rows(self.rows)

    @cached_property
    def art(self) -> Image.Image:
        self._require_inputs()
        font = self.font if self.font is not None else ImageFont.load_default()
        return convert_to_ascii_image(self.image, self.block_size, font, self.colour, self.scale, self.palette)
