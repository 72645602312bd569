import logging
import math

from PIL import Image

from asciify.errors import ImageTooLargeError, PreconditionError

logger = logging.getLogger(__name__)


def pixel_limit() -> int | None:
    """Largest pixel count we allocate: where Pillow raises DecompressionBombError. None means no limit."""
    if Image.MAX_IMAGE_PIXELS is None:
        return None
    return 2 * Image.MAX_IMAGE_PIXELS


def validate_scale(factor: float) -> float:
    if isinstance(factor, bool) or not isinstance(factor, (int, float)) or not math.isfinite(factor) or factor <= 0:
        raise PreconditionError(f"Scale factor must be a positive number, got {factor!r}")
    return factor


def scaled_size(size: tuple[int, int], factor: float) -> tuple[int, int]:
    """Dimensions of ``size`` scaled by ``factor``, rounded up."""
    validate_scale(factor)
    width = math.ceil(size[0] * factor)
    height = math.ceil(size[1] * factor)
    if width <= 0 or height <= 0:
        raise PreconditionError(f"Scaling {size[0]}x{size[1]} by {factor} gives an empty {width}x{height} image")
    limit = pixel_limit()
    if limit is not None and width * height > limit:
        raise ImageTooLargeError(f"Scaled image {width}x{height} exceeds the {limit} pixel limit")
    return width, height


def scale_image(image: Image.Image, factor: float) -> Image.Image:
    """Resize ``image`` by ``factor`` with bicubic resampling into a new RGBA image."""
    new_size = scaled_size(image.size, factor)
    logger.debug("scaling %dx%d by %s to %dx%d", *image.size, factor, *new_size)
    try:
        return image.convert("RGBA").resize(new_size, Image.BICUBIC)
    except MemoryError as e:
        raise ImageTooLargeError(f"Not enough memory for a {new_size[0]}x{new_size[1]} image") from e
