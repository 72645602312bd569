import numpy as np

from asciify.charsets import PALETTE
from asciify.sampling import Pixel

# ITU-R BT.601 luma weights
RED_WEIGHT = 0.299
GREEN_WEIGHT = 0.587
BLUE_WEIGHT = 0.114


def luminance(pixel: Pixel) -> int:
    """Perceptual grey level of an RGBA pixel, truncated to 0-255. Alpha is ignored."""
    r, g, b, _ = pixel
    grey = int(RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b)
    return min(max(grey, 0), 255)


def char_for_pixel(pixel: Pixel, palette: str = PALETTE) -> str:
    """Pick the palette glyph whose rank matches the pixel's luminance.

    A pixel with every channel zero is usually unpainted canvas rather than
    black ink, so it is read as white. Any other fully transparent pixel
    maps straight to the blank glyph at the end of the palette.
    """
    r, g, b, a = pixel
    if r == 0 and g == 0 and b == 0 and a == 0:
        pixel = (255, 255, 255, 0)
    elif a == 0:
        return palette[-1]
    last = len(palette) - 1
    index = luminance(pixel) * last // 255
    return palette[min(max(index, 0), last)]


def palette_indices(pixels: np.ndarray, palette_length: int = len(PALETTE)) -> np.ndarray:
    """Vectorised char_for_pixel: map an (..., 4) uint8 array to palette indices."""
    last = palette_length - 1
    unpainted = np.all(pixels == 0, axis=-1)
    transparent = (pixels[..., 3] == 0) & ~unpainted

    rgb = pixels[..., :3].astype(np.float64)
    rgb[unpainted] = 255.0
    # Same operation order as luminance() so both paths truncate identically
    grey = RED_WEIGHT * rgb[..., 0] + GREEN_WEIGHT * rgb[..., 1] + BLUE_WEIGHT * rgb[..., 2]
    grey = np.clip(grey.astype(np.int64), 0, 255)

    indices = np.clip(grey * last // 255, 0, last)
    return np.where(transparent, last, indices)
