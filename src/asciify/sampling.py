from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np
from PIL import Image

from asciify.errors import PreconditionError

logger = logging.getLogger(__name__)

Pixel = tuple[int, int, int, int]


class BlockSize(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True)
class Region:
    top: int  # first grid row covered by the block
    left: int  # first grid column covered by the block
    pixel: Pixel  # averaged RGBA


@dataclass(frozen=True, eq=False)
class RegionGrid:
    """Averaged block colours laid out as (outer, inner, 4).

    Outer entries step down the pixel grid's rows in ``block_width`` strides
    and become text rows; inner entries step across its columns in
    ``block_height`` strides and become characters.
    """

    pixels: np.ndarray  # (outer, inner, 4) uint8
    block_size: BlockSize

    @property
    def shape(self) -> tuple[int, int]:
        return self.pixels.shape[0], self.pixels.shape[1]

    def region(self, outer: int, inner: int) -> Region:
        r, g, b, a = (int(v) for v in self.pixels[outer, inner])
        return Region(outer * self.block_size.width, inner * self.block_size.height, (r, g, b, a))

    def __iter__(self) -> Iterator[list[Region]]:
        outer_count, inner_count = self.shape
        for i in range(outer_count):
            yield [self.region(i, j) for j in range(inner_count)]


def validate_block_size(block_size) -> BlockSize:
    """Coerce ``block_size`` to a BlockSize, rejecting anything but positive integers."""
    try:
        width, height = block_size
    except (TypeError, ValueError):
        raise PreconditionError(f"Block size must be a (width, height) pair, got {block_size!r}") from None
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise PreconditionError(f"Block size must be positive integers, got {block_size!r}")
    return BlockSize(int(width), int(height))


def sample_pixels(image: Image.Image) -> np.ndarray:
    """Copy every pixel of ``image`` into an (H, W, 4) uint8 RGBA array."""
    width, height = image.size
    if width == 0 or height == 0:
        return np.zeros((height, width, 4), dtype=np.uint8)
    return np.array(image.convert("RGBA"), dtype=np.uint8)


def average_regions(grid: np.ndarray, block_size) -> RegionGrid:
    """Average each block of the pixel grid into one RGBA colour.

    Blocks span ``block_width`` grid rows by ``block_height`` grid columns.
    Trailing rows and columns that do not fill a whole block are dropped.
    """
    block = validate_block_size(block_size)
    outer = grid.shape[0] // block.width
    inner = grid.shape[1] // block.height

    # Trim to exact blocks and reshape into (outer, bw, inner, bh, 4)
    trimmed = grid[: outer * block.width, : inner * block.height]
    cells = trimmed.reshape(outer, block.width, inner, block.height, 4)
    sums = cells.sum(axis=(1, 3), dtype=np.int64)
    averaged = (sums // (block.width * block.height)).astype(np.uint8)

    logger.debug("averaged %dx%d grid into %dx%d regions", grid.shape[1], grid.shape[0], inner, outer)
    return RegionGrid(pixels=averaged, block_size=block)
