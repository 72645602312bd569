import numpy as np
import pytest
from PIL import Image

from asciify.errors import PreconditionError
from asciify.sampling import BlockSize, Region, average_regions, sample_pixels
from tests.conftest import solid


def test_sample_pixels_shape_and_values():
    img = Image.new("RGBA", (3, 2), (0, 0, 0, 0))
    img.putpixel((2, 1), (10, 20, 30, 40))
    grid = sample_pixels(img)
    assert grid.shape == (2, 3, 4)
    assert grid.dtype == np.uint8
    assert tuple(grid[1, 2]) == (10, 20, 30, 40)
    assert tuple(grid[0, 0]) == (0, 0, 0, 0)


def test_sample_pixels_rgb_gets_opaque_alpha():
    grid = sample_pixels(solid(2, 2, (1, 2, 3), mode="RGB"))
    np.testing.assert_array_equal(grid[..., :3], np.broadcast_to([1, 2, 3], (2, 2, 3)))
    np.testing.assert_array_equal(grid[..., 3], 255)


def test_sample_pixels_zero_area():
    grid = sample_pixels(Image.new("RGBA", (0, 5)))
    assert grid.shape == (5, 0, 4)
    assert grid.size == 0


def test_uniform_image_averages_to_same_colour():
    colour = (17, 200, 99, 128)
    regions = average_regions(sample_pixels(solid(12, 8, colour)), (4, 3))
    assert regions.shape == (2, 4)
    for row in regions:
        for region in row:
            assert region.pixel == colour


def test_average_is_truncated_mean():
    grid = np.zeros((2, 2, 4), dtype=np.uint8)
    grid[0, 0] = (255, 1, 0, 255)
    grid[0, 1] = (0, 1, 0, 255)
    grid[1, 0] = (0, 1, 0, 255)
    grid[1, 1] = (0, 0, 3, 254)
    regions = average_regions(grid, (2, 2))
    assert regions.region(0, 0).pixel == (63, 0, 0, 254)


def test_sums_do_not_overflow():
    grid = np.full((16, 16, 4), 255, dtype=np.uint8)
    regions = average_regions(grid, (16, 16))
    assert regions.region(0, 0).pixel == (255, 255, 255, 255)


def test_block_width_walks_rows_and_height_walks_columns():
    # 4 rows x 6 columns; block (2, 3) -> 2 outer entries of 2 regions
    grid = np.zeros((4, 6, 4), dtype=np.uint8)
    grid[:2, :3] = (10, 0, 0, 255)
    grid[:2, 3:] = (20, 0, 0, 255)
    grid[2:, :3] = (30, 0, 0, 255)
    grid[2:, 3:] = (40, 0, 0, 255)
    regions = average_regions(grid, (2, 3))
    assert regions.shape == (2, 2)
    assert [[r.pixel[0] for r in row] for row in regions] == [[10, 20], [30, 40]]
    assert regions.region(1, 1) == Region(top=2, left=3, pixel=(40, 0, 0, 255))


def test_partial_trailing_blocks_are_dropped():
    grid = np.zeros((7, 11, 4), dtype=np.uint8)
    regions = average_regions(grid, (3, 5))
    assert regions.shape == (2, 2)


def test_grid_smaller_than_block_gives_no_regions():
    regions = average_regions(np.zeros((2, 2, 4), dtype=np.uint8), (4, 4))
    assert regions.shape == (0, 0)
    assert list(regions) == []


def test_block_size_is_normalised():
    regions = average_regions(np.zeros((4, 4, 4), dtype=np.uint8), [2, 1])
    assert regions.block_size == BlockSize(width=2, height=1)


@pytest.mark.parametrize("block_size", [(0, 2), (2, -1), (1.5, 2), (2,), None, (True, 2)])
def test_invalid_block_size(block_size):
    with pytest.raises(PreconditionError, match="Block size"):
        average_regions(np.zeros((4, 4, 4), dtype=np.uint8), block_size)


def test_region_grids_compare_by_identity():
    grid = np.zeros((4, 4, 4), dtype=np.uint8)
    first = average_regions(grid, (2, 2))
    second = average_regions(grid, (2, 2))
    assert first == first
    assert first != second
