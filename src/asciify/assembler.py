import numpy as np

from asciify.charsets import PALETTE
from asciify.luminance import palette_indices
from asciify.sampling import RegionGrid

LINE_BREAK = "\n"


def assemble_rows(regions: RegionGrid, add_newline: bool = False, palette: str = PALETTE) -> list[str]:
    """Turn averaged regions into text rows.

    Every second row is dropped because glyphs are roughly twice as tall as
    they are wide. The list always ends with an empty string.
    """
    indices = palette_indices(regions.pixels, len(palette))
    glyphs = np.array(list(palette))

    rows = []
    for i, row in enumerate(indices):
        # Vertical compression: keep rows 0, 2, 4, ...
        if i % 2:
            continue
        line = "".join(glyphs[row])
        if add_newline:
            line += LINE_BREAK
        rows.append(line)
    rows.append("")
    return rows


def join_rows(rows: list[str]) -> str:
    return LINE_BREAK.join(rows)
