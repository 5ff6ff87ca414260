import logging

import numpy as np

from imgtoascii.charsets import DENSITY
from imgtoascii.model import DensityRamp, RasterImage
from imgtoascii.sampling import brightness_grid, ramp_positions

logger = logging.getLogger(__name__)


class AsciiRenderer:
    """Maps every pixel of an image to one character of a density ramp."""

    def __init__(self, ramp: DensityRamp | str = DENSITY):
        self.ramp = DensityRamp.coerce(ramp)

    def render(self, image: RasterImage, ramp: DensityRamp | str | None = None) -> list[str]:
        """Return one string per image row, top to bottom.

        An image with no rows or no columns renders as an empty list.
        """
        ramp = self.ramp if ramp is None else DensityRamp.coerce(ramp)
        if image.width == 0 or image.height == 0:
            logger.debug("Empty %dx%d image, nothing to render", image.width, image.height)
            return []

        positions = ramp_positions(brightness_grid(image.pixels), ramp.size)
        glyphs = np.array(list(ramp.characters), dtype=object)[positions]
        logger.debug("Rendered %dx%d image with a %d-character ramp", image.width, image.height, ramp.size)
        return ["".join(row) for row in glyphs.tolist()]


def render(image: RasterImage, ramp: DensityRamp | str = DENSITY) -> list[str]:
    return AsciiRenderer(ramp).render(image)
