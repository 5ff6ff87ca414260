import logging
from pathlib import Path

from PIL import Image

from imgtoascii.charsets import DENSITY
from imgtoascii.config import ConvertConfig
from imgtoascii.decoder import load_image
from imgtoascii.model import DensityRamp, RasterImage
from imgtoascii.renderer import AsciiRenderer
from imgtoascii.writer import write_lines

logger = logging.getLogger(__name__)


def convert(config: ConvertConfig) -> list[str]:
    """Decode ``config.input_path``, render it and write the text to ``config.output_path``.

    Returns the rendered lines. Decode and write failures propagate as
    DecodeError and WriteError; nothing is written if decoding fails.
    """
    renderer = AsciiRenderer(config.ramp)
    image = load_image(config.input_path)
    lines = renderer.render(image)
    write_lines(config.output_path, lines)
    logger.debug("Converted %s to %s (%d lines)", config.input_path, config.output_path, len(lines))
    return lines


def image_to_ascii(
    image: RasterImage | Image.Image | str | Path,
    ramp: DensityRamp | str = DENSITY,
) -> str:
    """Render an image, a PIL image or an image file as a newline-joined string."""
    renderer = AsciiRenderer(ramp)
    if isinstance(image, Image.Image):
        image = RasterImage.from_pil(image)
    elif not isinstance(image, RasterImage):
        image = load_image(image)
    return "\n".join(renderer.render(image))
