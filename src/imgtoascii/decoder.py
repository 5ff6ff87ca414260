import logging
from pathlib import Path

from PIL import Image

from imgtoascii.errors import DecodeError
from imgtoascii.model import RasterImage

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> RasterImage:
    """Decode the first frame of an image file into RGB pixels.

    Raises DecodeError for missing, empty, corrupt or unsupported files.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            raster = RasterImage.from_pil(image)
    except FileNotFoundError as e:
        raise DecodeError(f"File not found: {path}") from e
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Cannot decode image {path}: {e}") from e
    logger.debug("Decoded %s as %dx%d", path, raster.width, raster.height)
    return raster
