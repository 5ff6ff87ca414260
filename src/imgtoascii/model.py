from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from imgtoascii.errors import ConfigurationError

Pixel = tuple[int, int, int]


@dataclass(frozen=True)
class DensityRamp:
    """Characters ordered from visually densest (index 0) to sparsest."""

    characters: str

    def __post_init__(self):
        if not isinstance(self.characters, str):
            raise ConfigurationError(f"Density ramp must be a string, got {type(self.characters).__name__}")
        if not self.characters:
            raise ConfigurationError("Density ramp must contain at least one character")

    @classmethod
    def coerce(cls, ramp: "DensityRamp | str") -> "DensityRamp":
        return ramp if isinstance(ramp, cls) else cls(ramp)

    @property
    def size(self) -> int:
        return len(self.characters)

    @property
    def step(self) -> float:
        """Brightness span covered by one ramp character."""
        return 256 / self.size

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> str:
        return self.characters[index]

    def __str__(self) -> str:
        return self.characters


@dataclass(frozen=True, eq=False)
class RasterImage:
    width: int
    height: int
    pixels: np.ndarray = field(repr=False)  # (height, width, 3) uint8, row-major

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image dimensions must be non-negative, got {self.width}x{self.height}")
        if not isinstance(self.pixels, np.ndarray) or self.pixels.dtype != np.uint8:
            raise ValueError("Pixels must be a uint8 numpy array")
        if self.pixels.shape != (self.height, self.width, 3):
            raise ValueError(f"Pixel array shape {self.pixels.shape} does not match {self.width}x{self.height}")
        pixels = self.pixels.copy()
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Pixel]) -> "RasterImage":
        """Build an image from a flat row-major sequence of (r, g, b) triples."""
        flat = list(pixels)
        if len(flat) != width * height:
            raise ValueError(f"Expected {width * height} pixels for {width}x{height}, got {len(flat)}")
        arr = np.array(flat, dtype=np.int64).reshape(height, width, 3)
        if arr.size and (arr.min() < 0 or arr.max() > 255):
            raise ValueError("Channel values must be in the range 0-255")
        return cls(width=width, height=height, pixels=arr.astype(np.uint8))

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        rgb = image.convert("RGB")
        arr = np.array(rgb, dtype=np.uint8).reshape(rgb.height, rgb.width, 3)
        return cls(width=rgb.width, height=rgb.height, pixels=arr)

