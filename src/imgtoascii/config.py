from dataclasses import dataclass, field
from pathlib import Path

from imgtoascii.charsets import DENSITY
from imgtoascii.model import DensityRamp

DEFAULT_INPUT = Path("imgs/dog.jpg")
DEFAULT_OUTPUT = Path("ASCII/output.txt")


@dataclass(frozen=True)
class ConvertConfig:
    input_path: Path = DEFAULT_INPUT
    output_path: Path = DEFAULT_OUTPUT
    ramp: DensityRamp = field(default_factory=lambda: DensityRamp(DENSITY))

    def __post_init__(self):
        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "ramp", DensityRamp.coerce(self.ramp))
