import enum
from dataclasses import dataclass
from typing import Optional

from .errors import ArgumentError

DEFAULT_OUTPUT = "output.c"
PALETTE_SIZES = (8, 16, 32)


class ColorFormat(enum.Enum):
    RGB565 = "565"
    RGB888 = "888"


FORMAT_ALIASES = {
    "565": ColorFormat.RGB565,
    "RGB565": ColorFormat.RGB565,
    "888": ColorFormat.RGB888,
    "RGB": ColorFormat.RGB888,
    "RGB888": ColorFormat.RGB888,
}


def parse_format(value: str) -> ColorFormat:
    try:
        return FORMAT_ALIASES[value]
    except KeyError:
        raise ArgumentError(f"Unknown colour format {value}") from None


def parse_palette_size(value) -> int:
    if str(value) not in {str(bits) for bits in PALETTE_SIZES}:
        raise ArgumentError(f"Unknown palette size {value}")
    return int(value)


def capacity_for(bits: int) -> int:
    """Number of distinct indices an unsigned element of `bits` bits can hold."""
    return 1 << bits


@dataclass(frozen=True)
class Config:
    image_path: str
    palette_path: Optional[str] = None
    output_path: str = DEFAULT_OUTPUT
    color_format: ColorFormat = ColorFormat.RGB565
    palette_size: int = 8

    @property
    def capacity(self) -> int:
        return capacity_for(self.palette_size)
