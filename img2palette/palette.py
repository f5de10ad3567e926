from typing import Dict, Iterable, List, Optional

from .color import to_rgb565
from .config import ColorFormat
from .errors import ColorNotInPalette, PaletteOverflow


def build_palette(pixels: Iterable[int], capacity: Optional[int] = None) -> List[int]:
    """
    Collect the distinct colours of `pixels` in first-seen order.

    With a `capacity`, raises PaletteOverflow as soon as one more distinct
    colour would be needed than the capacity allows. Without one (an
    explicit palette image), every distinct colour is kept.
    """
    seen = set()
    palette = []
    for colour in pixels:
        if colour in seen:
            continue
        if capacity is not None and len(palette) >= capacity:
            raise PaletteOverflow(capacity, capacity.bit_length() - 1)
        seen.add(colour)
        palette.append(colour)
    return palette


def build_index(palette: List[int]) -> Dict[int, int]:
    index = {}
    for position, colour in enumerate(palette):
        if colour in index:
            raise ValueError(f"duplicate palette colour 0x{colour:06X}")
        index[colour] = position
    return index


def missing_colour_message(colour: int, color_format: ColorFormat) -> str:
    if color_format is ColorFormat.RGB565:
        shown = f"0x{to_rgb565(colour):04X} (0x{colour:06X})"
    else:
        shown = f"0x{colour:06X}"
    return f"Error creating colour index array: colour {shown} isn't present in the palette"


def resolve(colour: int, index: Dict[int, int],
            color_format: ColorFormat = ColorFormat.RGB565) -> int:
    # Lookup is on the full 24-bit value, before any RGB565 truncation
    try:
        return index[colour]
    except KeyError:
        raise ColorNotInPalette(colour, missing_colour_message(colour, color_format)) from None


def index_pixels(pixels: Iterable[int], palette: List[int],
                 color_format: ColorFormat = ColorFormat.RGB565) -> List[int]:
    """Map every pixel, in order, to its position in `palette`."""
    index = build_index(palette)
    return [resolve(colour, index, color_format) for colour in pixels]
