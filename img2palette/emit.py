from typing import Iterable, List

from .color import to_rgb565
from .config import ColorFormat

MAX_LINE_WIDTH = 80
INDENT = "    "
STORAGE_QUALIFIER = "PROGMEM"
HEADER = "#include <stdint.h>\n"


def uint_type(bits: int) -> str:
    if bits not in (8, 16, 32):
        raise ValueError(f"unsupported element width: {bits}")
    return f"uint{bits}_t"


def format_color(colour: int, color_format: ColorFormat) -> str:
    """Hex literal for a palette entry: 4 digits for RGB565, 6 for RGB888."""
    if color_format is ColorFormat.RGB565:
        return f"0x{to_rgb565(colour):04X}"
    return f"0x{colour:06X}"


def wrap_literals(literals: Iterable[str], separator: str = ", ",
                  max_line_width: int = MAX_LINE_WIDTH) -> List[str]:
    """
    Greedily pack literals onto indented lines no wider than max_line_width.

    Each literal keeps its trailing separator and is never split; a line is
    flushed only when the next literal would push it past the limit.
    Trailing whitespace is stripped from the returned lines.
    """
    lines = []
    line = INDENT
    for literal in literals:
        to_add = literal + separator
        if len(line) + len(to_add) > max_line_width and line.strip():
            lines.append(line.rstrip())
            line = INDENT
        line += to_add
    if line.strip():
        lines.append(line.rstrip())
    return lines


def emit_array(name: str, bits: int, literals: List[str], separator: str = ", ",
               max_line_width: int = MAX_LINE_WIDTH) -> str:
    """
    Render a `const uintN_t name[count] PROGMEM = { ... };` declaration.
    """
    out = [f"const {uint_type(bits)} {name}[{len(literals)}] {STORAGE_QUALIFIER} = {{\n"]
    for line in wrap_literals(literals, separator, max_line_width):
        out.append(line + "\n")
    out.append("};\n")
    return "".join(out)


def emit_palette(palette: List[int], color_format: ColorFormat) -> str:
    bits = 16 if color_format is ColorFormat.RGB565 else 32
    return emit_array("palette", bits, [format_color(c, color_format) for c in palette])


def emit_image_data(indices: List[int], bits: int) -> str:
    return emit_array("image_data", bits, [str(i) for i in indices], separator=",")
