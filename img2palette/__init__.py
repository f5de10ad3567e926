from .config import ColorFormat, Config
from .convert import convert, convert_directory, render
from .errors import (ArgumentError, ColorNotInPalette, ConversionError, ImageLoadError,
                     OutputWriteError, PaletteOverflow)

__version__ = "0.1.0"
