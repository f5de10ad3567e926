class ConversionError(Exception):
    """Base class for every failure that aborts a conversion."""


class ArgumentError(ConversionError):
    pass


class ImageLoadError(ConversionError):
    def __init__(self, path, reason, kind="image"):
        self.path = path
        self.reason = reason
        super().__init__(f'Error opening {kind} file "{path}": {reason}')


class PaletteOverflow(ConversionError):
    def __init__(self, capacity: int, bits: int, message=None):
        self.capacity = capacity
        self.bits = bits
        super().__init__(message or f"Image file has too many colours for palette size of {bits}")


class ColorNotInPalette(ConversionError):
    def __init__(self, color: int, message: str):
        self.color = color
        super().__init__(message)


class OutputWriteError(ConversionError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error writing output file: {reason}")
