def rgb_from_pixel(bgra) -> int:
    """
    Pack a (blue, green, red, alpha) sample into a 24-bit RGB value,
    red in the high byte. Alpha is ignored.
    """
    return (bgra[2] << 16) | (bgra[1] << 8) | bgra[0]


def to_rgb565(rgb: int) -> int:
    """
    Truncate a 24-bit RGB value to RGB565: keep the 5/6/5 most significant
    bits of red/green/blue and repack them at bits 11, 5 and 0.
    """
    r = (rgb >> 16) & 0xFF
    g = (rgb >> 8) & 0xFF
    b = rgb & 0xFF
    return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)


def rgb565_to_rgb(value: int) -> int:
    # Low bits are zero-filled, not replicated
    r = (value >> 11) & 0x1F
    g = (value >> 5) & 0x3F
    b = value & 0x1F
    return ((r << 3) << 16) | ((g << 2) << 8) | (b << 3)
