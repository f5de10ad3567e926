import os
from dataclasses import dataclass
from typing import List

from PIL import Image, UnidentifiedImageError

from .color import rgb_from_pixel
from .errors import ImageLoadError

SUPPORTED_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp', '.gif')


@dataclass
class Pixels:
    width: int
    height: int
    colours: List[int]


def load_pixels(path: str, kind: str = "image") -> Pixels:
    """
    Decode an image file into row-major 24-bit RGB colours.

    Any read or decode failure is raised as ImageLoadError; `kind` names
    the file in the message ("image" or "palette").
    """
    try:
        with Image.open(path) as img:
            img = img.convert('RGBA')
            raw = img.tobytes('raw', 'BGRA')
            width, height = img.size
    except (OSError, UnidentifiedImageError, ValueError) as e:
        raise ImageLoadError(path, e, kind) from e

    colours = [rgb_from_pixel(raw[i:i + 4]) for i in range(0, len(raw), 4)]
    return Pixels(width, height, colours)


def list_images(directory_path: str) -> List[str]:
    # Non-recursive, sorted for a stable batch order
    files = [f for f in os.listdir(directory_path)
             if os.path.isfile(os.path.join(directory_path, f)) and f.lower().endswith(SUPPORTED_EXTENSIONS)]
    files.sort()
    return [os.path.join(directory_path, f) for f in files]
