import os
from dataclasses import replace
from typing import List

from .config import Config
from .emit import HEADER, emit_image_data, emit_palette
from .errors import ConversionError, OutputWriteError, PaletteOverflow
from .loader import list_images, load_pixels
from .palette import build_palette, index_pixels


def render(config: Config) -> str:
    """
    Run the whole conversion in memory and return the C source text.
    Nothing is written; every failure is raised as a ConversionError.
    """
    image = load_pixels(config.image_path)

    if config.palette_path is not None:
        # An explicit palette is authoritative and never capacity-checked
        source = load_pixels(config.palette_path, kind="palette")
        palette = build_palette(source.colours)
    else:
        palette = build_palette(image.colours, config.capacity)

    indices = index_pixels(image.colours, palette, config.color_format)
    if indices and max(indices) >= config.capacity:
        raise PaletteOverflow(
            config.capacity, config.palette_size,
            f'Palette file "{config.palette_path}" has {len(palette)} colours: index {max(indices)} '
            f"does not fit in {config.palette_size}-bit indices",
        )

    return "".join([
        HEADER,
        "\n",
        emit_palette(palette, config.color_format),
        "\n",
        emit_image_data(indices, config.palette_size),
    ])


def write_output(output_path: str, content: str):
    try:
        with open(output_path, 'w') as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(output_path, e) from e


def convert(config: Config):
    content = render(config)
    write_output(config.output_path, content)


def convert_directory(config: Config, log=print) -> List[str]:
    """
    Convert every image in the directory `config.image_path`, writing
    `<stem>.c` for each one into the directory `config.output_path`.

    Two images sharing a stem are rejected before anything is converted.
    The first conversion failure aborts the batch; outputs already written
    are kept.
    Returns the paths written.
    """
    images = list_images(config.image_path)
    if not images:
        raise ConversionError(f'No image files found in directory "{config.image_path}"')

    # Each image becomes <stem>.c, so two sources sharing a stem would collide
    sources = {}
    for image_path in images:
        stem = os.path.splitext(os.path.basename(image_path))[0]
        if stem in sources:
            raise ConversionError(
                f'"{sources[stem]}" and "{image_path}" would both be written to "{stem}.c"')
        sources[stem] = image_path

    out_dir = config.output_path
    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(out_dir, e) from e

    written = []
    for image_path in images:
        stem = os.path.splitext(os.path.basename(image_path))[0]
        output_path = os.path.join(out_dir, f"{stem}.c")
        convert(replace(config, image_path=image_path, output_path=output_path))
        written.append(output_path)
        if log is not None:
            log(f"[+] {image_path} -> {output_path}")
    return written
