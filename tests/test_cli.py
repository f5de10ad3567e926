import runpy
import sys

import pytest

from img2palette.cli import main, parse_config
from img2palette.config import ColorFormat


def test_defaults():
    config, quiet = parse_config(["image.png"])
    assert config.image_path == "image.png"
    assert config.palette_path is None
    assert config.output_path == "output.c"
    assert config.color_format is ColorFormat.RGB565
    assert config.palette_size == 8
    assert not quiet


@pytest.mark.parametrize("value, expected", [
    ("565", ColorFormat.RGB565),
    ("RGB565", ColorFormat.RGB565),
    ("888", ColorFormat.RGB888),
    ("RGB", ColorFormat.RGB888),
    ("RGB888", ColorFormat.RGB888),
])
def test_colour_formats(value, expected):
    config, _ = parse_config(["image.png", "-c", value])
    assert config.color_format is expected


@pytest.mark.parametrize("argv", [
    [],
    ["image.png", "-c", "666"],
    ["image.png", "-c", "rgb565"],
    ["image.png", "-c", "rgb"],
    ["image.png", "--palsize", "12"],
    ["image.png", "--bogus"],
])
def test_bad_arguments_exit_1(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        parse_config(argv)
    assert exc.value.code == 1
    assert "error" in capsys.readouterr().err


def test_help_exits_0(capsys):
    with pytest.raises(SystemExit) as exc:
        parse_config(["-h"])
    assert exc.value.code == 0
    assert "--palsize" in capsys.readouterr().out


def test_success_message(make_image, tmp_path, capsys):
    image = make_image("img.png", [(255, 0, 0)])
    output = tmp_path / "arrays.c"
    assert main([image, "-o", str(output), "--palsize", "16"]) == 0
    assert capsys.readouterr().out.strip() == f'Arrays written successfully to file "{output}"'
    assert "const uint16_t image_data[1]" in output.read_text()


def test_quiet(make_image, tmp_path, capsys):
    image = make_image("img.png", [(255, 0, 0)])
    main([image, "-q", "-o", str(tmp_path / "out.c")])
    assert capsys.readouterr().out == ""


def test_conversion_failure_exits_1(make_image, tmp_path, capsys):
    palette = make_image("pal.png", [(255, 0, 0)])
    image = make_image("img.png", [(0, 0, 255)])
    output = tmp_path / "out.c"
    with pytest.raises(SystemExit) as exc:
        main([image, "-p", palette, "-o", str(output)])
    assert exc.value.code == 1
    assert "isn't present in the palette" in capsys.readouterr().err
    assert not output.exists()


def test_directory_defaults_to_current_directory(tmp_path):
    config, _ = parse_config([str(tmp_path)])
    assert config.output_path == "."


def test_module_entry_point(make_image, tmp_path, monkeypatch, capsys):
    image = make_image("img.png", [(0, 255, 0)])
    output = tmp_path / "out.c"
    monkeypatch.setattr(sys, "argv", ["img2palette", image, "-o", str(output)])
    runpy.run_module("img2palette", run_name="__main__")
    assert "Arrays written successfully" in capsys.readouterr().out
    assert "0x07E0," in output.read_text()
