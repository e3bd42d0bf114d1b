import pytest
from loguru import logger
from PIL import Image

from asciiartist.cli import build_parser, main


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


def test_defaults():
    args = build_parser().parse_args(["-i", "x.png"])
    assert args.width == 120
    assert args.aspect_ratio_compensation == 0.5
    assert args.color is True
    assert args.charset is None


def test_input_is_required(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_renders_monochrome(tmp_path, capsys):
    path = tmp_path / "white.png"
    Image.new("RGB", (20, 10), (255, 255, 255)).save(path)
    assert main(["-i", str(path), "-w", "4", "--no-color", "-A", "1.0"]) == 0
    out = capsys.readouterr().out
    assert out == "    \n    \n"


def test_renders_colour_by_default(image_file, capsys):
    assert main(["-i", str(image_file), "-w", "6"]) == 0
    assert "\033[38;2;255;0;0m" in capsys.readouterr().out


def test_custom_charset(tmp_path, capsys):
    path = tmp_path / "black.png"
    Image.new("RGB", (8, 8), (0, 0, 0)).save(path)
    assert main(["-i", str(path), "-w", "2", "-A", "1.0", "--no-color", "-c", "ab"]) == 0
    assert capsys.readouterr().out == "bb\nbb\n"


def test_preset(tmp_path, capsys):
    path = tmp_path / "black.png"
    Image.new("RGB", (8, 8), (0, 0, 0)).save(path)
    assert main(["-i", str(path), "-w", "3", "-A", "1.0", "--no-color", "-p", "blocks"]) == 0
    assert capsys.readouterr().out.split("\n")[0] == "███"


def test_missing_file(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "nope.png")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_invalid_factor(image_file, capsys):
    assert main(["-i", str(image_file), "-A", "0"]) == 1
    assert "aspect_factor" in capsys.readouterr().err


def test_empty_charset(image_file, capsys):
    assert main(["-i", str(image_file), "-c", ""]) == 1
    assert "at least one character" in capsys.readouterr().err


def test_not_an_image(tmp_path, capsys):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    assert main(["-i", str(path)]) == 1
    assert "Cannot read image" in capsys.readouterr().err
