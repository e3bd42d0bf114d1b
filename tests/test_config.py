import dataclasses
import math

import pytest

from asciiartist.charsets import DEFAULT, CharacterSet
from asciiartist.config import RenderConfig
from asciiartist.errors import ConfigurationError


def test_defaults():
    config = RenderConfig()
    assert config.width == 120
    assert config.aspect_factor == 0.5
    assert config.charset == CharacterSet(DEFAULT)
    assert config.colour is True
    assert config.luma == "rec601"
    assert config.sampling == "average"
    assert config.workers == 1


def test_string_charset_is_wrapped():
    config = RenderConfig(charset=" #")
    assert isinstance(config.charset, CharacterSet)
    assert config.charset.chars == " #"


@pytest.mark.parametrize("width", [0, -5, 2.5, True])
def test_invalid_width(width):
    with pytest.raises(ConfigurationError, match="width"):
        RenderConfig(width=width)


@pytest.mark.parametrize("factor", [0, -0.5, math.inf, math.nan])
def test_invalid_aspect_factor(factor):
    with pytest.raises(ConfigurationError, match="aspect_factor"):
        RenderConfig(aspect_factor=factor)


def test_empty_charset():
    with pytest.raises(ConfigurationError):
        RenderConfig(charset="")


def test_unknown_luma_and_sampling():
    with pytest.raises(ConfigurationError, match="luma"):
        RenderConfig(luma="srgb")
    with pytest.raises(ConfigurationError, match="sampling"):
        RenderConfig(sampling="bicubic")


def test_invalid_workers():
    with pytest.raises(ConfigurationError, match="workers"):
        RenderConfig(workers=0)


def test_config_is_frozen():
    config = RenderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 10


def test_replace_validates():
    config = RenderConfig().replace(width=40, colour=False)
    assert config.width == 40
    assert config.colour is False
    with pytest.raises(ConfigurationError):
        config.replace(width=0)
