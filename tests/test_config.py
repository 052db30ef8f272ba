import pytest
from pydantic import ValidationError

from templatetree.core.config import (
    DEFAULT_TEMPLATE_EXT,
    ParserConfig,
    block_delims,
    delims,
    ext,
    modes,
)


def test_defaults():
    config = ParserConfig.build("templates")

    assert config.root == "templates"
    assert config.extension == DEFAULT_TEMPLATE_EXT == ".tmpl"
    assert not config.has_delims
    assert not config.has_block_delims
    assert config.dir_mode == 0o755
    assert config.file_mode == 0o644


def test_extension_is_lowercased_and_dotted():
    assert ParserConfig.build("t", ext(".TeX")).extension == ".tex"
    assert ParserConfig.build("t", ext("md")).extension == ".md"


def test_empty_extension_rejected():
    with pytest.raises(ValidationError):
        ParserConfig.build("t", ext(""))


def test_options_apply_in_order():
    config = ParserConfig.build(
        "t", ext(".md"), delims("[[", "]]"), ext(".tex"), modes(file_mode=0o600)
    )

    assert config.extension == ".tex"
    assert (config.left_delim, config.right_delim) == ("[[", "]]")
    assert config.has_delims
    assert config.file_mode == 0o600
    assert config.dir_mode == 0o755


def test_empty_delims_restore_defaults():
    config = ParserConfig.build("t", delims("[[", "]]"), delims("", ""))
    assert not config.has_delims


@pytest.mark.parametrize("left,right", [("[[", ""), ("", "]]")])
def test_half_set_delims_rejected(left, right):
    with pytest.raises(ValidationError):
        ParserConfig.build("t", delims(left, right))


def test_half_set_block_delims_rejected():
    with pytest.raises(ValidationError):
        ParserConfig.build("t", block_delims("<%", ""))


def test_config_is_frozen():
    config = ParserConfig.build("t")
    with pytest.raises(ValidationError):
        config.extension = ".md"
