import logging

import pytest

from flexformat import FlexibleColor, FlexFormatError, FormatterConfig


def test_defaults():
    cfg = FormatterConfig()
    assert cfg.date_pattern == "MM/dd/yyyy HH:mm:ss"
    assert cfg.color is FlexibleColor.DEFAULT
    assert not (cfg.show_level or cfg.show_name or cfg.show_date)


def test_invalid_date_pattern():
    with pytest.raises(FlexFormatError):
        FormatterConfig(date_pattern="yyyy-qq")


def test_save_and_load(tmp_path):
    path = str(tmp_path / "flexformat.toml")
    cfg = FormatterConfig(
        date_pattern="yyyy-MM-dd", color=FlexibleColor.GREEN, show_level=True
    )
    cfg.save(path)
    assert FormatterConfig.load(path) == cfg


def test_load_partial_file(tmp_path):
    path = tmp_path / "flexformat.toml"
    path.write_text("show_name = true\n", encoding="utf-8")
    assert FormatterConfig.load(str(path)) == FormatterConfig(show_name=True)


def test_load_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="flexformat.config"):
        cfg = FormatterConfig.load(str(tmp_path / "missing.toml"))
    assert cfg == FormatterConfig()
    assert "using configuration defaults" in caplog.text
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]


@pytest.mark.parametrize(
    "content",
    [
        'date_pattern = "qq"\n',
        'color = "pink"\n',
        "show_level = \n",
    ],
)
def test_load_invalid_file(tmp_path, caplog, content):
    path = tmp_path / "flexformat.toml"
    path.write_text(content, encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="flexformat.config"):
        cfg = FormatterConfig.load(str(path))
    assert cfg == FormatterConfig()
    assert [r.levelno for r in caplog.records] == [logging.ERROR, logging.WARNING]
