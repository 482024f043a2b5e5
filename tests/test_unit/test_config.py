import logging

import pytest

from stepchart.Config import Config
from stepchart.utils.FileUtils import DEFAULT_ENCODINGS


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(config_file_path=str(tmp_path / "config.ini"))


def test_defaults_when_sections_missing(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("", encoding="utf-8")
    config = Config(config_file_path=str(path))
    assert config.encodings == DEFAULT_ENCODINGS
    assert config.output_encoding == "utf-8"
    assert config.log_level == logging.INFO


def test_values_are_read(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[io]\nencodings = shift_jis, utf-8\noutput_encoding = utf-8-sig\n\n[logging]\nlevel = debug\n",
                    encoding="utf-8")
    config = Config(config_file_path=str(path))
    assert config.encodings == ["shift_jis", "utf-8"]
    assert config.output_encoding == "utf-8-sig"
    assert config.log_level == logging.DEBUG


def test_unknown_log_level(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[logging]\nlevel = loud\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Config(config_file_path=str(path))
