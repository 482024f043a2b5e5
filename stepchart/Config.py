import configparser
import logging
import os
from typing import List

from stepchart.utils.FileUtils import DEFAULT_ENCODINGS


class Config:
    def __init__(self, config_file_path: str):
        self.config_file_path = config_file_path
        if not os.path.exists(self.config_file_path):
            raise FileNotFoundError(f"Config file not found at {self.config_file_path}")
        self.config = configparser.ConfigParser()
        self.config.read(self.config_file_path)

        self.encodings: List[str] = self._get_list('io', 'encodings', DEFAULT_ENCODINGS)
        self.output_encoding = self.config.get('io', 'output_encoding', fallback='utf-8')

        level_name = self.config.get('logging', 'level', fallback='INFO').upper()
        self.log_level = logging.getLevelName(level_name)
        if not isinstance(self.log_level, int):
            raise ValueError(f"Unknown logging level {level_name!r} in {self.config_file_path}")

    def _get_list(self, section: str, option: str, default: List[str]) -> List[str]:
        value = self.config.get(section, option, fallback='')
        items = [item.strip() for item in value.split(',') if item.strip()]
        return items or list(default)
