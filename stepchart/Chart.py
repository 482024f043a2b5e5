from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional


class ChartFormat(Enum):
    STEPMANIA = "stepmania"


class Chart(ABC):
    """
    Fields and operations shared by every supported chart format.
    """

    format: ChartFormat

    def __init__(self, key_count: int = 4):
        self.title = ""
        self.artist = ""
        self.audio_file = ""
        self.bpm = 0.0  # Base tempo
        self.offset = 0.0  # Milliseconds
        self.key_count = key_count

    @abstractmethod
    def load_from_file(self, path: str, encodings: Optional[List[str]] = None) -> bool:
        """
        :return: True if the file was read and parsed, False otherwise. Never raises.
        """

    @abstractmethod
    def save_to_file(self, path: str, encoding: str = "utf-8") -> bool:
        """
        :return: True if the whole chart was written, False otherwise. Never raises.
        """
