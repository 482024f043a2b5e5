from enum import Enum
from typing import List, Optional

RADAR_SIZE = 5


class DanceMode(Enum):
    SINGLE = 4
    DOUBLE = 8

    @property
    def label(self) -> str:
        return "dance-double" if self is DanceMode.DOUBLE else "dance-single"

    @staticmethod
    def from_keyword(keyword: str) -> "DanceMode":
        # Anything that isn't a doubles stepstype (eg "dance-solo") is treated as singles.
        return DanceMode.DOUBLE if "double" in keyword else DanceMode.SINGLE


class BpmChange:
    def __init__(self, beat: float, bpm: float):
        self.beat = beat
        self.bpm = bpm

    def __eq__(self, other):
        if not isinstance(other, BpmChange):
            return NotImplemented
        return (self.beat, self.bpm) == (other.beat, other.bpm)

    def __repr__(self):
        return f"BpmChange(beat={self.beat!r}, bpm={self.bpm!r})"


class Stop:
    def __init__(self, beat: float, duration: float):
        """
        :param beat: The beat the stop starts on
        :param duration: How long the scroll pauses, in seconds
        """
        self.beat = beat
        self.duration = duration

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return (self.beat, self.duration) == (other.beat, other.duration)

    def __repr__(self):
        return f"Stop(beat={self.beat!r}, duration={self.duration!r})"


class DifficultyTrack:
    def __init__(self,
                 difficulty: str,
                 dance_mode: DanceMode = DanceMode.SINGLE,
                 charter: str = "",
                 meter: int = 0,
                 radar: Optional[List[float]] = None,
                 measures: Optional[List[List[str]]] = None,
                 description: str = "",
                 ):
        """
        :param difficulty: "Beginner", "Easy", "Medium", "Hard", "Challenge" or any custom label
        :param dance_mode: DanceMode.SINGLE (4 columns) or DanceMode.DOUBLE (8 columns)
        :param charter: Free text from the second NOTES header field
        :param meter: The difficulty level, usually 1 to 20
        :param radar: Groove radar values. Always padded or truncated to 5 entries.
        :param measures: A list of measures, each a list of note rows. For example:
        [
            ['0000', '0000', '0000', '0000'],
            ['1000', '0100', '0010', '0001', '1000', '0100', '0010', '0001'],
        ]
        :param description: Reserved, the parser does not fill it
        """
        self.difficulty = difficulty
        self.description = description
        self.dance_mode = dance_mode
        self.charter = charter
        self.meter = meter
        self.radar = normalize_radar(radar or [])
        self.measures: List[List[str]] = measures if measures is not None else []

    @property
    def key_count(self) -> int:
        return self.dance_mode.value

    @property
    def row_count(self) -> int:
        return sum(len(measure) for measure in self.measures)

    def __eq__(self, other):
        if not isinstance(other, DifficultyTrack):
            return NotImplemented
        return (self.difficulty == other.difficulty
                and self.description == other.description
                and self.dance_mode == other.dance_mode
                and self.charter == other.charter
                and self.meter == other.meter
                and self.radar == other.radar
                and self.measures == other.measures)

    def __repr__(self):
        return (f"DifficultyTrack(difficulty={self.difficulty!r}, dance_mode={self.dance_mode.name}, "
                f"meter={self.meter!r}, measures={len(self.measures)})")


def normalize_radar(values: List[float]) -> List[float]:
    radar = [float(value) for value in values[:RADAR_SIZE]]
    return radar + [0.0] * (RADAR_SIZE - len(radar))
