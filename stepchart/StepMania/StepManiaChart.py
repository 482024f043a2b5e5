import logging
from typing import Dict, List, Optional

from stepchart.Chart import Chart, ChartFormat
from stepchart.Errors import ChartError
from stepchart.StepMania.FieldParsers import (capitalize_first, clean_tag_body, parse_float,
                                              parse_key_value_list, parse_notes_block)
from stepchart.StepMania.Models import BpmChange, DanceMode, DifficultyTrack, Stop
from stepchart.StepMania.Serializer import serialize_chart
from stepchart.StepMania.TagScanner import iter_tags
from stepchart.utils.FileUtils import read_file_with_encodings

logger = logging.getLogger(__name__)


class StepManiaChart(Chart):
    format = ChartFormat.STEPMANIA

    def __init__(self):
        super().__init__(key_count=DanceMode.SINGLE.value)
        self.bpm_changes: List[BpmChange] = []
        self.stops: List[Stop] = []
        self.difficulties: Dict[str, DifficultyTrack] = {}  # Kept sorted by difficulty label

    @classmethod
    def loads(cls, text: str) -> "StepManiaChart":
        """
        Parses .sm text into a new chart.

        :raises ChartParseError: if a number in OFFSET, BPMS, STOPS or NOTES can't be parsed
        """
        chart = cls()
        for tag, body in iter_tags(text):
            chart.process_tag(tag, body)
        return chart

    def dumps(self) -> str:
        return serialize_chart(self)

    def load_from_file(self, path: str, encodings: Optional[List[str]] = None) -> bool:
        try:
            contents = read_file_with_encodings(path, encodings_to_try=encodings)
        except OSError as e:
            logger.error(f"Failed to open {path}: {e}")
            return False

        try:
            loaded = StepManiaChart.loads(contents)
        except ChartError as e:
            logger.error(f"Failed to parse {path}: {e}")
            return False

        # Only take over the parsed state once the whole file was read
        self.__dict__.update(loaded.__dict__)
        logger.info(f"Loaded {path} with {len(self.difficulties)} difficulties")
        return True

    def save_to_file(self, path: str, encoding: str = "utf-8") -> bool:
        try:
            with open(path, "w", encoding=encoding, newline="\n") as f:
                f.write(self.dumps())
        except (OSError, UnicodeEncodeError, LookupError) as e:
            logger.error(f"Failed to save {path}: {e}")
            return False

        logger.info(f"Saved {path}")
        return True

    def process_tag(self, tag: str, body: str):
        body = clean_tag_body(body)

        if tag == "TITLE":
            self.title = capitalize_first(body)
        elif tag == "ARTIST":
            self.artist = body
        elif tag == "MUSIC":
            self.audio_file = body
        elif tag == "OFFSET":
            self.offset = parse_float(tag, body.strip()) * 1000.0
        elif tag == "BPMS":
            self.bpm_changes.extend(BpmChange(beat, bpm) for beat, bpm in parse_key_value_list(tag, body))
            if self.bpm_changes:
                self.bpm = self.bpm_changes[0].bpm
        elif tag == "STOPS":
            self.stops.extend(Stop(beat, duration) for beat, duration in parse_key_value_list(tag, body))
        elif tag == "NOTES":
            track = parse_notes_block(body)
            if track is not None:
                self.add_difficulty(track)
        else:
            logger.debug(f"Ignoring unsupported tag #{tag}")

    def add_difficulty(self, track: DifficultyTrack):
        """
        Stores the track under its difficulty label, replacing any track with the same label.
        The chart's key count follows the most recently added track, even when other tracks
        use a different dance mode.
        """
        self.difficulties[track.difficulty] = track
        self.difficulties = dict(sorted(self.difficulties.items()))
        self.key_count = track.key_count
