import logging
from typing import List, Optional, Tuple

from stepchart.Errors import ChartParseError
from stepchart.StepMania.Models import DanceMode, DifficultyTrack, RADAR_SIZE

logger = logging.getLogger(__name__)

MEASURE_SEPARATOR = ","
NOTES_HEADER_FIELDS = 5
MIN_NOTES_LINES = NOTES_HEADER_FIELDS + 1


def clean_tag_body(body: str) -> str:
    return body.rstrip("; \t\r\n\f\v")


def capitalize_first(text: str) -> str:
    # str.capitalize() would also lower-case the rest of the title
    return text[:1].upper() + text[1:]


def parse_float(tag: str, token: str) -> float:
    try:
        return float(token)
    except ValueError as e:
        raise ChartParseError(tag=tag, token=token) from e


def parse_int(tag: str, token: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise ChartParseError(tag=tag, token=token, reason="not an integer") from e


def parse_key_value_list(tag: str, body: str) -> List[Tuple[float, float]]:
    """
    Parses a BPMS or STOPS body such as "0.000=120.000,64.000=180.000".
    Tokens without "=" are skipped. Entries keep their file order.

    :raises ChartParseError: if either side of a "beat=value" token is not a number
    """
    pairs = []
    for token in body.split(","):
        token = token.strip()
        key, separator, value = token.partition("=")
        if not separator:
            if token:
                logger.debug(f"Skipping #{tag} entry without '=': {token!r}")
            continue
        pairs.append((parse_float(tag, key.strip()), parse_float(tag, value.strip())))
    return pairs


def parse_radar(token: str) -> List[float]:
    values = []
    for value in token.split(",")[:RADAR_SIZE]:
        value = value.strip()
        values.append(parse_float("NOTES", value) if value else 0.0)
    return values


def _header_field(line: str) -> str:
    # NOTES header fields are terminated by ':' in .sm files
    return line.rstrip(":").strip()


def parse_notes_block(body: str) -> Optional[DifficultyTrack]:
    """
    Parses the body of a #NOTES tag:

        dance-single:
        Charter:
        Easy:
        3:
        0.1,0.2,0.0,0.0,0.0:
        0000
        1000
        ,
        ...

    The first five lines that are not measure separators form the header, every
    line after them is part of the note grid. A separator closes the pending
    measure; an empty pending measure is dropped and rows left pending at the
    end of the body are discarded.

    :return: The parsed track, or None if the block has fewer than 6 lines
    :raises ChartParseError: if the meter or a radar value is not a number
    """
    lines = [line for line in (raw.strip() for raw in body.splitlines()) if line]
    content_line_count = sum(1 for line in lines if line != MEASURE_SEPARATOR)
    if content_line_count < MIN_NOTES_LINES:
        logger.debug(f"Skipping #NOTES block with only {content_line_count} lines")
        return None

    header = []
    grid_start = 0
    for index, line in enumerate(lines):
        if line == MEASURE_SEPARATOR:
            continue
        header.append(_header_field(line))
        if len(header) == NOTES_HEADER_FIELDS:
            grid_start = index + 1
            break

    dance_keyword, charter, difficulty, meter, radar = header
    track = DifficultyTrack(
        difficulty=difficulty,
        dance_mode=DanceMode.from_keyword(dance_keyword),
        charter=charter,
        meter=parse_int("NOTES", meter),
        radar=parse_radar(radar),
    )

    pending_measure: List[str] = []
    for line in lines[grid_start:]:
        if line == MEASURE_SEPARATOR:
            if pending_measure:
                track.measures.append(pending_measure)
                pending_measure = []
        else:
            pending_measure.append(line)

    if pending_measure:
        logger.debug(f"Discarding {len(pending_measure)} rows after the last measure of {difficulty!r}")

    return track
