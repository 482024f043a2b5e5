import logging
import os
from typing import Optional

from mutagen import File as MutagenFile
from mutagen import MutagenError

logger = logging.getLogger(__name__)


def get_audio_duration(audio_file_path: str) -> Optional[float]:
    """
    Reads the length of an audio file from its tags/headers without decoding it.

    :return: The duration in seconds, or None if the file is missing or not a recognised audio file
    """
    if not os.path.isfile(audio_file_path):
        return None
    try:
        audio = MutagenFile(audio_file_path)
    except MutagenError as e:
        logger.info(f"Error reading audio duration: {str(e)}")
        return None
    if audio is None or audio.info is None:
        return None
    return float(audio.info.length)


def resolve_audio_path(chart_path: str, audio_file: str) -> Optional[str]:
    # MUSIC is relative to the folder holding the chart
    if not audio_file:
        return None
    return os.path.join(os.path.dirname(os.path.abspath(chart_path)), audio_file)
