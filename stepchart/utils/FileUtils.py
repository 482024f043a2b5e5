import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_ENCODINGS = ['utf-8', 'windows-1252', 'latin-1']


def read_file_with_encodings(file_path: str, encodings_to_try: Optional[List[str]] = None) -> str:
    """
    Attempts to read a file using multiple encodings. Falls back to UTF-8 with error replacement if all fail.

    :param file_path: Path to the file to be read.
    :param encodings_to_try: List of encodings to attempt, in order. Defaults to common encodings.
    :return: The contents of the file as a string.
    :raises OSError: if the file cannot be opened or read.
    """
    if not encodings_to_try:
        encodings_to_try = DEFAULT_ENCODINGS

    for encoding in encodings_to_try:
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                return f.read()
        except UnicodeDecodeError:
            logger.debug(f"Could not decode {file_path} as {encoding}")
        except LookupError:
            logger.warning(f"Unknown encoding {encoding!r}, skipping it")

    with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
        contents = f.read()
    logger.warning(f"Read {file_path} using utf-8 with errors replaced.")
    return contents
